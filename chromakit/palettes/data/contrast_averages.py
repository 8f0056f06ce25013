# Copyright (c) 2026 ChromaKit
# SPDX-License-Identifier: MIT

"""
Average APCA contrast per shade id, measured over the whole catalog.

Rows are ``(shade, on_white, on_black)``: the mean Lc of every family's
shade as text on white and as text on black. The palette generator
retargets synthesized shades toward these values.
"""

from __future__ import annotations

ContrastRow = tuple[int, float, float]

TAILWIND_CONTRAST_AVERAGES: tuple[ContrastRow, ...] = (
    (50, 0.0, -103.23709300847759),
    (100, 3.528103379826523, -98.02667024487722),
    (200, 15.092271784760364, -88.68019735070786),
    (300, 27.242031589143064, -75.75659686356335),
    (400, 44.48605690610333, -57.72533945457971),
    (500, 57.819088240678234, -44.091635514838295),
    (600, 70.19092360161136, -31.621075324358934),
    (700, 80.90865931610666, -21.045341375963254),
    (800, 89.53677114294916, -12.457986344132063),
    (900, 94.62282337188485, -7.941044592199961),
    (950, 102.27068052931581, 0.0),
)

RADIX_CONTRAST_AVERAGES: dict[str, tuple[ContrastRow, ...]] = {
    "light": (
        (1, 0.0, -106.38203664165813),
        (2, 0.0, -103.96494885142049),
        (3, 0.0, -98.77155596443654),
        (4, 10.734692270816181, -93.12838928228786),
        (5, 16.739803287688193, -86.90863107142702),
        (6, 23.75642506147641, -79.42675383279962),
        (7, 32.78926214388217, -69.8750602664213),
        (8, 44.60486096562658, -57.525969124533404),
        (9, 55.27312758065561, -39.830246671427695),
        (10, 58.40316583683905, -36.69270331117056),
        (11, 54.42995610238435, -16.816058029497984),
        (12, 98.3626951077654, -0.243977199339859),
    ),
    "dark": (
        (1, 105.16947703033875, 0.0),
        (2, 104.47455521749035, 0.0),
        (3, 102.31533864046163, 0.0),
        (4, 79.98334841751968, 0.0),
        (5, 77.54881079709789, -1.984447666347993),
        (6, 92.37416767093004, -8.98795881001414),
        (7, 86.17941884292664, -15.900343754636117),
        (8, 77.01680949547635, -24.749728877729627),
        (9, 57.71029507274669, -37.39641558057034),
        (10, 51.71405180792631, -46.705233801257535),
        (11, 36.71666321535775, -65.76575135717155),
        (12, 12.81264448594129, -90.87575135366401),
    ),
    "light_alpha": (
        (1, 0.0, 0.0),
        (2, 0.0, 0.0),
        (3, 1.6778397947987858, 0.0),
        (4, 11.64749283807309, -0.9187071404069177),
        (5, 17.871664630999266, -1.8981555689901124),
        (6, 24.960110746128674, -1.7129308909781782),
        (7, 33.977121034699685, -1.7943406335718308),
        (8, 45.76469098760112, -4.1353233242117975),
        (9, 57.46417120813366, -10.6281928280184),
        (10, 61.76677681304326, -9.492979096123447),
        (11, 54.42629359498634, -13.14877814805867),
        (12, 98.36185920560881, -0.243977199339859),
    ),
    "dark_alpha": (
        (1, 0.0, 0.0),
        (2, 0.0, 0.0),
        (3, 5.844199475615428, 0.0),
        (4, 10.46300119060984, 0.0),
        (5, 11.453738874489753, 0.0),
        (6, 11.918279717348529, -3.399334949353237),
        (7, 14.085526852463719, -11.076865474725812),
        (8, 17.649907157244478, -21.315517896776708),
        (9, 24.281440987561567, -35.28162257337803),
        (10, 22.63078002209196, -44.67078117681845),
        (11, 29.91223522220564, -65.29391671148325),
        (12, 11.525106838459077, -90.76532903552133),
    ),
}
