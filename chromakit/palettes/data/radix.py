# Copyright (c) 2026 ChromaKit
# SPDX-License-Identifier: MIT

"""
Radix UI reference palettes.

Each family holds twelve shades (1-12). Every shade carries four
variants: ``light``, ``dark``, ``light_alpha`` and ``dark_alpha``,
stored as OKLCh tuples ``(L, C, H)`` or ``(L, C, H, alpha)`` with L on
the 0-1 scale.

Source: https://www.radix-ui.com/colors
"""

from __future__ import annotations

RadixShadeValues = dict[str, tuple[float, ...]]

RADIX_COLORS: dict[str, dict[int, RadixShadeValues]] = {
    "Amber": {
        1: {
            "light": (0.994031, 0.002769, 84.624476),
            "dark": (0.183564, 0.012647, 77.267509),
            "light_alpha": (0.661508, 0.159903, 73.444584, 0.016),
            "dark_alpha": (0.679959, 0.261387, 36.13155, 0.017),
        },
        2: {
            "light": (0.986233, 0.024042, 100.257601),
            "dark": (0.211684, 0.017947, 78.676127),
            "light_alpha": (0.842987, 0.202655, 100.038377, 0.079),
            "dark_alpha": (0.797349, 0.197709, 70.406902, 0.047),
        },
        3: {
            "light": (0.969029, 0.068584, 100.359936),
            "dark": (0.257507, 0.043726, 74.558131),
            "light_alpha": (0.886323, 0.213141, 99.878679, 0.22),
            "dark_alpha": (0.780293, 0.204245, 62.664688, 0.118),
        },
        4: {
            "light": (0.94535, 0.104252, 98.191835),
            "dark": (0.296211, 0.071462, 76.247545),
            "light_alpha": (0.868497, 0.20602, 94.93456, 0.35),
            "dark_alpha": (0.763469, 0.209927, 57.422465, 0.185),
        },
        5: {
            "light": (0.918449, 0.133285, 98.395637),
            "dark": (0.336868, 0.081221, 76.413366),
            "light_alpha": (0.847255, 0.201329, 95.777482, 0.475),
            "dark_alpha": (0.777102, 0.205169, 61.659992, 0.24),
        },
        6: {
            "light": (0.881196, 0.123692, 93.237565),
            "dark": (0.387068, 0.078442, 75.091434),
            "light_alpha": (0.776364, 0.182997, 86.797474, 0.495),
            "dark_alpha": (0.805108, 0.195572, 69.330788, 0.299),
        },
        7: {
            "light": (0.827363, 0.121997, 86.175405),
            "dark": (0.453174, 0.08173, 74.548895),
            "light_alpha": (0.703704, 0.16865, 78.1719, 0.557),
            "dark_alpha": (0.831235, 0.175263, 72.400593, 0.383),
        },
        8: {
            "light": (0.758196, 0.140386, 76.701097),
            "dark": (0.536031, 0.09641, 73.574303),
            "light_alpha": (0.666493, 0.167553, 68.127441, 0.699),
            "dark_alpha": (0.837634, 0.16723, 73.297226, 0.5),
        },
        9: {
            "light": (0.85623, 0.177838, 81.370244),
            "dark": (0.85623, 0.177838, 81.370244),
            "light_alpha": (0.816195, 0.198697, 74.046491, 0.742),
            "dark_alpha": (0.855755, 0.177929, 81.24756),
        },
        10: {
            "light": (0.831455, 0.167899, 80.937753),
            "dark": (0.90153, 0.206492, 96.982176),
            "light_alpha": (0.780064, 0.190444, 73.419614, 0.726),
            "dark_alpha": (0.902001, 0.20678, 97.10813),
        },
        11: {
            "light": (0.569207, 0.143894, 67.2809),
            "dark": (0.870612, 0.175365, 85.067792),
            "light_alpha": (0.569207, 0.143894, 67.2809),
            "dark_alpha": (0.870612, 0.175365, 85.067792),
        },
        12: {
            "light": (0.351901, 0.048522, 53.73707),
            "dark": (0.934934, 0.071533, 85.989327),
            "light_alpha": (0.351901, 0.048522, 53.73707),
            "dark_alpha": (0.934934, 0.071533, 85.989327),
        },
    },
    "Black": {
        1: {
            "light": (0, 0, 0, 0),
            "dark": (0, 0, 0, 0),
            "light_alpha": (0, 0, 0, 0.05),
            "dark_alpha": (0, 0, 0, 0),
        },
        2: {
            "light": (0, 0, 0, 0),
            "dark": (0, 0, 0, 0),
            "light_alpha": (0, 0, 0, 0.1),
            "dark_alpha": (0, 0, 0, 0),
        },
        3: {
            "light": (0, 0, 0, 0),
            "dark": (0, 0, 0, 0),
            "light_alpha": (0, 0, 0, 0.15),
            "dark_alpha": (0, 0, 0, 0),
        },
        4: {
            "light": (0, 0, 0, 0),
            "dark": (0, 0, 0, 0),
            "light_alpha": (0, 0, 0, 0.2),
            "dark_alpha": (0, 0, 0, 0),
        },
        5: {
            "light": (0, 0, 0, 0),
            "dark": (0, 0, 0, 0),
            "light_alpha": (0, 0, 0, 0.3),
            "dark_alpha": (0, 0, 0, 0),
        },
        6: {
            "light": (0, 0, 0, 0),
            "dark": (0, 0, 0, 0),
            "light_alpha": (0, 0, 0, 0.4),
            "dark_alpha": (0, 0, 0, 0),
        },
        7: {
            "light": (0, 0, 0, 0),
            "dark": (0, 0, 0, 0),
            "light_alpha": (0, 0, 0, 0.5),
            "dark_alpha": (0, 0, 0, 0),
        },
        8: {
            "light": (0, 0, 0, 0),
            "dark": (0, 0, 0, 0),
            "light_alpha": (0, 0, 0, 0.6),
            "dark_alpha": (0, 0, 0, 0),
        },
        9: {
            "light": (0, 0, 0, 0),
            "dark": (0, 0, 0, 0),
            "light_alpha": (0, 0, 0, 0.7),
            "dark_alpha": (0, 0, 0, 0),
        },
        10: {
            "light": (0, 0, 0, 0),
            "dark": (0, 0, 0, 0),
            "light_alpha": (0, 0, 0, 0.8),
            "dark_alpha": (0, 0, 0, 0),
        },
        11: {
            "light": (0, 0, 0, 0),
            "dark": (0, 0, 0, 0),
            "light_alpha": (0, 0, 0, 0.9),
            "dark_alpha": (0, 0, 0, 0),
        },
        12: {
            "light": (0, 0, 0, 0),
            "dark": (0, 0, 0, 0),
            "light_alpha": (0, 0, 0, 0.95),
            "dark_alpha": (0, 0, 0, 0),
        },
    },
    "Blue": {
        1: {
            "light": (0.993194, 0.003287, 247.643574),
            "dark": (0.193176, 0.025792, 256.789586),
            "light_alpha": (0.622042, 0.227505, 250.437323, 0.016),
            "dark_alpha": (0.539254, 0.274881, 259.849534, 0.059),
        },
        2: {
            "light": (0.981504, 0.00955, 243.25783),
            "dark": (0.212993, 0.02951, 258.837453),
            "light_alpha": (0.603973, 0.198719, 245.812367, 0.04),
            "dark_alpha": (0.584141, 0.240798, 257.012108, 0.085),
        },
        3: {
            "light": (0.96003, 0.019873, 236.712645),
            "dark": (0.274119, 0.066876, 253.962294),
            "light_alpha": (0.600961, 0.203368, 246.908615, 0.087),
            "dark_alpha": (0.600292, 0.236784, 255.782156, 0.219),
        },
        4: {
            "light": (0.937345, 0.037072, 239.026637),
            "dark": (0.316969, 0.100186, 248.299614),
            "light_alpha": (0.637545, 0.220385, 247.77169, 0.146),
            "dark_alpha": (0.59835, 0.240144, 253.453025, 0.324),
        },
        5: {
            "light": (0.906006, 0.053476, 242.803196),
            "dark": (0.36485, 0.108394, 249.723942),
            "light_alpha": (0.612387, 0.226096, 250.481533, 0.212),
            "dark_alpha": (0.622073, 0.225936, 251.844309, 0.4),
        },
        6: {
            "light": (0.86384, 0.068587, 243.181656),
            "dark": (0.416055, 0.112463, 251.66039),
            "light_alpha": (0.580052, 0.21669, 250.951, 0.291),
            "dark_alpha": (0.653348, 0.205138, 251.993663, 0.475),
        },
        7: {
            "light": (0.809182, 0.088413, 243.33956),
            "dark": (0.474841, 0.121112, 252.838661),
            "light_alpha": (0.5515, 0.206325, 251.020091, 0.393),
            "dark_alpha": (0.673539, 0.191189, 252.938641, 0.572),
        },
        8: {
            "light": (0.734837, 0.121101, 242.995185),
            "dark": (0.541287, 0.139586, 253.211354),
            "light_alpha": (0.546838, 0.203683, 250.757245, 0.55),
            "dark_alpha": (0.679737, 0.186913, 253.301078, 0.702),
        },
        9: {
            "light": (0.649325, 0.193037, 251.813205),
            "dark": (0.649325, 0.193037, 251.813205),
            "light_alpha": (0.563595, 0.24246, 255.634956, 0.753),
            "dark_alpha": (0.663077, 0.197318, 251.512732, 0.967),
        },
        10: {
            "light": (0.621126, 0.18373, 251.917486),
            "dark": (0.689008, 0.169675, 251.45655),
            "light_alpha": (0.529338, 0.228445, 255.727545, 0.765),
            "dark_alpha": (0.704505, 0.172566, 251.443688, 0.971),
        },
        11: {
            "light": (0.557742, 0.188897, 253.009733),
            "dark": (0.76787, 0.134711, 248.843937),
            "light_alpha": (0.557742, 0.188897, 253.009733),
            "dark_alpha": (0.76787, 0.134711, 248.843937),
        },
        12: {
            "light": (0.32397, 0.096502, 258.955565),
            "dark": (0.907212, 0.051146, 238.273403),
            "light_alpha": (0.32397, 0.096502, 258.955565),
            "dark_alpha": (0.907212, 0.051146, 238.273403),
        },
    },
    "Bronze": {
        1: {
            "light": (0.991535, 0.00103, 15.916051),
            "dark": (0.180636, 0.005269, 41.551193),
            "light_alpha": (0.305993, 0.133098, 27.497001, 0.012),
            "dark_alpha": (0.622547, 0.282483, 29.564981, 0.009),
        },
        2: {
            "light": (0.980619, 0.007328, 42.988044),
            "dark": (0.214737, 0.005038, 41.544358),
            "light_alpha": (0.533504, 0.198794, 36.668321, 0.04),
            "dark_alpha": (0.882495, 0.07388, 45.324437, 0.043),
        },
        3: {
            "light": (0.9528, 0.010226, 44.263802),
            "dark": (0.254511, 0.008139, 42.651776),
            "light_alpha": (0.42207, 0.133979, 45.504638, 0.083),
            "dark_alpha": (0.911184, 0.059091, 51.159737, 0.085),
        },
        4: {
            "light": (0.925247, 0.013799, 43.573056),
            "dark": (0.291135, 0.010231, 45.497118),
            "light_alpha": (0.37149, 0.132809, 39.104739, 0.122),
            "dark_alpha": (0.909053, 0.06038, 38.182833, 0.127),
        },
        5: {
            "light": (0.895409, 0.01777, 42.643485),
            "dark": (0.329355, 0.012809, 43.30575),
            "light_alpha": (0.363725, 0.121691, 42.570513, 0.169),
            "dark_alpha": (0.919448, 0.057763, 51.963622, 0.173),
        },
        6: {
            "light": (0.85994, 0.022522, 43.401073),
            "dark": (0.374386, 0.016025, 44.264429),
            "light_alpha": (0.350981, 0.123064, 39.996052, 0.224),
            "dark_alpha": (0.921987, 0.054692, 43.76081, 0.227),
        },
        7: {
            "light": (0.811294, 0.029502, 41.93884),
            "dark": (0.429861, 0.019952, 44.840273),
            "light_alpha": (0.334485, 0.119423, 38.995699, 0.295),
            "dark_alpha": (0.924074, 0.053372, 44.452428, 0.295),
        },
        8: {
            "light": (0.741835, 0.038753, 41.183257),
            "dark": (0.498552, 0.024469, 45.169299),
            "light_alpha": (0.319586, 0.113492, 39.167686, 0.393),
            "dark_alpha": (0.919633, 0.056681, 44.445835, 0.387),
        },
        9: {
            "light": (0.627458, 0.046013, 44.292179),
            "dark": (0.627458, 0.046013, 44.292179),
            "light_alpha": (0.290436, 0.098528, 42.358865, 0.546),
            "dark_alpha": (0.898452, 0.072388, 43.521565, 0.585),
        },
        10: {
            "light": (0.587959, 0.045188, 42.442891),
            "dark": (0.668669, 0.045251, 44.285955),
            "light_alpha": (0.267803, 0.089554, 43.168867, 0.585),
            "dark_alpha": (0.908801, 0.064507, 43.560125, 0.635),
        },
        11: {
            "light": (0.510489, 0.043717, 38.365703),
            "dark": (0.791846, 0.042953, 44.500967),
            "light_alpha": (0.510489, 0.043717, 38.365703),
            "dark_alpha": (0.791846, 0.042953, 44.500967),
        },
        12: {
            "light": (0.32923, 0.029324, 35.240771),
            "dark": (0.915092, 0.017371, 50.301278),
            "light_alpha": (0.32923, 0.029324, 35.240771),
            "dark_alpha": (0.915092, 0.017371, 50.301278),
        },
    },
    "Brown": {
        1: {
            "light": (0.99434, 0.001504, 63.240447),
            "dark": (0.178459, 0.004956, 81.547464),
            "light_alpha": (0.561002, 0.158571, 53.522629, 0.012),
            "dark_alpha": (0.580156, 0.261694, 29.773642, 0.005),
        },
        2: {
            "light": (0.983211, 0.005805, 65.734584),
            "dark": (0.213096, 0.007455, 51.619027),
            "light_alpha": (0.561002, 0.158571, 53.522629, 0.036),
            "dark_alpha": (0.830784, 0.120779, 50.972532, 0.043),
        },
        3: {
            "light": (0.954137, 0.012771, 67.815129),
            "dark": (0.25358, 0.012805, 53.478335),
            "light_alpha": (0.506271, 0.137027, 57.878394, 0.091),
            "dark_alpha": (0.854992, 0.110676, 51.57324, 0.093),
        },
        4: {
            "light": (0.92614, 0.020276, 66.853735),
            "dark": (0.288355, 0.018185, 55.419742),
            "light_alpha": (0.490028, 0.131606, 58.943859, 0.146),
            "dark_alpha": (0.865748, 0.10629, 53.992922, 0.135),
        },
        5: {
            "light": (0.896863, 0.028645, 65.788467),
            "dark": (0.324732, 0.024287, 55.879415),
            "light_alpha": (0.491296, 0.138431, 54.828205, 0.204),
            "dark_alpha": (0.863776, 0.10754, 53.524579, 0.181),
        },
        6: {
            "light": (0.86243, 0.039032, 65.465112),
            "dark": (0.370203, 0.031746, 57.687165),
            "light_alpha": (0.489737, 0.135433, 56.50017, 0.271),
            "dark_alpha": (0.869285, 0.105493, 56.196665, 0.24),
        },
        7: {
            "light": (0.815278, 0.053124, 64.219924),
            "dark": (0.42897, 0.040932, 59.834996),
            "light_alpha": (0.488016, 0.138042, 54.486518, 0.361),
            "dark_alpha": (0.868885, 0.106784, 59.304678, 0.32),
        },
        8: {
            "light": (0.746706, 0.071658, 62.448297),
            "dark": (0.50857, 0.053466, 62.167662),
            "light_alpha": (0.480222, 0.137873, 53.225514, 0.487),
            "dark_alpha": (0.871428, 0.109187, 60.837126, 0.433),
        },
        9: {
            "light": (0.632677, 0.078434, 60.774785),
            "dark": (0.632677, 0.078434, 60.774785),
            "light_alpha": (0.414435, 0.118991, 53.577944, 0.632),
            "dark_alpha": (0.865358, 0.115193, 61.08475, 0.627),
        },
        10: {
            "light": (0.596735, 0.072496, 59.281021),
            "dark": (0.674402, 0.074938, 61.481013),
            "light_alpha": (0.375127, 0.107597, 53.660887, 0.655),
            "dark_alpha": (0.877961, 0.103321, 60.964803, 0.677),
        },
        11: {
            "light": (0.51207, 0.058336, 55.458132),
            "dark": (0.798238, 0.062774, 62.509246),
            "light_alpha": (0.51207, 0.058336, 55.458132),
            "dark_alpha": (0.798238, 0.062774, 62.509246),
        },
        12: {
            "light": (0.331547, 0.018039, 46.975401),
            "dark": (0.917611, 0.035956, 75.666727),
            "light_alpha": (0.331547, 0.018039, 46.975401),
            "dark_alpha": (0.917611, 0.035956, 75.666727),
        },
    },
    "Crimson": {
        1: {
            "light": (0.993824, 0.00329, 356.308113),
            "dark": (0.189272, 0.014311, 354.172353),
            "light_alpha": (0.49967, 0.224298, 1.78422, 0.012),
            "dark_alpha": (0.659282, 0.292567, 6.223777, 0.03),
        },
        2: {
            "light": (0.981756, 0.008037, 357.233627),
            "dark": (0.206793, 0.02212, 352.896037),
            "light_alpha": (0.534623, 0.238937, 13.834949, 0.032),
            "dark_alpha": (0.699545, 0.263118, 1.884745, 0.055),
        },
        3: {
            "light": (0.954144, 0.026076, 356.273344),
            "dark": (0.255653, 0.059485, 353.875686),
            "light_alpha": (0.586109, 0.263637, 14.747349, 0.083),
            "dark_alpha": (0.689991, 0.277798, 0.289947, 0.148),
        },
        4: {
            "light": (0.925204, 0.041113, 356.300227),
            "dark": (0.293063, 0.094404, 354.062775),
            "light_alpha": (0.570526, 0.256487, 13.408225, 0.134),
            "dark_alpha": (0.681969, 0.292439, 359.665496, 0.227),
        },
        5: {
            "light": (0.89279, 0.053658, 355.765739),
            "dark": (0.332635, 0.104445, 354.748282),
            "light_alpha": (0.532361, 0.239157, 12.817392, 0.189),
            "dark_alpha": (0.695002, 0.280401, 358.07244, 0.286),
        },
        6: {
            "light": (0.855007, 0.064591, 355.574317),
            "dark": (0.381786, 0.108753, 355.492406),
            "light_alpha": (0.494491, 0.222444, 12.681867, 0.244),
            "dark_alpha": (0.719276, 0.25343, 357.242412, 0.349),
        },
        7: {
            "light": (0.807788, 0.078388, 354.797703),
            "dark": (0.450073, 0.120019, 356.70648),
            "light_alpha": (0.462855, 0.208289, 9.384352, 0.318),
            "dark_alpha": (0.741297, 0.226728, 357.994091, 0.454),
        },
        8: {
            "light": (0.74996, 0.098816, 354.118517),
            "dark": (0.541916, 0.148154, 358.335196),
            "light_alpha": (0.452506, 0.203724, 8.318726, 0.408),
            "dark_alpha": (0.741911, 0.220167, 359.417056, 0.614),
        },
        9: {
            "light": (0.63429, 0.213026, 1.303802),
            "dark": (0.63429, 0.213026, 1.303802),
            "light_alpha": (0.544765, 0.245637, 11.497264, 0.702),
            "dark_alpha": (0.717208, 0.246622, 1.625239, 0.832),
        },
        10: {
            "light": (0.607986, 0.211125, 2.355289),
            "dark": (0.663692, 0.196715, 1.950811),
            "light_alpha": (0.523829, 0.236176, 12.108904, 0.734),
            "dark_alpha": (0.738889, 0.221458, 2.359272, 0.853),
        },
        11: {
            "light": (0.552093, 0.207422, 4.487084),
            "dark": (0.787373, 0.167003, 6.719047),
            "light_alpha": (0.552093, 0.207422, 4.487084),
            "dark_alpha": (0.787373, 0.167003, 6.719047),
        },
        12: {
            "light": (0.340788, 0.112851, 356.827261),
            "dark": (0.908829, 0.054067, 346.656709),
            "light_alpha": (0.340788, 0.112851, 356.827261),
            "dark_alpha": (0.908829, 0.054067, 346.656709),
        },
    },
    "Cyan": {
        1: {
            "light": (0.992106, 0.003717, 219.246809),
            "dark": (0.191342, 0.017159, 219.885446),
            "light_alpha": (0.640332, 0.157768, 223.842473, 0.02),
            "dark_alpha": (0.690465, 0.197518, 237.012324, 0.034),
        },
        2: {
            "light": (0.980275, 0.008965, 202.887895),
            "dark": (0.214073, 0.018213, 225.411913),
            "light_alpha": (0.588488, 0.1344, 209.630098, 0.044),
            "dark_alpha": (0.742377, 0.183132, 228.375373, 0.059),
        },
        3: {
            "light": (0.958144, 0.02648, 203.610409),
            "dark": (0.272161, 0.044038, 222.47424),
            "light_alpha": (0.690273, 0.158312, 208.346561, 0.114),
            "dark_alpha": (0.745913, 0.182417, 226.721334, 0.152),
        },
        4: {
            "light": (0.931944, 0.041246, 204.736057),
            "dark": (0.31498, 0.062907, 222.141985),
            "light_alpha": (0.679198, 0.156106, 209.247909, 0.181),
            "dark_alpha": (0.735739, 0.187939, 228.485959, 0.227),
        },
        5: {
            "light": (0.899772, 0.053793, 206.492018),
            "dark": (0.361659, 0.070318, 221.508253),
            "light_alpha": (0.640213, 0.147825, 210.929902, 0.248),
            "dark_alpha": (0.756412, 0.180293, 225.335011, 0.29),
        },
        6: {
            "light": (0.859347, 0.066005, 207.66737),
            "dark": (0.413545, 0.07477, 221.726579),
            "light_alpha": (0.612353, 0.142999, 214.04818, 0.33),
            "dark_alpha": (0.782389, 0.166538, 222.791095, 0.358),
        },
        7: {
            "light": (0.804543, 0.081664, 209.576491),
            "dark": (0.477699, 0.082712, 221.413986),
            "light_alpha": (0.580793, 0.136862, 216.079876, 0.436),
            "dark_alpha": (0.796403, 0.156512, 222.28269, 0.446),
        },
        8: {
            "light": (0.72699, 0.109877, 211.672597),
            "dark": (0.5577, 0.098413, 220.709682),
            "light_alpha": (0.575769, 0.137019, 217.62432, 0.612),
            "dark_alpha": (0.802956, 0.152477, 221.790556, 0.572),
        },
        9: {
            "light": (0.66093, 0.121538, 221.491411),
            "dark": (0.66093, 0.121538, 221.491411),
            "light_alpha": (0.545808, 0.141313, 228.667467, 0.718),
            "dark_alpha": (0.805153, 0.152549, 221.096764, 0.748),
        },
        10: {
            "light": (0.626722, 0.114096, 221.315083),
            "dark": (0.697974, 0.119533, 219.122439),
            "light_alpha": (0.506757, 0.130602, 228.200185, 0.738),
            "dark_alpha": (0.819738, 0.145158, 219.345849, 0.786),
        },
        11: {
            "light": (0.540307, 0.126994, 223.718019),
            "dark": (0.785577, 0.115432, 213.396299),
            "light_alpha": (0.540307, 0.126994, 223.718019),
            "dark_alpha": (0.785577, 0.115432, 213.396299),
        },
        12: {
            "light": (0.331685, 0.052766, 218.573057),
            "dark": (0.909292, 0.05685, 211.7256),
            "light_alpha": (0.331685, 0.052766, 218.573057),
            "dark_alpha": (0.909292, 0.05685, 211.7256),
        },
    },
    "Gold": {
        1: {
            "light": (0.993696, 0.001106, 106.419717),
            "dark": (0.182215, 0.002251, 106.620874),
            "light_alpha": (0.447946, 0.110224, 110.13058, 0.012),
            "dark_alpha": (0.857419, 0.214569, 110.183175, 0.005),
        },
        2: {
            "light": (0.980851, 0.008594, 97.335012),
            "dark": (0.216479, 0.006077, 92.491037),
            "light_alpha": (0.610213, 0.144065, 97.767941, 0.048),
            "dark_alpha": (0.919074, 0.102965, 90.20021, 0.043),
        },
        3: {
            "light": (0.953372, 0.011755, 94.693964),
            "dark": (0.254892, 0.007576, 88.279751),
            "light_alpha": (0.467246, 0.111268, 100.766788, 0.091),
            "dark_alpha": (0.95918, 0.073209, 93.633435, 0.08),
        },
        4: {
            "light": (0.925707, 0.014973, 93.176382),
            "dark": (0.29078, 0.009504, 86.759229),
            "light_alpha": (0.419882, 0.098433, 94.994493, 0.134),
            "dark_alpha": (0.954507, 0.053834, 81.493271, 0.118),
        },
        5: {
            "light": (0.895811, 0.019154, 90.725023),
            "dark": (0.328894, 0.011493, 83.663105),
            "light_alpha": (0.406716, 0.095606, 93.298995, 0.185),
            "dark_alpha": (0.96227, 0.055728, 88.77859, 0.16),
        },
        6: {
            "light": (0.859638, 0.024749, 88.384208),
            "dark": (0.373619, 0.013783, 82.43317),
            "light_alpha": (0.394546, 0.092348, 88.06479, 0.244),
            "dark_alpha": (0.95077, 0.052611, 77.273306, 0.215),
        },
        7: {
            "light": (0.810137, 0.031722, 83.40963),
            "dark": (0.429449, 0.016463, 80.919619),
            "light_alpha": (0.380574, 0.090784, 76.997306, 0.322),
            "dark_alpha": (0.962133, 0.045821, 82.437763, 0.278),
        },
        8: {
            "light": (0.738633, 0.042203, 78.170042),
            "dark": (0.498297, 0.020423, 79.496352),
            "light_alpha": (0.372667, 0.090986, 71.563588, 0.436),
            "dark_alpha": (0.957668, 0.048033, 79.922875, 0.366),
        },
        9: {
            "light": (0.620581, 0.049285, 78.131633),
            "dark": (0.620581, 0.049285, 78.131633),
            "light_alpha": (0.328237, 0.080631, 72.152664, 0.589),
            "dark_alpha": (0.92314, 0.080316, 77.48967, 0.551),
        },
        10: {
            "light": (0.587739, 0.046549, 77.419861),
            "dark": (0.662198, 0.047259, 77.181506),
            "light_alpha": (0.305437, 0.074631, 73.243898, 0.62),
            "dark_alpha": (0.931719, 0.071827, 76.105763, 0.601),
        },
        11: {
            "light": (0.503876, 0.039337, 78.099571),
            "dark": (0.794019, 0.041023, 77.180799),
            "light_alpha": (0.503876, 0.039337, 78.099571),
            "dark_alpha": (0.794019, 0.041023, 77.180799),
        },
        12: {
            "light": (0.332082, 0.018943, 81.666144),
            "dark": (0.915081, 0.013681, 77.440908),
            "light_alpha": (0.332082, 0.018943, 81.666144),
            "dark_alpha": (0.915081, 0.013681, 77.440908),
        },
    },
    "Grass": {
        1: {
            "light": (0.993975, 0.005336, 146.387032),
            "dark": (0.188347, 0.014098, 155.811704),
            "light_alpha": (0.688949, 0.29695, 145.677035, 0.016),
            "dark_alpha": (0.843957, 0.363593, 145.896504, 0.017),
        },
        2: {
            "light": (0.981983, 0.009186, 145.930563),
            "dark": (0.211037, 0.014108, 151.483594),
            "light_alpha": (0.555585, 0.237891, 145.705897, 0.036),
            "dark_alpha": (0.885304, 0.227274, 151.74741, 0.038),
        },
        3: {
            "light": (0.960763, 0.023143, 145.272111),
            "dark": (0.267128, 0.02999, 150.731732),
            "light_alpha": (0.564204, 0.240974, 145.215019, 0.083),
            "dark_alpha": (0.89107, 0.211839, 149.367791, 0.106),
        },
        4: {
            "light": (0.934161, 0.03696, 146.183743),
            "dark": (0.31908, 0.05222, 150.414021),
            "light_alpha": (0.555724, 0.238662, 145.43105, 0.134),
            "dark_alpha": (0.887209, 0.229293, 149.306419, 0.169),
        },
        5: {
            "light": (0.901259, 0.052914, 146.354857),
            "dark": (0.366777, 0.061921, 149.911375),
            "light_alpha": (0.541733, 0.231727, 145.296339, 0.197),
            "dark_alpha": (0.896201, 0.214579, 149.124153, 0.227),
        },
        6: {
            "light": (0.857781, 0.071368, 146.829463),
            "dark": (0.416359, 0.072081, 149.339218),
            "light_alpha": (0.510164, 0.219054, 145.35519, 0.275),
            "dark_alpha": (0.901199, 0.203019, 148.807754, 0.29),
        },
        7: {
            "light": (0.798452, 0.094991, 147.471185),
            "dark": (0.468266, 0.083506, 148.894155),
            "light_alpha": (0.494951, 0.213626, 145.561531, 0.377),
            "dark_alpha": (0.904317, 0.19678, 148.259541, 0.358),
        },
        8: {
            "light": (0.716454, 0.130018, 148.346443),
            "dark": (0.523827, 0.097265, 148.247854),
            "light_alpha": (0.483541, 0.209059, 145.780665, 0.522),
            "dark_alpha": (0.905072, 0.19486, 148.287345, 0.433),
        },
        9: {
            "light": (0.651577, 0.146852, 147.366257),
            "dark": (0.651577, 0.146852, 147.366257),
            "light_alpha": (0.459883, 0.199013, 145.523156, 0.624),
            "dark_alpha": (0.897899, 0.215831, 147.212416, 0.622),
        },
        10: {
            "light": (0.613784, 0.141578, 147.317846),
            "dark": (0.689777, 0.145362, 147.641367),
            "light_alpha": (0.424315, 0.183457, 145.489772, 0.659),
            "dark_alpha": (0.900706, 0.200202, 147.551095, 0.673),
        },
        11: {
            "light": (0.526752, 0.129623, 147.178374),
            "dark": (0.779815, 0.142037, 148.4633),
            "light_alpha": (0.526752, 0.129623, 147.178374),
            "dark_alpha": (0.779815, 0.142037, 148.4633),
        },
        12: {
            "light": (0.32683, 0.053475, 148.584624),
            "dark": (0.910964, 0.077974, 144.907379),
            "light_alpha": (0.32683, 0.053475, 148.584624),
            "dark_alpha": (0.910964, 0.077974, 144.907379),
        },
    },
    "Gray": {
        1: {
            "light": (0.99089, 0, 180),
            "dark": (0.178027, 0, 146.309932),
            "light_alpha": (0, 0, 0, 0.012),
            "dark_alpha": (0, 0, 0, 0),
        },
        2: {
            "light": (0.980997, 0, 170.537678),
            "dark": (0.213379, 0, 180),
            "light_alpha": (0, 0, 0, 0.024),
            "dark_alpha": (1, 0, 166.75948, 0.034),
        },
        3: {
            "light": (0.95347, 0, 192.528808),
            "dark": (0.253747, 0, 180),
            "light_alpha": (0, 0, 0, 0.063),
            "dark_alpha": (1, 0, 166.75948, 0.071),
        },
        4: {
            "light": (0.929606, 0, 180),
            "dark": (0.283246, 0, 168.690068),
            "light_alpha": (0, 0, 0, 0.09),
            "dark_alpha": (1, 0, 166.75948, 0.105),
        },
        5: {
            "light": (0.907919, 0, 172.405357),
            "dark": (0.313008, 0, 180),
            "light_alpha": (0, 0, 0, 0.122),
            "dark_alpha": (1, 0, 166.75948, 0.134),
        },
        6: {
            "light": (0.883757, 0, 180),
            "dark": (0.349001, 0, 180),
            "light_alpha": (0, 0, 0, 0.153),
            "dark_alpha": (1, 0, 166.75948, 0.172),
        },
        7: {
            "light": (0.850754, 0, 180),
            "dark": (0.402283, 0, 180),
            "light_alpha": (0, 0, 0, 0.192),
            "dark_alpha": (1, 0, 166.75948, 0.231),
        },
        8: {
            "light": (0.791002, 0, 165.963757),
            "dark": (0.487723, 0, 164.054604),
            "light_alpha": (0, 0, 0, 0.267),
            "dark_alpha": (1, 0, 166.75948, 0.332),
        },
        9: {
            "light": (0.643459, 0, 180),
            "dark": (0.537907, 0, 180),
            "light_alpha": (0, 0, 0, 0.447),
            "dark_alpha": (1, 0, 166.75948, 0.391),
        },
        10: {
            "light": (0.608505, 0, 171.869898),
            "dark": (0.584345, 0, 180),
            "light_alpha": (0, 0, 0, 0.486),
            "dark_alpha": (1, 0, 166.75948, 0.445),
        },
        11: {
            "light": (0.503088, 0, 180),
            "dark": (0.770027, 0, 167.471192),
            "light_alpha": (0, 0, 0, 0.608),
            "dark_alpha": (1, 0, 166.75948, 0.685),
        },
        12: {
            "light": (0.243005, 0, 180),
            "dark": (0.948863, 0, 192.528808),
            "light_alpha": (0, 0, 0, 0.875),
            "dark_alpha": (1, 0, 166.75948, 0.929),
        },
    },
    "Green": {
        1: {
            "light": (0.994285, 0.004309, 159.055298),
            "dark": (0.188782, 0.012708, 163.267927),
            "light_alpha": (0.692823, 0.264415, 150.024877, 0.016),
            "dark_alpha": (0.847004, 0.337033, 148.665642, 0.017),
        },
        2: {
            "light": (0.981578, 0.009113, 155.307935),
            "dark": (0.212674, 0.01601, 162.224957),
            "light_alpha": (0.556996, 0.225267, 147.646895, 0.036),
            "dark_alpha": (0.864353, 0.235439, 157.903639, 0.043),
        },
        3: {
            "light": (0.958804, 0.022928, 156.379403),
            "dark": (0.271414, 0.038808, 162.667901),
            "light_alpha": (0.578971, 0.233649, 147.959243, 0.087),
            "dark_alpha": (0.878882, 0.227023, 159.121673, 0.114),
        },
        4: {
            "light": (0.93255, 0.036406, 156.600956),
            "dark": (0.318222, 0.057307, 161.543887),
            "light_alpha": (0.573241, 0.231056, 148.062409, 0.142),
            "dark_alpha": (0.87504, 0.237067, 158.563933, 0.173),
        },
        5: {
            "light": (0.899515, 0.04963, 157.222841),
            "dark": (0.364848, 0.065999, 161.112844),
            "light_alpha": (0.540061, 0.212252, 149.048034, 0.204),
            "dark_alpha": (0.885326, 0.217909, 159.803615, 0.232),
        },
        6: {
            "light": (0.857001, 0.064502, 157.885758),
            "dark": (0.413351, 0.073232, 160.731986),
            "light_alpha": (0.523564, 0.203871, 149.391826, 0.283),
            "dark_alpha": (0.893522, 0.19915, 160.015178, 0.29),
        },
        7: {
            "light": (0.797728, 0.083883, 159.01916),
            "dark": (0.467371, 0.082837, 159.908244),
            "light_alpha": (0.500677, 0.190049, 150.374874, 0.389),
            "dark_alpha": (0.897827, 0.191479, 158.66977, 0.362),
        },
        8: {
            "light": (0.714357, 0.1124, 160.598732),
            "dark": (0.527462, 0.096184, 159.192817),
            "light_alpha": (0.49607, 0.178208, 152.795525, 0.55),
            "dark_alpha": (0.900308, 0.185467, 159.090571, 0.442),
        },
        9: {
            "light": (0.640488, 0.132739, 157.750852),
            "dark": (0.640488, 0.132739, 157.750852),
            "light_alpha": (0.47792, 0.17835, 151.17404, 0.667),
            "dark_alpha": (0.892731, 0.198115, 157.377573, 0.61),
        },
        10: {
            "light": (0.611246, 0.126315, 158.306918),
            "dark": (0.67552, 0.141228, 157.560209),
            "light_alpha": (0.448635, 0.166092, 151.504673, 0.691),
            "dark_alpha": (0.895499, 0.199054, 157.098142, 0.66),
        },
        11: {
            "light": (0.529039, 0.133035, 158.331971),
            "dark": (0.77968, 0.165686, 157.230511),
            "light_alpha": (0.529039, 0.133035, 158.331971),
            "dark_alpha": (0.77968, 0.165686, 157.230511),
        },
        12: {
            "light": (0.321757, 0.047415, 164.615927),
            "dark": (0.904808, 0.082755, 158.276073),
            "light_alpha": (0.321757, 0.047415, 164.615927),
            "dark_alpha": (0.904808, 0.082755, 158.276073),
        },
    },
    "Indigo": {
        1: {
            "light": (0.994242, 0.001475, 286.372759),
            "dark": (0.190661, 0.024715, 276.724749),
            "light_alpha": (0.288811, 0.191902, 265.449399, 0.008),
            "dark_alpha": (0.499992, 0.298009, 263.953046, 0.055),
        },
        2: {
            "light": (0.9829, 0.008026, 271.376836),
            "dark": (0.208828, 0.030192, 275.950636),
            "light_alpha": (0.442781, 0.271599, 263.503356, 0.028),
            "dark_alpha": (0.557938, 0.254826, 268.104209, 0.085),
        },
        3: {
            "light": (0.960723, 0.017164, 268.546189),
            "dark": (0.272172, 0.06931, 267.841027),
            "light_alpha": (0.472885, 0.263082, 261.661342, 0.067),
            "dark_alpha": (0.583572, 0.243655, 264.616777, 0.223),
        },
        4: {
            "light": (0.935277, 0.033803, 268.486043),
            "dark": (0.318986, 0.093218, 267.038994),
            "light_alpha": (0.509032, 0.29433, 262.155169, 0.114),
            "dark_alpha": (0.59272, 0.237606, 264.89801, 0.324),
        },
        5: {
            "light": (0.90322, 0.051136, 269.978503),
            "dark": (0.361776, 0.104518, 267.503367),
            "light_alpha": (0.505386, 0.296739, 262.378861, 0.169),
            "dark_alpha": (0.612747, 0.224448, 266.337527, 0.4),
        },
        6: {
            "light": (0.862964, 0.071396, 271.508252),
            "dark": (0.40374, 0.110574, 268.339527),
            "light_alpha": (0.492794, 0.297422, 262.757078, 0.232),
            "dark_alpha": (0.636855, 0.208913, 266.996546, 0.467),
        },
        7: {
            "light": (0.806815, 0.086877, 271.371148),
            "dark": (0.450286, 0.120239, 268.799941),
            "light_alpha": (0.44598, 0.269593, 262.803919, 0.314),
            "dark_alpha": (0.650044, 0.20052, 267.566687, 0.547),
        },
        8: {
            "light": (0.730054, 0.11328, 270.523442),
            "dark": (0.502675, 0.137218, 268.405901),
            "light_alpha": (0.426586, 0.257179, 262.78394, 0.432),
            "dark_alpha": (0.656218, 0.196653, 268.275445, 0.652),
        },
        9: {
            "light": (0.543619, 0.191167, 267.076341),
            "dark": (0.543619, 0.191167, 267.076341),
            "light_alpha": (0.410396, 0.248427, 262.719451, 0.726),
            "dark_alpha": (0.613296, 0.224088, 266.63472, 0.824),
        },
        10: {
            "light": (0.511212, 0.19455, 266.476393),
            "dark": (0.589921, 0.175694, 269.187804),
            "light_alpha": (0.394109, 0.241051, 262.850307, 0.765),
            "dark_alpha": (0.650771, 0.200254, 269.381059, 0.858),
        },
        11: {
            "light": (0.509716, 0.172814, 267.107956),
            "dark": (0.777233, 0.1233, 273.279649),
            "light_alpha": (0.509716, 0.172814, 267.107956),
            "dark_alpha": (0.777233, 0.1233, 273.279649),
        },
        12: {
            "light": (0.312575, 0.085588, 268.561532),
            "dark": (0.911026, 0.042791, 269.990246),
            "light_alpha": (0.312575, 0.085588, 268.561532),
            "dark_alpha": (0.911026, 0.042791, 269.990246),
        },
    },
    "Iris": {
        1: {
            "light": (0.994477, 0.002581, 286.352591),
            "dark": (0.192775, 0.021631, 284.188035),
            "light_alpha": (0.468546, 0.321565, 264.380285, 0.008),
            "dark_alpha": (0.515756, 0.285713, 270.490225, 0.051),
        },
        2: {
            "light": (0.981245, 0.009259, 284.099198),
            "dark": (0.208549, 0.029236, 286.543239),
            "light_alpha": (0.420512, 0.286755, 264.596588, 0.028),
            "dark_alpha": (0.567157, 0.259308, 277.781232, 0.08),
        },
        3: {
            "light": (0.961449, 0.01751, 283.803825),
            "dark": (0.272849, 0.068597, 278.58187),
            "light_alpha": (0.427261, 0.286236, 263.90261, 0.059),
            "dark_alpha": (0.587367, 0.243394, 274.625308, 0.219),
        },
        4: {
            "light": (0.935114, 0.035298, 283.439759),
            "dark": (0.31877, 0.101953, 276.098525),
            "light_alpha": (0.470546, 0.320224, 264.157849, 0.099),
            "dark_alpha": (0.577526, 0.248876, 272.62918, 0.337),
        },
        5: {
            "light": (0.904453, 0.052612, 283.774568),
            "dark": (0.358068, 0.109291, 277.405083),
            "light_alpha": (0.469182, 0.321178, 264.123908, 0.142),
            "dark_alpha": (0.601795, 0.234112, 275.079868, 0.4),
        },
        6: {
            "light": (0.864582, 0.06963, 283.105623),
            "dark": (0.398786, 0.111735, 279.644215),
            "light_alpha": (0.446963, 0.307523, 264.002492, 0.2),
            "dark_alpha": (0.633036, 0.215774, 278.282106, 0.454),
        },
        7: {
            "light": (0.807921, 0.088499, 282.85223),
            "dark": (0.447988, 0.120077, 280.784134),
            "light_alpha": (0.413467, 0.283654, 264.097015, 0.279),
            "dark_alpha": (0.656854, 0.201033, 279.325642, 0.534),
        },
        8: {
            "light": (0.729171, 0.118281, 281.482778),
            "dark": (0.507297, 0.138081, 281.094261),
            "light_alpha": (0.392435, 0.268191, 264.088655, 0.389),
            "dark_alpha": (0.663431, 0.197627, 280.396661, 0.652),
        },
        9: {
            "light": (0.540312, 0.183923, 278.296081),
            "dark": (0.540312, 0.183923, 278.296081),
            "light_alpha": (0.35911, 0.248839, 264.052023, 0.644),
            "dark_alpha": (0.623487, 0.221697, 277.822851, 0.799),
        },
        10: {
            "light": (0.508629, 0.186223, 277.486932),
            "dark": (0.586676, 0.172057, 281.185014),
            "light_alpha": (0.34431, 0.238583, 264.052023, 0.683),
            "dark_alpha": (0.660076, 0.20038, 281.047849, 0.832),
        },
        11: {
            "light": (0.510443, 0.173338, 279.688599),
            "dark": (0.775711, 0.131084, 286.563276),
            "light_alpha": (0.510443, 0.173338, 279.688599),
            "dark_alpha": (0.775711, 0.131084, 286.563276),
        },
        12: {
            "light": (0.314527, 0.098864, 277.363391),
            "dark": (0.914202, 0.041882, 286.978987),
            "light_alpha": (0.314527, 0.098864, 277.363391),
            "dark_alpha": (0.914202, 0.041882, 286.978987),
        },
    },
    "Jade": {
        1: {
            "light": (0.994518, 0.003741, 172.633414),
            "dark": (0.187955, 0.013981, 166.297836),
            "light_alpha": (0.704375, 0.203193, 164.516147, 0.016),
            "dark_alpha": (0.847004, 0.337033, 148.665642, 0.017),
        },
        2: {
            "light": (0.981521, 0.00892, 160.30339),
            "dark": (0.215805, 0.017957, 166.111452),
            "light_alpha": (0.592471, 0.223118, 150.407977, 0.04),
            "dark_alpha": (0.869477, 0.233149, 160.329558, 0.047),
        },
        3: {
            "light": (0.959616, 0.022105, 161.88495),
            "dark": (0.272368, 0.0422, 166.818957),
            "light_alpha": (0.581583, 0.214045, 151.535748, 0.087),
            "dark_alpha": (0.874502, 0.24012, 161.718973, 0.118),
        },
        4: {
            "light": (0.933904, 0.034009, 163.537849),
            "dark": (0.316373, 0.057462, 168.020339),
            "light_alpha": (0.576688, 0.206104, 152.867805, 0.142),
            "dark_alpha": (0.874656, 0.229629, 164.250208, 0.173),
        },
        5: {
            "light": (0.901913, 0.046171, 164.776897),
            "dark": (0.361816, 0.064301, 168.517562),
            "light_alpha": (0.557533, 0.196928, 153.463855, 0.204),
            "dark_alpha": (0.885326, 0.210929, 165.709462, 0.227),
        },
        6: {
            "light": (0.859209, 0.059163, 166.879713),
            "dark": (0.410822, 0.06828, 169.689445),
            "light_alpha": (0.533489, 0.17536, 156.93082, 0.287),
            "dark_alpha": (0.895806, 0.18619, 169.081797, 0.286),
        },
        7: {
            "light": (0.800266, 0.07693, 169.533376),
            "dark": (0.468483, 0.075256, 170.638539),
            "light_alpha": (0.520752, 0.164376, 159.110695, 0.397),
            "dark_alpha": (0.901555, 0.174477, 168.607363, 0.362),
        },
        8: {
            "light": (0.720915, 0.102648, 173.373394),
            "dark": (0.536902, 0.087925, 171.795557),
            "light_alpha": (0.523645, 0.152022, 164.474662, 0.561),
            "dark_alpha": (0.905546, 0.165251, 171.602408, 0.45),
        },
        9: {
            "light": (0.642057, 0.115004, 170.84823),
            "dark": (0.642057, 0.115004, 170.84823),
            "light_alpha": (0.487814, 0.143364, 163.640942, 0.683),
            "dark_alpha": (0.898854, 0.17309, 170.517665, 0.606),
        },
        10: {
            "light": (0.613411, 0.109899, 170.613263),
            "dark": (0.677642, 0.125233, 169.870478),
            "light_alpha": (0.457957, 0.134652, 163.609798, 0.702),
            "dark_alpha": (0.901137, 0.174654, 170.209988, 0.656),
        },
        11: {
            "light": (0.528894, 0.126998, 167.165741),
            "dark": (0.785353, 0.156141, 167.09505),
            "light_alpha": (0.528894, 0.126998, 167.165741),
            "dark_alpha": (0.785353, 0.156141, 167.09505),
        },
        12: {
            "light": (0.32569, 0.041017, 169.781462),
            "dark": (0.902665, 0.077594, 166.97787),
            "light_alpha": (0.32569, 0.041017, 169.781462),
            "dark_alpha": (0.902665, 0.077594, 166.97787),
        },
    },
    "Lime": {
        1: {
            "light": (0.992433, 0.004194, 120.668813),
            "dark": (0.180421, 0.014392, 120.256997),
            "light_alpha": (0.622986, 0.19808, 131.202759, 0.02),
            "dark_alpha": (0.81148, 0.35041, 145.442579, 0.009),
        },
        2: {
            "light": (0.981728, 0.00978, 116.69527),
            "dark": (0.207992, 0.019354, 128.971067),
            "light_alpha": (0.633945, 0.173532, 120.003363, 0.048),
            "dark_alpha": (0.885423, 0.30406, 135.818877, 0.038),
        },
        3: {
            "light": (0.959424, 0.043321, 119.097562),
            "dark": (0.266168, 0.034321, 132.180505),
            "light_alpha": (0.749451, 0.22479, 126.799451, 0.15),
            "dark_alpha": (0.90833, 0.242392, 134.457642, 0.101),
        },
        4: {
            "light": (0.932074, 0.068882, 120.37983),
            "dark": (0.316507, 0.046948, 131.83098),
            "light_alpha": (0.740418, 0.226239, 128.044083, 0.24),
            "dark_alpha": (0.916395, 0.222117, 133.291464, 0.16),
        },
        5: {
            "light": (0.897358, 0.087018, 121.837299),
            "dark": (0.363389, 0.057878, 131.642981),
            "light_alpha": (0.696638, 0.213365, 128.223398, 0.322),
            "dark_alpha": (0.920318, 0.209895, 133.126294, 0.215),
        },
        6: {
            "light": (0.853009, 0.099345, 123.382963),
            "dark": (0.411576, 0.068615, 131.402943),
            "light_alpha": (0.640289, 0.200639, 129.671773, 0.4),
            "dark_alpha": (0.924927, 0.202755, 131.646618, 0.274),
        },
        7: {
            "light": (0.794639, 0.110745, 125.306033),
            "dark": (0.464377, 0.080045, 131.163723),
            "light_alpha": (0.586779, 0.188364, 131.354269, 0.491),
            "dark_alpha": (0.925786, 0.196107, 132.334649, 0.341),
        },
        8: {
            "light": (0.723623, 0.134779, 128.058782),
            "dark": (0.524318, 0.094514, 130.857827),
            "light_alpha": (0.558585, 0.184998, 133.093977, 0.624),
            "dark_alpha": (0.928637, 0.192425, 131.245319, 0.416),
        },
        9: {
            "light": (0.887543, 0.174909, 126.087225),
            "dark": (0.887543, 0.174909, 126.087225),
            "light_alpha": (0.809815, 0.26092, 131.442777, 0.534),
            "dark_alpha": (0.938683, 0.186014, 126.239027, 0.925),
        },
        10: {
            "light": (0.858884, 0.187741, 126.734712),
            "dark": (0.941794, 0.175419, 123.728376),
            "light_alpha": (0.781734, 0.251657, 131.389909, 0.604),
            "dark_alpha": (0.945714, 0.175795, 123.570159, 0.996),
        },
        11: {
            "light": (0.543753, 0.111312, 128.634109),
            "dark": (0.867765, 0.15571, 124.784956),
            "light_alpha": (0.543753, 0.111312, 128.634109),
            "dark_alpha": (0.867765, 0.15571, 124.784956),
        },
        12: {
            "light": (0.353658, 0.057409, 121.181955),
            "dark": (0.946445, 0.081914, 122.616203),
            "light_alpha": (0.353658, 0.057409, 121.181955),
            "dark_alpha": (0.946445, 0.081914, 122.616203),
        },
    },
    "Mauve": {
        1: {
            "light": (0.991848, 0.001806, 321.132512),
            "dark": (0.179888, 0.004264, 307.78901),
            "light_alpha": (0.339783, 0.161726, 331.38619, 0.012),
            "dark_alpha": (0, 0, 0, 0),
        },
        2: {
            "light": (0.983249, 0.003272, 311.220034),
            "dark": (0.215151, 0.004079, 307.844055),
            "light_alpha": (0.269105, 0.138809, 301.29691, 0.024),
            "dark_alpha": (0.995415, 0.003262, 311.220504, 0.034),
        },
        3: {
            "light": (0.955553, 0.005921, 314.236248),
            "dark": (0.255023, 0.005534, 306.475432),
            "light_alpha": (0.216379, 0.114229, 301.896271, 0.063),
            "dark_alpha": (0.954553, 0.022052, 289.579223, 0.077),
        },
        4: {
            "light": (0.931554, 0.0078, 310.00994),
            "dark": (0.284491, 0.007603, 307.753929),
            "light_alpha": (0.192325, 0.098624, 297.033794, 0.095),
            "dark_alpha": (0.952335, 0.032053, 310.938083, 0.111),
        },
        5: {
            "light": (0.909038, 0.010078, 306.607675),
            "dark": (0.313827, 0.008959, 306.945572),
            "light_alpha": (0.1947, 0.103132, 297.5174, 0.126),
            "dark_alpha": (0.942379, 0.035306, 303.58886, 0.145),
        },
        6: {
            "light": (0.885998, 0.011577, 303.951821),
            "dark": (0.350114, 0.010073, 303.983218),
            "light_alpha": (0.161979, 0.089783, 290.13419, 0.153),
            "dark_alpha": (0.954671, 0.028179, 306.110052, 0.183),
        },
        7: {
            "light": (0.853611, 0.014263, 300.592269),
            "dark": (0.401558, 0.012198, 304.447184),
            "light_alpha": (0.169949, 0.089161, 293.436591, 0.197),
            "dark_alpha": (0.955108, 0.027043, 297.740355, 0.246),
        },
        8: {
            "light": (0.793575, 0.019308, 293.522014),
            "dark": (0.491897, 0.015928, 300.74452),
            "light_alpha": (0.149004, 0.089573, 275.566286, 0.271),
            "dark_alpha": (0.948268, 0.031318, 297.987085, 0.361),
        },
        9: {
            "light": (0.645786, 0.019464, 292.616032),
            "dark": (0.54047, 0.016937, 293.971393),
            "light_alpha": (0.12078, 0.063844, 286.363851, 0.451),
            "dark_alpha": (0.947395, 0.03107, 295.466045, 0.424),
        },
        10: {
            "light": (0.610589, 0.018496, 293.071739),
            "dark": (0.586217, 0.016656, 295.36468),
            "light_alpha": (0.110048, 0.057882, 281.469116, 0.491),
            "dark_alpha": (0.952383, 0.028524, 297.093345, 0.479),
        },
        11: {
            "light": (0.50476, 0.015995, 296.08493),
            "dark": (0.769763, 0.014013, 296.607613),
            "light_alpha": (0.0946, 0.05248, 300.397626, 0.612),
            "dark_alpha": (0.974308, 0.014537, 291.572227, 0.712),
        },
        12: {
            "light": (0.244608, 0.013395, 298.045201),
            "dark": (0.949418, 0.002611, 286.349778),
            "light_alpha": (0.073139, 0.040109, 303.384453, 0.879),
            "dark_alpha": (0.994556, 0.00295, 286.345862, 0.937),
        },
    },
    "Mint": {
        1: {
            "light": (0.992775, 0.005262, 183.68376),
            "dark": (0.188377, 0.011553, 192.273188),
            "light_alpha": (0.740867, 0.199251, 170.047886, 0.02),
            "dark_alpha": (0.887481, 0.204419, 193.137688, 0.017),
        },
        2: {
            "light": (0.982036, 0.010067, 178.659107),
            "dark": (0.210121, 0.017243, 196.60776),
            "light_alpha": (0.629086, 0.173606, 167.711358, 0.044),
            "dark_alpha": (0.880114, 0.200728, 193.160186, 0.043),
        },
        3: {
            "light": (0.959533, 0.029915, 179.573489),
            "dark": (0.268702, 0.038958, 192.52777),
            "light_alpha": (0.709276, 0.196349, 167.922851, 0.114),
            "dark_alpha": (0.893439, 0.197527, 193.230019, 0.11),
        },
        4: {
            "light": (0.93301, 0.046982, 178.983373),
            "dark": (0.313467, 0.057979, 191.646348),
            "light_alpha": (0.695828, 0.190968, 168.612684, 0.181),
            "dark_alpha": (0.888773, 0.204338, 190.682841, 0.169),
        },
        5: {
            "light": (0.899443, 0.060833, 178.721042),
            "dark": (0.359366, 0.063387, 188.93785),
            "light_alpha": (0.652343, 0.176042, 170.005815, 0.255),
            "dark_alpha": (0.894123, 0.194873, 187.550863, 0.223),
        },
        6: {
            "light": (0.855944, 0.071903, 178.682191),
            "dark": (0.410431, 0.066513, 186.270682),
            "light_alpha": (0.60789, 0.16382, 170.099995, 0.334),
            "dark_alpha": (0.90053, 0.178815, 185.291461, 0.286),
        },
        7: {
            "light": (0.797885, 0.084849, 178.218035),
            "dark": (0.470891, 0.072796, 183.350896),
            "light_alpha": (0.558905, 0.150391, 170.193965, 0.432),
            "dark_alpha": (0.906803, 0.163827, 182.202606, 0.362),
        },
        8: {
            "light": (0.72204, 0.106581, 177.68837),
            "dark": (0.540114, 0.08502, 179.559153),
            "light_alpha": (0.5436, 0.147614, 169.576306, 0.581),
            "dark_alpha": (0.908027, 0.160153, 178.679304, 0.454),
        },
        9: {
            "light": (0.869624, 0.099848, 177.969742),
            "dark": (0.869624, 0.099848, 177.969742),
            "light_alpha": (0.712979, 0.194303, 169.198095, 0.381),
            "dark_alpha": (0.931981, 0.108278, 177.881723, 0.904),
        },
        10: {
            "light": (0.841158, 0.099749, 177.769023),
            "dark": (0.916162, 0.079616, 179.364974),
            "light_alpha": (0.660188, 0.180338, 168.983629, 0.416),
            "dark_alpha": (0.949466, 0.082428, 179.231412, 0.95),
        },
        11: {
            "light": (0.511757, 0.094976, 176.020173),
            "dark": (0.795473, 0.118447, 176.384064),
            "light_alpha": (0.511757, 0.094976, 176.020173),
            "dark_alpha": (0.795473, 0.118447, 176.384064),
        },
        12: {
            "light": (0.349701, 0.050536, 181.437436),
            "dark": (0.930492, 0.056888, 168.487136),
            "light_alpha": (0.349701, 0.050536, 181.437436),
            "dark_alpha": (0.930492, 0.056888, 168.487136),
        },
    },
    "Olive": {
        1: {
            "light": (0.993052, 0.001518, 149.084381),
            "dark": (0.179732, 0.004278, 128.338255),
            "light_alpha": (0.395408, 0.165159, 145.811704, 0.012),
            "dark_alpha": (0, 0, 0, 0),
        },
        2: {
            "light": (0.982972, 0.003325, 144.76033),
            "dark": (0.211656, 0.004106, 128.287361),
            "light_alpha": (0.358645, 0.147824, 145.866817, 0.028),
            "dark_alpha": (0.989101, 0.00465, 123.64736, 0.03),
        },
        3: {
            "light": (0.956148, 0.003647, 141.13805),
            "dark": (0.251584, 0.005083, 129.008519),
            "light_alpha": (0.211755, 0.084463, 145.998123, 0.063),
            "dark_alpha": (0.995488, 0.003263, 131.281261, 0.068),
        },
        4: {
            "light": (0.932005, 0.004181, 142.110457),
            "dark": (0.280745, 0.005603, 131.43605),
            "light_alpha": (0.181111, 0.063767, 146.442983, 0.095),
            "dark_alpha": (0.984294, 0.022935, 146.493404, 0.102),
        },
        5: {
            "light": (0.909478, 0.004518, 139.330214),
            "dark": (0.310084, 0.006559, 131.447157),
            "light_alpha": (0.189394, 0.060896, 138.633537, 0.126),
            "dark_alpha": (0.990743, 0.016822, 145.626159, 0.131),
        },
        6: {
            "light": (0.88551, 0.005578, 141.140479),
            "dark": (0.346397, 0.007647, 134.431316),
            "light_alpha": (0.169678, 0.055178, 137.155781, 0.157),
            "dark_alpha": (0.991886, 0.014794, 145.17163, 0.169),
        },
        7: {
            "light": (0.851735, 0.005633, 141.140786),
            "dark": (0.398596, 0.009645, 136.025368),
            "light_alpha": (0.150123, 0.051359, 134.926042, 0.2),
            "dark_alpha": (0.992761, 0.016007, 131.949037, 0.228),
        },
        8: {
            "light": (0.792114, 0.007119, 140.550968),
            "dark": (0.487696, 0.012367, 140.779525),
            "light_alpha": (0.150577, 0.046885, 137.026948, 0.279),
            "dark_alpha": (0.988469, 0.020884, 146.263219, 0.334),
        },
        9: {
            "light": (0.640398, 0.011483, 136.534139),
            "dark": (0.53523, 0.017614, 139.614378),
            "light_alpha": (0.143312, 0.042053, 135.081726, 0.467),
            "dark_alpha": (0.9834, 0.033956, 137.712608, 0.397),
        },
        10: {
            "light": (0.605407, 0.011646, 136.54081),
            "dark": (0.581238, 0.016326, 140.063628),
            "light_alpha": (0.140667, 0.043234, 128.371763, 0.51),
            "dark_alpha": (0.985615, 0.027293, 142.744245, 0.452),
        },
        11: {
            "light": (0.500125, 0.011099, 139.891724),
            "dark": (0.765944, 0.012765, 139.495839),
            "light_alpha": (0.128399, 0.044359, 135.455755, 0.628),
            "dark_alpha": (0.992216, 0.015391, 138.83121, 0.688),
        },
        12: {
            "light": (0.241861, 0.011192, 138.234201),
            "dark": (0.947013, 0.003356, 144.759961),
            "light_alpha": (0.109596, 0.037245, 134.558417, 0.891),
            "dark_alpha": (0.99767, 0.004043, 149.068936, 0.929),
        },
    },
    "Orange": {
        1: {
            "light": (0.992165, 0.002638, 40.727779),
            "dark": (0.18643, 0.011907, 53.747154),
            "light_alpha": (0.567679, 0.201522, 39.133393, 0.016),
            "dark_alpha": (0.655191, 0.263367, 34.202247, 0.022),
        },
        2: {
            "light": (0.978748, 0.015361, 70.826339),
            "dark": (0.208826, 0.01918, 67.381428),
            "light_alpha": (0.713671, 0.185659, 63.090846, 0.067),
            "dark_alpha": (0.750039, 0.212423, 54.734255, 0.051),
        },
        3: {
            "light": (0.957604, 0.036823, 78.114669),
            "dark": (0.257451, 0.045249, 59.543162),
            "light_alpha": (0.747255, 0.188705, 67.099717, 0.15),
            "dark_alpha": (0.736094, 0.221467, 49.957518, 0.131),
        },
        4: {
            "light": (0.920256, 0.08107, 74.155516),
            "dark": (0.293286, 0.079644, 58.647116),
            "light_alpha": (0.781916, 0.203679, 63.129537, 0.314),
            "dark_alpha": (0.703745, 0.243564, 41.266509, 0.211),
        },
        5: {
            "light": (0.890427, 0.106551, 70.835901),
            "dark": (0.334553, 0.086799, 58.089053),
            "light_alpha": (0.768099, 0.208049, 58.799266, 0.416),
            "dark_alpha": (0.727177, 0.228968, 46.835459, 0.265),
        },
        6: {
            "light": (0.857276, 0.109958, 64.426681),
            "dark": (0.386286, 0.086886, 55.152649),
            "light_alpha": (0.721226, 0.207235, 53.408979, 0.455),
            "dark_alpha": (0.753893, 0.209258, 51.884474, 0.332),
        },
        7: {
            "light": (0.805255, 0.112571, 59.881576),
            "dark": (0.453351, 0.094718, 53.05671),
            "light_alpha": (0.647739, 0.194003, 50.288069, 0.514),
            "dark_alpha": (0.771068, 0.191021, 51.349092, 0.429),
        },
        8: {
            "light": (0.74538, 0.132114, 54.819198),
            "dark": (0.540503, 0.116176, 49.748207),
            "light_alpha": (0.613126, 0.196779, 45.620577, 0.62),
            "dark_alpha": (0.77819, 0.18215, 50.074086, 0.572),
        },
        9: {
            "light": (0.689023, 0.191085, 44.802159),
            "dark": (0.689023, 0.191085, 44.802159),
            "light_alpha": (0.633902, 0.226202, 39.674049, 0.8),
            "dark_alpha": (0.742822, 0.209838, 44.431739, 0.895),
        },
        10: {
            "light": (0.662159, 0.194442, 43.486402),
            "dark": (0.741353, 0.199102, 46.322726),
            "light_alpha": (0.61202, 0.22173, 38.916029, 0.836),
            "dark_alpha": (0.753171, 0.20199, 46.476147, 0.979),
        },
        11: {
            "light": (0.591865, 0.186023, 46.954198),
            "dark": (0.798981, 0.163123, 50.765999),
            "light_alpha": (0.591865, 0.186023, 46.954198),
            "dark_alpha": (0.798981, 0.163123, 50.765999),
        },
        12: {
            "light": (0.350118, 0.06868, 40.822646),
            "dark": (0.924838, 0.052407, 66.219944),
            "light_alpha": (0.350118, 0.06868, 40.822646),
            "dark_alpha": (0.924838, 0.052407, 66.219944),
        },
    },
    "Pink": {
        1: {
            "light": (0.994136, 0.00404, 336.250641),
            "dark": (0.190667, 0.017406, 334.93139),
            "light_alpha": (0.541317, 0.266152, 331.445293, 0.012),
            "dark_alpha": (0.699929, 0.333496, 338.791518, 0.03),
        },
        2: {
            "light": (0.983147, 0.009422, 339.96862),
            "dark": (0.207366, 0.031283, 338.167313),
            "light_alpha": (0.554818, 0.256502, 350.904703, 0.032),
            "dark_alpha": (0.710922, 0.310171, 343.436951, 0.059),
        },
        3: {
            "light": (0.95429, 0.027485, 340.643724),
            "dark": (0.261376, 0.061161, 337.46173),
            "light_alpha": (0.56005, 0.261152, 349.672362, 0.083),
            "dark_alpha": (0.736508, 0.299397, 338.199381, 0.139),
        },
        4: {
            "light": (0.925074, 0.04165, 340.658177),
            "dark": (0.299395, 0.097511, 340.135773),
            "light_alpha": (0.544381, 0.253571, 349.951269, 0.134),
            "dark_alpha": (0.71235, 0.314527, 342.086874, 0.219),
        },
        5: {
            "light": (0.893124, 0.054251, 340.861284),
            "dark": (0.338008, 0.104113, 340.640169),
            "light_alpha": (0.502843, 0.234363, 350.19554, 0.185),
            "dark_alpha": (0.726998, 0.293847, 342.10006, 0.274),
        },
        6: {
            "light": (0.855409, 0.06686, 340.902892),
            "dark": (0.38902, 0.107189, 341.550629),
            "light_alpha": (0.477104, 0.222693, 349.54742, 0.244),
            "dark_alpha": (0.752961, 0.257066, 342.537868, 0.337),
        },
        7: {
            "light": (0.809091, 0.083338, 341.207461),
            "dark": (0.458738, 0.119256, 342.620721),
            "light_alpha": (0.465989, 0.217618, 349.300521, 0.318),
            "dark_alpha": (0.769794, 0.231192, 343.75941, 0.442),
        },
        8: {
            "light": (0.751697, 0.10674, 341.626849),
            "dark": (0.545428, 0.144852, 344.106122),
            "light_alpha": (0.453845, 0.21249, 348.346299, 0.412),
            "dark_alpha": (0.775036, 0.222453, 344.461321, 0.585),
        },
        9: {
            "light": (0.616702, 0.207665, 346.051429),
            "dark": (0.616702, 0.207665, 346.051429),
            "light_alpha": (0.511217, 0.237696, 351.876042, 0.702),
            "dark_alpha": (0.741621, 0.257912, 346.246277, 0.761),
        },
        10: {
            "light": (0.595656, 0.207223, 346.503135),
            "dark": (0.649956, 0.196951, 346.181402),
            "light_alpha": (0.495664, 0.230174, 352.349944, 0.73),
            "dark_alpha": (0.75882, 0.235093, 346.690818, 0.795),
        },
        11: {
            "light": (0.556643, 0.206277, 347.329882),
            "dark": (0.788692, 0.190036, 350.737926),
            "light_alpha": (0.556643, 0.206277, 347.329882),
            "dark_alpha": (0.788692, 0.190036, 350.737926),
        },
        12: {
            "light": (0.349989, 0.128986, 345.454564),
            "dark": (0.905285, 0.058618, 343.22679),
            "light_alpha": (0.349989, 0.128986, 345.454564),
            "dark_alpha": (0.905285, 0.058618, 343.22679),
        },
    },
    "Plum": {
        1: {
            "light": (0.99326, 0.004729, 316.867531),
            "dark": (0.189962, 0.017459, 326.980773),
            "light_alpha": (0.604505, 0.320629, 310.809176, 0.012),
            "dark_alpha": (0.712622, 0.348771, 331.436856, 0.026),
        },
        2: {
            "light": (0.983133, 0.009171, 325.993006),
            "dark": (0.210042, 0.031058, 327.683536),
            "light_alpha": (0.484658, 0.237314, 331.437726, 0.028),
            "dark_alpha": (0.722658, 0.314905, 327.217205, 0.059),
        },
        3: {
            "light": (0.956862, 0.027425, 325.489929),
            "dark": (0.265653, 0.06177, 326.665235),
            "light_alpha": (0.545959, 0.277293, 324.226136, 0.079),
            "dark_alpha": (0.729587, 0.29267, 326.116789, 0.148),
        },
        4: {
            "light": (0.929234, 0.043603, 324.87055),
            "dark": (0.306523, 0.088279, 325.272585),
            "light_alpha": (0.528871, 0.268587, 324.161611, 0.126),
            "dark_alpha": (0.724169, 0.296904, 325.443329, 0.219),
        },
        5: {
            "light": (0.898487, 0.057429, 324.373366),
            "dark": (0.343446, 0.095317, 324.633878),
            "light_alpha": (0.503499, 0.257555, 322.522595, 0.177),
            "dark_alpha": (0.741818, 0.273949, 325.171487, 0.269),
        },
        6: {
            "light": (0.860317, 0.07234, 323.913215),
            "dark": (0.388917, 0.097019, 324.198199),
            "light_alpha": (0.479169, 0.246088, 321.284192, 0.236),
            "dark_alpha": (0.760029, 0.243272, 323.76526, 0.328),
        },
        7: {
            "light": (0.80918, 0.091459, 323.147865),
            "dark": (0.456489, 0.106362, 323.426311),
            "light_alpha": (0.45214, 0.233299, 319.807058, 0.314),
            "dark_alpha": (0.78107, 0.214692, 322.801646, 0.425),
        },
        8: {
            "light": (0.741807, 0.119988, 321.875234),
            "dark": (0.545079, 0.127939, 322.161219),
            "light_alpha": (0.441075, 0.228047, 319.1676, 0.42),
            "dark_alpha": (0.789283, 0.20379, 322.379131, 0.568),
        },
        9: {
            "light": (0.57891, 0.187729, 322.08951),
            "dark": (0.57891, 0.187729, 322.08951),
            "light_alpha": (0.42748, 0.221716, 319.113057, 0.687),
            "dark_alpha": (0.739509, 0.252672, 321.766901, 0.69),
        },
        10: {
            "light": (0.552668, 0.180951, 322.098267),
            "dark": (0.615954, 0.182075, 322.121441),
            "light_alpha": (0.404594, 0.20927, 319.908753, 0.71),
            "dark_alpha": (0.755593, 0.235535, 322.273617, 0.732),
        },
        11: {
            "light": (0.521295, 0.172833, 322.023983),
            "dark": (0.785912, 0.154071, 322.058166),
            "light_alpha": (0.521295, 0.172833, 322.023983),
            "dark_alpha": (0.785912, 0.154071, 322.058166),
        },
        12: {
            "light": (0.337635, 0.124845, 321.40575),
            "dark": (0.906163, 0.055084, 325.833652),
            "light_alpha": (0.337635, 0.124845, 321.40575),
            "dark_alpha": (0.906163, 0.055084, 325.833652),
        },
    },
    "Purple": {
        1: {
            "light": (0.993023, 0.003819, 325.350978),
            "dark": (0.191544, 0.022218, 315.984733),
            "light_alpha": (0.541317, 0.266152, 331.445293, 0.012),
            "dark_alpha": (0.609794, 0.317816, 311.669151, 0.038),
        },
        2: {
            "light": (0.982284, 0.009146, 313.12434),
            "dark": (0.213075, 0.031467, 314.34399),
            "light_alpha": (0.460047, 0.245922, 306.498912, 0.028),
            "dark_alpha": (0.652961, 0.280064, 312.033699, 0.072),
        },
        3: {
            "light": (0.959056, 0.024274, 313.268498),
            "dark": (0.266334, 0.061513, 312.029532),
            "light_alpha": (0.508103, 0.275254, 305.75311, 0.071),
            "dark_alpha": (0.667458, 0.259195, 310.32146, 0.169),
        },
        4: {
            "light": (0.9328, 0.03875, 312.060049),
            "dark": (0.308239, 0.082784, 310.653457),
            "light_alpha": (0.488767, 0.27048, 300.56685, 0.114),
            "dark_alpha": (0.664413, 0.257046, 308.567141, 0.248),
        },
        5: {
            "light": (0.900657, 0.053926, 311.567619),
            "dark": (0.344473, 0.091371, 310.131824),
            "light_alpha": (0.471199, 0.260205, 301.050585, 0.165),
            "dark_alpha": (0.684248, 0.240069, 308.52684, 0.303),
        },
        6: {
            "light": (0.859585, 0.070583, 311.026742),
            "dark": (0.387722, 0.096742, 309.663665),
            "light_alpha": (0.44476, 0.248024, 298.519752, 0.228),
            "dark_alpha": (0.70517, 0.221454, 308.207778, 0.366),
        },
        7: {
            "light": (0.804046, 0.092785, 309.933016),
            "dark": (0.44961, 0.107964, 308.730544),
            "light_alpha": (0.426688, 0.238806, 297.574843, 0.31),
            "dark_alpha": (0.728684, 0.202163, 308.215829, 0.458),
        },
        8: {
            "light": (0.733089, 0.122702, 307.974941),
            "dark": (0.540938, 0.132842, 307.071274),
            "light_alpha": (0.413702, 0.235336, 293.774849, 0.416),
            "dark_alpha": (0.733478, 0.194767, 307.037728, 0.622),
        },
        9: {
            "light": (0.555472, 0.18299, 305.880212),
            "dark": (0.555472, 0.18299, 305.880212),
            "light_alpha": (0.387835, 0.220199, 294.826935, 0.683),
            "dark_alpha": (0.676294, 0.235289, 305.296579, 0.736),
        },
        10: {
            "light": (0.524222, 0.175585, 305.693824),
            "dark": (0.595898, 0.176583, 306.348065),
            "light_alpha": (0.362174, 0.20523, 295.272579, 0.71),
            "dark_alpha": (0.700101, 0.217418, 305.689337, 0.778),
        },
        11: {
            "light": (0.516031, 0.173957, 305.702958),
            "dark": (0.785114, 0.156227, 307.900152),
            "light_alpha": (0.516031, 0.173957, 305.702958),
            "dark_alpha": (0.785114, 0.156227, 307.900152),
        },
        12: {
            "light": (0.322305, 0.110048, 303.796646),
            "dark": (0.91092, 0.048558, 310.946808),
            "light_alpha": (0.322305, 0.110048, 303.796646),
            "dark_alpha": (0.91092, 0.048558, 310.946808),
        },
    },
    "Red": {
        1: {
            "light": (0.993512, 0.00311, 22.753124),
            "dark": (0.188014, 0.013331, 19.389234),
            "light_alpha": (0.48507, 0.220728, 28.574334, 0.012),
            "dark_alpha": (0.644405, 0.291502, 28.424244, 0.03),
        },
        2: {
            "light": (0.983173, 0.008283, 16.024758),
            "dark": (0.204786, 0.021516, 14.735494),
            "light_alpha": (0.581656, 0.26632, 28.734051, 0.028),
            "dark_alpha": (0.683164, 0.25774, 24.879916, 0.055),
        },
        3: {
            "light": (0.956107, 0.020968, 16.227605),
            "dark": (0.250439, 0.064284, 13.106153),
            "light_alpha": (0.544608, 0.250616, 28.866632, 0.075),
            "dark_alpha": (0.665609, 0.281049, 21.799594, 0.156),
        },
        4: {
            "light": (0.928104, 0.047281, 16.682286),
            "dark": (0.288842, 0.095871, 14.289003),
            "light_alpha": (0.648944, 0.29905, 28.903966, 0.134),
            "dark_alpha": (0.659991, 0.287786, 21.025142, 0.236),
        },
        5: {
            "light": (0.896123, 0.061982, 17.32847),
            "dark": (0.331559, 0.106568, 15.531586),
            "light_alpha": (0.608343, 0.280218, 28.892413, 0.189),
            "dark_alpha": (0.673337, 0.273161, 20.168199, 0.303),
        },
        6: {
            "light": (0.857001, 0.074624, 17.86793),
            "dark": (0.382615, 0.111354, 16.929296),
            "light_alpha": (0.565116, 0.259218, 29.092899, 0.251),
            "dark_alpha": (0.69695, 0.247791, 19.395307, 0.374),
        },
        7: {
            "light": (0.807221, 0.089451, 18.444905),
            "dark": (0.450551, 0.120624, 18.910461),
            "light_alpha": (0.518748, 0.237878, 29.075583, 0.33),
            "dark_alpha": (0.720388, 0.222921, 20.343125, 0.475),
        },
        8: {
            "light": (0.744979, 0.113258, 19.089132),
            "dark": (0.543559, 0.146513, 21.437273),
            "light_alpha": (0.496076, 0.227685, 29.027327, 0.428),
            "dark_alpha": (0.729879, 0.212842, 21.921338, 0.635),
        },
        9: {
            "light": (0.625442, 0.193471, 22.982724),
            "dark": (0.625442, 0.193471, 22.982724),
            "light_alpha": (0.52236, 0.240427, 29.069106, 0.675),
            "dark_alpha": (0.715052, 0.227521, 23.083286, 0.82),
        },
        10: {
            "light": (0.599902, 0.195242, 23.889461),
            "dark": (0.664637, 0.177337, 23.092204),
            "light_alpha": (0.504404, 0.231663, 29.143451, 0.714),
            "dark_alpha": (0.740717, 0.201927, 22.971102, 0.853),
        },
        11: {
            "light": (0.557246, 0.19775, 25.134883),
            "dark": (0.783659, 0.161852, 22.288442),
            "light_alpha": (0.557246, 0.19775, 25.134883),
            "dark_alpha": (0.783659, 0.161852, 22.288442),
        },
        12: {
            "light": (0.339128, 0.109037, 16.680582),
            "dark": (0.902154, 0.052832, 6.13929),
            "light_alpha": (0.339128, 0.109037, 16.680582),
            "dark_alpha": (0.902154, 0.052832, 6.13929),
        },
    },
    "Ruby": {
        1: {
            "light": (0.993824, 0.00329, 356.308113),
            "dark": (0.188799, 0.013664, 2.904066),
            "light_alpha": (0.49967, 0.224298, 1.78422, 0.012),
            "dark_alpha": (0.651456, 0.28839, 16.07863, 0.03),
        },
        2: {
            "light": (0.983406, 0.008363, 8.410594),
            "dark": (0.207651, 0.015889, 5.290257),
            "light_alpha": (0.581656, 0.26632, 28.734051, 0.028),
            "dark_alpha": (0.716858, 0.229758, 8.823692, 0.051),
        },
        3: {
            "light": (0.95358, 0.022246, 8.563347),
            "dark": (0.253766, 0.060204, 6.544451),
            "light_alpha": (0.552052, 0.251933, 25.76878, 0.079),
            "dark_alpha": (0.673495, 0.275703, 13.061936, 0.152),
        },
        4: {
            "light": (0.927965, 0.042274, 8.464618),
            "dark": (0.292087, 0.088847, 5.504583),
            "light_alpha": (0.60569, 0.276745, 25.959056, 0.13),
            "dark_alpha": (0.67291, 0.281138, 11.742819, 0.227),
        },
        5: {
            "light": (0.896372, 0.054842, 8.164858),
            "dark": (0.332675, 0.099729, 6.398334),
            "light_alpha": (0.56603, 0.258207, 24.88612, 0.185),
            "dark_alpha": (0.688968, 0.264318, 10.571356, 0.29),
        },
        6: {
            "light": (0.858052, 0.066016, 7.840689),
            "dark": (0.382009, 0.105021, 7.588633),
            "light_alpha": (0.521762, 0.237831, 24.718698, 0.244),
            "dark_alpha": (0.709638, 0.242696, 9.592399, 0.358),
        },
        7: {
            "light": (0.810117, 0.079695, 7.486638),
            "dark": (0.448349, 0.116521, 9.017324),
            "light_alpha": (0.486821, 0.221503, 24.069374, 0.314),
            "dark_alpha": (0.730793, 0.219964, 9.819017, 0.458),
        },
        8: {
            "light": (0.748821, 0.10138, 6.860894),
            "dark": (0.543759, 0.145363, 11.057526),
            "light_alpha": (0.466608, 0.211644, 22.610833, 0.412),
            "dark_alpha": (0.73608, 0.212962, 11.358237, 0.627),
        },
        9: {
            "light": (0.628444, 0.195019, 13.192226),
            "dark": (0.628444, 0.195019, 13.192226),
            "light_alpha": (0.525914, 0.239862, 24.13617, 0.679),
            "dark_alpha": (0.717021, 0.23072, 13.503932, 0.82),
        },
        10: {
            "light": (0.60131, 0.196172, 13.393278),
            "dark": (0.663508, 0.179354, 13.692857),
            "light_alpha": (0.505635, 0.23047, 23.831958, 0.714),
            "dark_alpha": (0.739967, 0.206827, 13.976912, 0.849),
        },
        11: {
            "light": (0.548876, 0.198542, 13.923614),
            "dark": (0.78614, 0.161137, 17.006026),
            "light_alpha": (0.548876, 0.198542, 13.923614),
            "dark_alpha": (0.78614, 0.161137, 17.006026),
        },
        12: {
            "light": (0.341197, 0.109671, 10.037791),
            "dark": (0.90541, 0.052662, 355.833221),
            "light_alpha": (0.341197, 0.109671, 10.037791),
            "dark_alpha": (0.90541, 0.052662, 355.833221),
        },
    },
    "Sage": {
        1: {
            "light": (0.992333, 0.002543, 160.400434),
            "dark": (0.179234, 0.003586, 167.37729),
            "light_alpha": (0.52569, 0.172898, 156.299627, 0.016),
            "dark_alpha": (0, 0, 0, 0),
        },
        2: {
            "light": (0.980784, 0.002659, 171.196058),
            "dark": (0.211062, 0.00374, 160.173783),
            "light_alpha": (0.335418, 0.102246, 158.661122, 0.032),
            "dark_alpha": (0.988013, 0.004385, 176.15082, 0.03),
        },
        3: {
            "light": (0.955048, 0.003464, 170.382873),
            "dark": (0.251229, 0.003981, 164.199536),
            "light_alpha": (0.266584, 0.071184, 168.010862, 0.067),
            "dark_alpha": (0.968153, 0.016401, 21.333679, 0.072),
        },
        4: {
            "light": (0.931195, 0.003486, 170.380611),
            "dark": (0.281158, 0.004937, 164.873419),
            "light_alpha": (0.184209, 0.046474, 162.31407, 0.095),
            "dark_alpha": (0.994944, 0.003124, 167.693343, 0.102),
        },
        5: {
            "light": (0.90922, 0.003993, 167.670119),
            "dark": (0.310689, 0.005211, 167.438408),
            "light_alpha": (0.185601, 0.056284, 155.555252, 0.126),
            "dark_alpha": (0.99798, 0.003121, 167.693564, 0.131),
        },
        6: {
            "light": (0.885067, 0.00402, 167.66733),
            "dark": (0.347086, 0.006082, 167.424261),
            "light_alpha": (0.165637, 0.050261, 157.238752, 0.157),
            "dark_alpha": (0.992419, 0.012871, 152.319928, 0.173),
        },
        7: {
            "light": (0.851067, 0.004375, 169.853167),
            "dark": (0.399193, 0.007827, 167.384809),
            "light_alpha": (0.147883, 0.038002, 174.770932, 0.2),
            "dark_alpha": (0.989082, 0.017245, 164.760306, 0.233),
        },
        8: {
            "light": (0.7924, 0.005279, 169.480136),
            "dark": (0.488217, 0.009097, 169.81387),
            "light_alpha": (0.137095, 0.03083, 174.300155, 0.275),
            "dark_alpha": (0.9897, 0.015881, 173.840289, 0.334),
        },
        9: {
            "light": (0.639258, 0.010414, 172.381544),
            "dark": (0.532927, 0.017544, 170.770754),
            "light_alpha": (0.148796, 0.036173, 169.942938, 0.471),
            "dark_alpha": (0.976505, 0.037117, 169.979145, 0.397),
        },
        10: {
            "light": (0.604809, 0.009681, 172.836781),
            "dark": (0.579339, 0.015968, 170.507505),
            "light_alpha": (0.135454, 0.03442, 175.985965, 0.51),
            "dark_alpha": (0.983125, 0.02627, 173.190735, 0.452),
        },
        11: {
            "light": (0.500738, 0.00777, 175.923744),
            "dark": (0.766046, 0.009988, 167.50871),
            "light_alpha": (0.117499, 0.029973, 175.561679, 0.624),
            "dark_alpha": (0.992506, 0.011522, 173.144731, 0.688),
        },
        12: {
            "light": (0.239773, 0.012142, 166.782454),
            "dark": (0.947327, 0.002372, 167.705124),
            "light_alpha": (0.111082, 0.031775, 165.518922, 0.895),
            "dark_alpha": (0.99798, 0.003121, 167.693564, 0.929),
        },
    },
    "Sand": {
        1: {
            "light": (0.993696, 0.001106, 106.419717),
            "dark": (0.177557, 0.002265, 106.628071),
            "light_alpha": (0.447946, 0.110224, 110.13058, 0.012),
            "dark_alpha": (0, 0, 0, 0),
        },
        2: {
            "light": (0.982209, 0.001479, 106.426802),
            "dark": (0.212928, 0.002165, 106.582074),
            "light_alpha": (0.272103, 0.05992, 109.798409, 0.028),
            "dark_alpha": (0.993618, 0.001475, 106.426413, 0.034),
        },
        3: {
            "light": (0.955518, 0.002257, 97.61404),
            "dark": (0.253102, 0.00311, 106.619719),
            "light_alpha": (0.172457, 0.036302, 109.67037, 0.063),
            "dark_alpha": (0.996655, 0.001474, 106.426311, 0.072),
        },
        4: {
            "light": (0.932204, 0.003385, 100.555406),
            "dark": (0.282809, 0.003553, 99.024554),
            "light_alpha": (0.239148, 0.054703, 109.909379, 0.099),
            "dark_alpha": (0.990958, 0.014365, 106.658882, 0.106),
        },
        5: {
            "light": (0.909897, 0.003825, 95.90906),
            "dark": (0.312381, 0.004442, 100.730394),
            "light_alpha": (0.184372, 0.037503, 83.247334, 0.126),
            "dark_alpha": (0.997331, 0.012874, 106.630756, 0.135),
        },
        6: {
            "light": (0.885511, 0.004973, 98.336576),
            "dark": (0.349086, 0.005746, 102.244466),
            "light_alpha": (0.191157, 0.042161, 90.025116, 0.161),
            "dark_alpha": (0.983442, 0.019108, 81.027215, 0.177),
        },
        7: {
            "light": (0.852512, 0.006206, 96.603986),
            "dark": (0.40072, 0.007026, 96.104214),
            "light_alpha": (0.206105, 0.049582, 110.060963, 0.208),
            "dark_alpha": (0.987185, 0.02091, 91.487568, 0.236),
        },
        8: {
            "light": (0.79182, 0.008296, 96.497038),
            "dark": (0.490105, 0.009504, 91.728577),
            "light_alpha": (0.184974, 0.041662, 101.908632, 0.287),
            "dark_alpha": (0.98315, 0.02044, 82.835055, 0.341),
        },
        9: {
            "light": (0.641341, 0.010265, 106.68554),
            "dark": (0.53457, 0.010965, 94.074007),
            "light_alpha": (0.153924, 0.034287, 109.831608, 0.471),
            "dark_alpha": (0.985021, 0.021308, 87.886045, 0.395),
        },
        10: {
            "light": (0.60567, 0.00958, 106.68222),
            "dark": (0.581067, 0.010743, 94.047317),
            "light_alpha": (0.148833, 0.037801, 110.22981, 0.514),
            "dark_alpha": (0.991227, 0.021832, 99.556675, 0.45),
        },
        11: {
            "light": (0.497858, 0.007874, 106.682192),
            "dark": (0.766642, 0.009135, 97.383119),
            "light_alpha": (0.129158, 0.032804, 110.22981, 0.632),
            "dark_alpha": (0.995159, 0.012935, 100.542125, 0.685),
        },
        12: {
            "light": (0.243442, 0.007931, 96.313454),
            "dark": (0.948313, 0.002611, 106.44928),
            "light_alpha": (0.113881, 0.027782, 103.248907, 0.891),
            "dark_alpha": (0.99938, 0.002945, 106.452764, 0.929),
        },
    },
    "Sky": {
        1: {
            "light": (0.993324, 0.005326, 211.912398),
            "dark": (0.189779, 0.023976, 257.085711),
            "light_alpha": (0.780008, 0.185053, 217.733353, 0.02),
            "dark_alpha": (0.519266, 0.285766, 261.293037, 0.055),
        },
        2: {
            "light": (0.97986, 0.009929, 217.669935),
            "dark": (0.216126, 0.028923, 258.451796),
            "light_alpha": (0.624389, 0.149732, 220.342967, 0.048),
            "dark_alpha": (0.602562, 0.230954, 256.413401, 0.089),
        },
        3: {
            "light": (0.96055, 0.023828, 219.582584),
            "dark": (0.271112, 0.05388, 251.879394),
            "light_alpha": (0.679031, 0.171456, 226.112462, 0.102),
            "dark_alpha": (0.632571, 0.215352, 253.631268, 0.19),
        },
        4: {
            "light": (0.93559, 0.035595, 220.385557),
            "dark": (0.322174, 0.069556, 247.75025),
            "light_alpha": (0.644522, 0.168604, 229.813154, 0.157),
            "dark_alpha": (0.666206, 0.200056, 248.747464, 0.274),
        },
        5: {
            "light": (0.902811, 0.046537, 221.368502),
            "dark": (0.3725, 0.079062, 245.75431),
            "light_alpha": (0.613021, 0.159318, 229.199091, 0.224),
            "dark_alpha": (0.694442, 0.185239, 245.522549, 0.349),
        },
        6: {
            "light": (0.86103, 0.057671, 222.868155),
            "dark": (0.42688, 0.087351, 243.555924),
            "light_alpha": (0.567553, 0.153753, 232.991259, 0.299),
            "dark_alpha": (0.710972, 0.175369, 244.665078, 0.433),
        },
        7: {
            "light": (0.805781, 0.071707, 225.651568),
            "dark": (0.48804, 0.098073, 240.689235),
            "light_alpha": (0.535222, 0.148927, 235.156033, 0.397),
            "dark_alpha": (0.73001, 0.166437, 241.813511, 0.526),
        },
        8: {
            "light": (0.729379, 0.096219, 227.981139),
            "dark": (0.557383, 0.114256, 237.217975),
            "light_alpha": (0.518946, 0.149891, 237.683663, 0.542),
            "dark_alpha": (0.742389, 0.163725, 237.95287, 0.643),
        },
        9: {
            "light": (0.861366, 0.102693, 217.813662),
            "dark": (0.861366, 0.102693, 217.813662),
            "light_alpha": (0.721641, 0.183259, 226.730639, 0.416),
            "dark_alpha": (0.873035, 0.105138, 217.139936, 0.984),
        },
        10: {
            "light": (0.83765, 0.103725, 219.572908),
            "dark": (0.908089, 0.07301, 214.918268),
            "light_alpha": (0.678516, 0.178249, 230.196666, 0.444),
            "dark_alpha": (0.913664, 0.074221, 214.846716, 0.992),
        },
        11: {
            "light": (0.525636, 0.108034, 232.54468),
            "dark": (0.792576, 0.098633, 231.671412),
            "light_alpha": (0.525636, 0.108034, 232.54468),
            "dark_alpha": (0.792576, 0.098633, 231.671412),
        },
        12: {
            "light": (0.351141, 0.057227, 241.610267),
            "dark": (0.933708, 0.052594, 214.374769),
            "light_alpha": (0.351141, 0.057227, 241.610267),
            "dark_alpha": (0.933708, 0.052594, 214.374769),
        },
    },
    "Slate": {
        1: {
            "light": (0.991203, 0.001476, 286.372656),
            "dark": (0.178896, 0.003969, 285.991743),
            "light_alpha": (0.227925, 0.14185, 267.446144, 0.012),
            "dark_alpha": (0, 0, 0, 0),
        },
        2: {
            "light": (0.982388, 0.002959, 286.345027),
            "dark": (0.213273, 0.00408, 264.413378),
            "light_alpha": (0.227925, 0.14185, 267.446144, 0.024),
            "dark_alpha": (0.970767, 0.039525, 199.650316, 0.034),
        },
        3: {
            "light": (0.955741, 0.004481, 281.883399),
            "dark": (0.253401, 0.005718, 261.193925),
            "light_alpha": (0.155655, 0.102181, 265.835377, 0.059),
            "dark_alpha": (0.94298, 0.028144, 247.400328, 0.077),
        },
        4: {
            "light": (0.931443, 0.006007, 282.957323),
            "dark": (0.282677, 0.007334, 259.518442),
            "light_alpha": (0.155026, 0.089704, 269.422234, 0.091),
            "dark_alpha": (0.952906, 0.028984, 229.218208, 0.111),
        },
        5: {
            "light": (0.910094, 0.00755, 283.588252),
            "dark": (0.311378, 0.008245, 259.731295),
            "light_alpha": (0.17431, 0.08722, 261.495984, 0.122),
            "dark_alpha": (0.940599, 0.03058, 250.872419, 0.145),
        },
        6: {
            "light": (0.887621, 0.009134, 281.785087),
            "dark": (0.34594, 0.009923, 256.517619),
            "light_alpha": (0.143005, 0.085324, 268.620528, 0.15),
            "dark_alpha": (0.950985, 0.028773, 233.210124, 0.183),
        },
        7: {
            "light": (0.853363, 0.011549, 280.847745),
            "dark": (0.397747, 0.012047, 253.768968),
            "light_alpha": (0.16311, 0.08414, 264.838671, 0.197),
            "dark_alpha": (0.94177, 0.031094, 254.509789, 0.246),
        },
        8: {
            "light": (0.793865, 0.01577, 278.118292),
            "dark": (0.489942, 0.01568, 247.633868),
            "light_alpha": (0.161454, 0.080274, 261.893634, 0.275),
            "dark_alpha": (0.943354, 0.0326, 241.968307, 0.361),
        },
        9: {
            "light": (0.64557, 0.016207, 277.828972),
            "dark": (0.537033, 0.015172, 261.1455),
            "light_alpha": (0.129111, 0.054764, 261.115293, 0.455),
            "dark_alpha": (0.948871, 0.027071, 256.202899, 0.42),
        },
        10: {
            "light": (0.609754, 0.015827, 273.244475),
            "dark": (0.582977, 0.014164, 263.317423),
            "light_alpha": (0.133024, 0.047291, 255.654701, 0.499),
            "dark_alpha": (0.956822, 0.022492, 261.582497, 0.475),
        },
        11: {
            "light": (0.502647, 0.013739, 263.437198),
            "dark": (0.767729, 0.010392, 261.267835),
            "light_alpha": (0.113782, 0.036808, 244.430962, 0.62),
            "dark_alpha": (0.974317, 0.012107, 251.649134, 0.708),
        },
        12: {
            "light": (0.241252, 0.009778, 249.517037),
            "dark": (0.948768, 0.002804, 264.571723),
            "light_alpha": (0.093224, 0.026538, 236.664325, 0.887),
            "dark_alpha": (0.9937, 0.003244, 261.347022, 0.937),
        },
    },
    "Teal": {
        1: {
            "light": (0.993881, 0.004701, 177.548996),
            "dark": (0.188885, 0.012272, 184.497368),
            "light_alpha": (0.704375, 0.203193, 164.516147, 0.016),
            "dark_alpha": (0.868195, 0.232601, 170.744986, 0.017),
        },
        2: {
            "light": (0.981222, 0.008977, 179.002483),
            "dark": (0.216525, 0.016854, 189.310765),
            "light_alpha": (0.629086, 0.173606, 167.711358, 0.044),
            "dark_alpha": (0.882638, 0.19684, 183.635515, 0.047),
        },
        3: {
            "light": (0.960608, 0.026995, 180.318681),
            "dark": (0.273745, 0.037791, 186.349489),
            "light_alpha": (0.696696, 0.188403, 169.845695, 0.106),
            "dark_alpha": (0.889325, 0.200664, 182.057217, 0.118),
        },
        4: {
            "light": (0.934635, 0.041833, 180.216157),
            "dark": (0.317283, 0.05454, 187.000032),
            "light_alpha": (0.670007, 0.17888, 170.95597, 0.169),
            "dark_alpha": (0.88742, 0.201436, 185.897737, 0.173),
        },
        5: {
            "light": (0.900381, 0.054138, 180.498088),
            "dark": (0.362501, 0.060042, 186.518224),
            "light_alpha": (0.628151, 0.166955, 171.338957, 0.24),
            "dark_alpha": (0.896414, 0.187891, 185.565443, 0.227),
        },
        6: {
            "light": (0.855841, 0.064216, 181.415424),
            "dark": (0.413665, 0.065289, 185.375716),
            "light_alpha": (0.575208, 0.150288, 172.911247, 0.318),
            "dark_alpha": (0.902687, 0.174123, 185.134354, 0.286),
        },
        7: {
            "light": (0.797393, 0.07629, 182.210636),
            "dark": (0.473151, 0.073878, 184.549371),
            "light_alpha": (0.538833, 0.136851, 175.806617, 0.42),
            "dark_alpha": (0.906179, 0.165937, 183.77531, 0.366),
        },
        8: {
            "light": (0.721129, 0.097154, 183.464694),
            "dark": (0.538858, 0.086632, 183.549946),
            "light_alpha": (0.530572, 0.133013, 177.550599, 0.569),
            "dark_alpha": (0.907721, 0.162675, 183.622324, 0.454),
        },
        9: {
            "light": (0.648809, 0.113448, 182.005409),
            "dark": (0.648809, 0.113448, 182.005409),
            "light_alpha": (0.512379, 0.128356, 177.640055, 0.702),
            "dark_alpha": (0.902331, 0.166677, 181.815255, 0.61),
        },
        10: {
            "light": (0.619474, 0.109575, 181.203307),
            "dark": (0.686866, 0.122698, 180.317081),
            "light_alpha": (0.487805, 0.123919, 176.020489, 0.726),
            "dark_alpha": (0.900642, 0.169392, 179.881083, 0.669),
        },
        11: {
            "light": (0.529588, 0.124321, 179.039874),
            "dark": (0.788825, 0.146912, 175.659334),
            "light_alpha": (0.529588, 0.124321, 179.039874),
            "dark_alpha": (0.788825, 0.146912, 175.659334),
        },
        12: {
            "light": (0.326884, 0.050425, 185.018962),
            "dark": (0.905123, 0.072125, 175.255869),
            "light_alpha": (0.326884, 0.050425, 185.018962),
            "dark_alpha": (0.905123, 0.072125, 175.255869),
        },
    },
    "Tomato": {
        1: {
            "light": (0.993512, 0.00311, 22.753124),
            "dark": (0.186872, 0.011729, 19.586642),
            "light_alpha": (0.48507, 0.220728, 28.574334, 0.012),
            "dark_alpha": (0.639036, 0.28892, 28.410977, 0.026),
        },
        2: {
            "light": (0.984192, 0.007126, 31.018805),
            "dark": (0.207676, 0.016707, 32.024164),
            "light_alpha": (0.540201, 0.227411, 31.73843, 0.032),
            "dark_alpha": (0.702739, 0.235822, 33.862102, 0.051),
        },
        3: {
            "light": (0.954426, 0.022019, 30.883487),
            "dark": (0.253738, 0.054351, 26.943666),
            "light_alpha": (0.582665, 0.240443, 32.831023, 0.091),
            "dark_alpha": (0.680219, 0.261406, 30.783936, 0.148),
        },
        4: {
            "light": (0.925988, 0.047126, 31.759382),
            "dark": (0.291106, 0.087037, 28.167526),
            "light_alpha": (0.652647, 0.276789, 31.983681, 0.165),
            "dark_alpha": (0.66674, 0.279064, 29.944114, 0.232),
        },
        5: {
            "light": (0.892139, 0.062626, 31.48796),
            "dark": (0.331436, 0.0971, 28.662736),
            "light_alpha": (0.6253, 0.261994, 32.445069, 0.232),
            "dark_alpha": (0.683196, 0.261058, 30.215016, 0.29),
        },
        6: {
            "light": (0.852436, 0.076976, 32.011763),
            "dark": (0.380068, 0.099448, 30.008888),
            "light_alpha": (0.588366, 0.246739, 32.394474, 0.302),
            "dark_alpha": (0.712081, 0.231071, 31.561293, 0.353),
        },
        7: {
            "light": (0.802793, 0.09425, 32.17152),
            "dark": (0.447442, 0.106764, 31.45568),
            "light_alpha": (0.558557, 0.232523, 32.667004, 0.389),
            "dark_alpha": (0.735012, 0.208124, 31.715771, 0.45),
        },
        8: {
            "light": (0.741472, 0.118231, 32.072479),
            "dark": (0.537817, 0.130064, 32.941071),
            "light_alpha": (0.537472, 0.224193, 32.574847, 0.499),
            "dark_alpha": (0.7461, 0.19783, 33.025271, 0.601),
        },
        9: {
            "light": (0.626974, 0.193719, 33.307867),
            "dark": (0.626974, 0.193719, 33.307867),
            "light_alpha": (0.551947, 0.233221, 32.194272, 0.769),
            "dark_alpha": (0.716395, 0.227462, 33.500613, 0.82),
        },
        10: {
            "light": (0.603972, 0.19525, 33.258986),
            "dark": (0.665028, 0.179137, 34.149006),
            "light_alpha": (0.539369, 0.228462, 32.100008, 0.8),
            "dark_alpha": (0.740972, 0.203328, 34.217985, 0.853),
        },
        11: {
            "light": (0.566536, 0.197652, 32.805515),
            "dark": (0.784293, 0.163573, 36.018924),
            "light_alpha": (0.566536, 0.197652, 32.805515),
            "dark_alpha": (0.784293, 0.163573, 36.018924),
        },
        12: {
            "light": (0.346134, 0.07983, 30.525548),
            "dark": (0.898553, 0.046616, 31.10888),
            "light_alpha": (0.346134, 0.07983, 30.525548),
            "dark_alpha": (0.898553, 0.046616, 31.10888),
        },
    },
    "Violet": {
        1: {
            "light": (0.992083, 0.002787, 308.030902),
            "dark": (0.191434, 0.026085, 290.52003),
            "light_alpha": (0.41635, 0.228555, 298.691644, 0.012),
            "dark_alpha": (0.507677, 0.2967, 276.178317, 0.055),
        },
        2: {
            "light": (0.983, 0.008992, 295.038314),
            "dark": (0.211275, 0.031511, 299.462093),
            "light_alpha": (0.432004, 0.279467, 270.830653, 0.028),
            "dark_alpha": (0.585903, 0.271184, 293.422515, 0.08),
        },
        3: {
            "light": (0.962757, 0.018928, 296.58242),
            "dark": (0.270919, 0.066386, 293.915014),
            "light_alpha": (0.439464, 0.279999, 274.082023, 0.059),
            "dark_alpha": (0.602179, 0.24868, 289.312208, 0.202),
        },
        4: {
            "light": (0.933959, 0.039158, 295.383422),
            "dark": (0.312137, 0.092853, 291.746949),
            "light_alpha": (0.481222, 0.31362, 271.123705, 0.102),
            "dark_alpha": (0.604667, 0.247399, 288.425408, 0.299),
        },
        5: {
            "light": (0.903941, 0.056891, 294.123821),
            "dark": (0.348403, 0.098604, 291.400057),
            "light_alpha": (0.47768, 0.315419, 269.307066, 0.15),
            "dark_alpha": (0.628868, 0.232485, 289.635663, 0.353),
        },
        6: {
            "light": (0.864084, 0.072457, 293.858495),
            "dark": (0.389651, 0.102059, 291.824837),
            "light_alpha": (0.444022, 0.292369, 269.77838, 0.208),
            "dark_alpha": (0.662422, 0.210781, 290.641456, 0.408),
        },
        7: {
            "light": (0.806468, 0.090245, 293.471643),
            "dark": (0.444595, 0.110939, 291.573888),
            "light_alpha": (0.404491, 0.264411, 270.623105, 0.287),
            "dark_alpha": (0.682113, 0.196434, 290.126967, 0.496),
        },
        8: {
            "light": (0.729076, 0.118973, 292.426932),
            "dark": (0.51629, 0.130572, 290.204893),
            "light_alpha": (0.388363, 0.253502, 270.769498, 0.397),
            "dark_alpha": (0.690407, 0.190415, 289.867038, 0.631),
        },
        9: {
            "light": (0.541774, 0.178892, 288.096297),
            "dark": (0.541774, 0.178892, 288.096297),
            "light_alpha": (0.357566, 0.234064, 270.725884, 0.659),
            "dark_alpha": (0.639807, 0.221521, 287.518626, 0.769),
        },
        10: {
            "light": (0.510709, 0.176973, 287.641893),
            "dark": (0.588208, 0.169512, 289.68401),
            "light_alpha": (0.339657, 0.221168, 271.4062, 0.695),
            "dark_alpha": (0.674563, 0.200825, 289.612088, 0.811),
        },
        11: {
            "light": (0.508021, 0.159139, 288.59139),
            "dark": (0.778232, 0.136539, 293.624493),
            "light_alpha": (0.508021, 0.159139, 288.59139),
            "dark_alpha": (0.778232, 0.136539, 293.624493),
        },
        12: {
            "light": (0.312706, 0.09752, 286.75926),
            "dark": (0.911564, 0.045213, 292.612507),
            "light_alpha": (0.312706, 0.09752, 286.75926),
            "dark_alpha": (0.911564, 0.045213, 292.612507),
        },
    },
    "White": {
        1: {
            "light": (0, 0, 0, 0),
            "dark": (0, 0, 0, 0),
            "light_alpha": (1, 0, 166.75948, 0.05),
            "dark_alpha": (0, 0, 0, 0),
        },
        2: {
            "light": (0, 0, 0, 0),
            "dark": (0, 0, 0, 0),
            "light_alpha": (1, 0, 166.75948, 0.1),
            "dark_alpha": (0, 0, 0, 0),
        },
        3: {
            "light": (0, 0, 0, 0),
            "dark": (0, 0, 0, 0),
            "light_alpha": (1, 0, 166.75948, 0.15),
            "dark_alpha": (0, 0, 0, 0),
        },
        4: {
            "light": (0, 0, 0, 0),
            "dark": (0, 0, 0, 0),
            "light_alpha": (1, 0, 166.75948, 0.2),
            "dark_alpha": (0, 0, 0, 0),
        },
        5: {
            "light": (0, 0, 0, 0),
            "dark": (0, 0, 0, 0),
            "light_alpha": (1, 0, 166.75948, 0.3),
            "dark_alpha": (0, 0, 0, 0),
        },
        6: {
            "light": (0, 0, 0, 0),
            "dark": (0, 0, 0, 0),
            "light_alpha": (1, 0, 166.75948, 0.4),
            "dark_alpha": (0, 0, 0, 0),
        },
        7: {
            "light": (0, 0, 0, 0),
            "dark": (0, 0, 0, 0),
            "light_alpha": (1, 0, 166.75948, 0.5),
            "dark_alpha": (0, 0, 0, 0),
        },
        8: {
            "light": (0, 0, 0, 0),
            "dark": (0, 0, 0, 0),
            "light_alpha": (1, 0, 166.75948, 0.6),
            "dark_alpha": (0, 0, 0, 0),
        },
        9: {
            "light": (0, 0, 0, 0),
            "dark": (0, 0, 0, 0),
            "light_alpha": (1, 0, 166.75948, 0.7),
            "dark_alpha": (0, 0, 0, 0),
        },
        10: {
            "light": (0, 0, 0, 0),
            "dark": (0, 0, 0, 0),
            "light_alpha": (1, 0, 166.75948, 0.8),
            "dark_alpha": (0, 0, 0, 0),
        },
        11: {
            "light": (0, 0, 0, 0),
            "dark": (0, 0, 0, 0),
            "light_alpha": (1, 0, 166.75948, 0.9),
            "dark_alpha": (0, 0, 0, 0),
        },
        12: {
            "light": (0, 0, 0, 0),
            "dark": (0, 0, 0, 0),
            "light_alpha": (1, 0, 166.75948, 0.95),
            "dark_alpha": (0, 0, 0, 0),
        },
    },
    "Yellow": {
        1: {
            "light": (0.992846, 0.00516, 106.493216),
            "dark": (0.181146, 0.012986, 86.010111),
            "light_alpha": (0.718704, 0.181145, 110.205639, 0.024),
            "dark_alpha": (0.689861, 0.240512, 40.877446, 0.013),
        },
        2: {
            "light": (0.988407, 0.025048, 102.915166),
            "dark": (0.208806, 0.017019, 92.08773),
            "light_alpha": (0.881297, 0.212361, 100.623531, 0.079),
            "dark_alpha": (0.862692, 0.203471, 88.649629, 0.038),
        },
        3: {
            "light": (0.974019, 0.084491, 104.358966),
            "dark": (0.259023, 0.046637, 90.289337),
            "light_alpha": (0.924538, 0.226846, 104.561788, 0.251),
            "dark_alpha": (0.825457, 0.198122, 77.711943, 0.11),
        },
        4: {
            "light": (0.952658, 0.116612, 101.740569),
            "dark": (0.292637, 0.069372, 94.198528),
            "light_alpha": (0.897982, 0.216166, 100.158667, 0.373),
            "dark_alpha": (0.83931, 0.199227, 81.924603, 0.152),
        },
        5: {
            "light": (0.925056, 0.140866, 98.203312),
            "dark": (0.333353, 0.07908, 94.589978),
            "light_alpha": (0.866581, 0.205373, 94.447625, 0.491),
            "dark_alpha": (0.850226, 0.200857, 85.131638, 0.202),
        },
        6: {
            "light": (0.880879, 0.133853, 95.418158),
            "dark": (0.384304, 0.077399, 93.304813),
            "light_alpha": (0.789705, 0.186425, 90.869582, 0.526),
            "dark_alpha": (0.874255, 0.202996, 91.292618, 0.261),
        },
        7: {
            "light": (0.835524, 0.120282, 92.791211),
            "dark": (0.451555, 0.080895, 91.504489),
            "light_alpha": (0.707626, 0.166905, 87.818769, 0.542),
            "dark_alpha": (0.884538, 0.184351, 90.371293, 0.345),
        },
        8: {
            "light": (0.766141, 0.137046, 89.846226),
            "dark": (0.534866, 0.095067, 89.92653),
            "light_alpha": (0.667559, 0.157848, 84.316174, 0.687),
            "dark_alpha": (0.885583, 0.174806, 89.109482, 0.463),
        },
        9: {
            "light": (0.926578, 0.208599, 102.142932),
            "dark": (0.926578, 0.208599, 102.142932),
            "light_alpha": (0.914269, 0.220672, 100.701632, 0.781),
            "dark_alpha": (0.927556, 0.209068, 102.362244),
        },
        10: {
            "light": (0.896688, 0.185118, 97.530737),
            "dark": (0.971072, 0.182151, 109.361041),
            "light_alpha": (0.864655, 0.204892, 93.971558, 0.71),
            "dark_alpha": (0.971043, 0.182412, 109.364808),
        },
        11: {
            "light": (0.574419, 0.136414, 81.690806),
            "dark": (0.900181, 0.1664, 101.640386),
            "light_alpha": (0.574419, 0.136414, 81.690806),
            "dark_alpha": (0.900181, 0.1664, 101.640386),
        },
        12: {
            "light": (0.357837, 0.046, 86.634661),
            "dark": (0.94131, 0.074666, 101.044281),
            "light_alpha": (0.357837, 0.046, 86.634661),
            "dark_alpha": (0.94131, 0.074666, 101.044281),
        },
    },
}
