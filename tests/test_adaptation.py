# Copyright (c) 2026 ChromaKit
# SPDX-License-Identifier: MIT

"""Tests for chromatic adaptation."""

import numpy as np
import pytest

from chromakit.convert.adaptation import (
    BRADFORD,
    BRADFORD_D50_TO_D65,
    BRADFORD_D65_TO_D50,
    VON_KRIES,
    XYZ_SCALING,
    ConeResponseModel,
    adapt_xyz,
    compute_adaptation_matrix,
    get_adaptation_matrix,
    table_key,
)
from chromakit.runtime.service import ColorService
from chromakit.schema.color import D50, D65, A, Color, ColorSpace


class TestConeResponseModels:
    """Built-in model matrices."""

    @pytest.mark.parametrize("model", [BRADFORD, VON_KRIES, XYZ_SCALING])
    def test_matrix_and_inverse_are_inverses(self, model):
        np.testing.assert_allclose(model.matrix @ model.inverse, np.eye(3), atol=1e-5)

    def test_rejects_non_square(self):
        with pytest.raises(ValueError, match="3x3"):
            ConeResponseModel("BAD", np.eye(2), np.eye(2))

    @pytest.mark.parametrize("model", [BRADFORD, VON_KRIES])
    def test_inverse_is_exact_to_rounding(self, model):
        np.testing.assert_allclose(model.inverse @ model.matrix, np.eye(3), atol=1e-12)


class TestComputeAdaptationMatrix:
    """Matrix built from cone responses."""

    def test_bradford_roundtrip_identity(self):
        forward = get_adaptation_matrix(D50, D65)
        backward = get_adaptation_matrix(D65, D50)
        np.testing.assert_allclose(forward @ backward, np.eye(3), atol=1e-5)

    @pytest.mark.parametrize("model", [BRADFORD, VON_KRIES, XYZ_SCALING])
    @pytest.mark.parametrize("pair", [(D50, D65), (D65, A), (A, D50)])
    def test_swapped_arguments_are_inverses(self, model, pair):
        source, target = pair
        ab = compute_adaptation_matrix(source, target, model)
        ba = compute_adaptation_matrix(target, source, model)
        np.testing.assert_allclose(ab @ ba, np.eye(3), atol=1e-9)

    def test_same_illuminant_is_identity(self):
        np.testing.assert_allclose(compute_adaptation_matrix(D65, D65), np.eye(3), atol=1e-12)

    def test_d50_relative_vector(self):
        """Source response divided by target response."""
        result = compute_adaptation_matrix(D50, D65, BRADFORD) @ np.array([0.96, 1.0, 0.82])
        assert result[0] == pytest.approx(0.95, abs=0.1)
        assert result[1] == pytest.approx(1.0, abs=0.1)
        assert result[2] == pytest.approx(0.62, abs=0.01)

    def test_xyz_scaling_is_diagonal(self):
        matrix = compute_adaptation_matrix(D50, D65, XYZ_SCALING)
        np.testing.assert_allclose(matrix, np.diag(D50.white / D65.white), atol=1e-12)

    def test_computed_matches_published_table(self):
        np.testing.assert_allclose(
            compute_adaptation_matrix(D65, D50, BRADFORD), BRADFORD_D50_TO_D65, atol=1e-3,
        )


class TestGetAdaptationMatrix:
    """Precomputed table lookup."""

    def test_table_hit_returns_stored_array(self):
        assert get_adaptation_matrix(D50, D65, BRADFORD) is BRADFORD_D50_TO_D65
        assert get_adaptation_matrix(D65, D50, BRADFORD) is BRADFORD_D65_TO_D50

    def test_table_is_read_only(self):
        with pytest.raises(ValueError):
            BRADFORD_D50_TO_D65[0, 0] = 1.0

    def test_miss_is_computed(self):
        matrix = get_adaptation_matrix(D65, A, VON_KRIES)
        np.testing.assert_allclose(matrix, compute_adaptation_matrix(D65, A, VON_KRIES))

    def test_table_key(self):
        assert table_key(D50, D65, BRADFORD) == "BRADFORD_D50_TO_D65"
        assert table_key(D65, A, VON_KRIES) == "VONKRIES_D65_TO_A"


class TestAdaptXYZ:
    """Re-expressing XYZ colors under another illuminant."""

    def test_white_point_maps_to_white_point(self):
        white = Color(ColorSpace.XYZ, tuple(D50.white), illuminant=D50)
        adapted = adapt_xyz(white, D65)
        assert adapted.illuminant == D65
        np.testing.assert_allclose(adapted.vector, D65.white, atol=1e-3)

    def test_same_illuminant_returns_input(self):
        color = Color(ColorSpace.XYZ, (0.2, 0.3, 0.4))
        assert adapt_xyz(color, D65) is color

    def test_alpha_is_carried(self):
        color = Color(ColorSpace.XYZ, (0.2, 0.3, 0.4), alpha=0.25, illuminant=D50)
        assert adapt_xyz(color, D65).alpha == 0.25

    def test_rejects_other_spaces(self):
        with pytest.raises(ValueError, match="xyz"):
            adapt_xyz(Color(ColorSpace.SRGB, (1, 1, 1)), D65)

    @pytest.mark.parametrize("source, target, model", [
        (A, D65, BRADFORD),
        (D65, A, BRADFORD),
        (D50, D65, VON_KRIES),
        (D65, D50, XYZ_SCALING),
        (A, D50, VON_KRIES),
    ])
    def test_computed_path_maps_white_to_white(self, source, target, model):
        white = Color(ColorSpace.XYZ, tuple(source.white), illuminant=source)
        adapted = adapt_xyz(white, target, model)
        np.testing.assert_allclose(adapted.vector, target.white, atol=1e-9)

    def test_roundtrip_through_computed_path(self):
        color = Color(ColorSpace.XYZ, (0.3, 0.4, 0.2), illuminant=A)
        back = adapt_xyz(adapt_xyz(color, D65), A)
        np.testing.assert_allclose(back.vector, color.vector, atol=1e-12)

    def test_router_renders_illuminant_a_white_as_white(self):
        white = Color(ColorSpace.XYZ, tuple(A.white), illuminant=A)
        rgb = ColorService().convert(white, ColorSpace.SRGB)
        np.testing.assert_allclose(rgb.vector, [1.0, 1.0, 1.0], atol=1e-3)
