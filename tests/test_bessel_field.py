"""
Unit tests for the closed-form Bessel standing wave.

Tests verify:
- Grid and time sampling endpoints and ordering
- Field tensor shape and agreement with the formula
- Automatic and manual colour/height range
- Parameter validation
"""

import numpy as np
import pytest
from scipy.special import j0

from bessel_field import (
    build_wave,
    check_params,
    compute_field,
    field_range,
    iter_field_slices,
    make_grid,
    make_times,
    nominal_time_step,
    radial_distance,
)


# =============================================================================
# Sampling
# =============================================================================


class TestSampling:
    """Grid and time samples."""

    def test_grid_endpoints_and_length(self):
        x, y, X, Y = make_grid(2.0, 3.0, 11, 7)
        assert len(x) == 11 and len(y) == 7
        assert x[0] == -1.0 and x[-1] == 1.0
        assert y[0] == -1.5 and y[-1] == 1.5
        assert np.all(np.diff(x) > 0)
        assert np.all(np.diff(y) > 0)

    def test_meshgrid_is_rows_by_columns(self):
        x, y, X, Y = make_grid(2.0, 3.0, 11, 7)
        assert X.shape == (7, 11)
        assert np.array_equal(X[0], x)
        assert np.array_equal(Y[:, 0], y)

    def test_radial_distance(self):
        X = np.array([[3.0, 0.0]])
        Y = np.array([[4.0, 0.0]])
        assert np.allclose(radial_distance(X, Y), [[5.0, 0.0]])

    def test_times_endpoints(self):
        t = make_times(4.0, 100)
        assert len(t) == 100
        assert t[0] == 0.0
        assert t[-1] == 4.0
        assert np.all(np.diff(t) > 0)

    def test_nominal_step_differs_from_spacing(self):
        t = make_times(4.0, 100)
        assert nominal_time_step(4.0, 100) == pytest.approx(0.04)
        assert t[1] - t[0] == pytest.approx(4.0 / 99)


# =============================================================================
# Field values
# =============================================================================


class TestField:
    """Field tensor against the closed form."""

    def test_shape(self, small_params):
        x, y, X, Y, r, t, field = build_wave(**small_params)
        assert field.shape == (10, 12, 5)

    def test_matches_formula_pointwise(self, small_params):
        x, y, X, Y, r, t, field = build_wave(**small_params)
        k, c, A = small_params["k"], small_params["c"], small_params["amplitude"]
        for i in (0, 4, 9):
            for j in (0, 5, 11):
                rij = np.sqrt(x[j] ** 2 + y[i] ** 2)
                for n in range(len(t)):
                    expected = A * j0(k * rij) * np.cos(c * k * t[n])
                    assert np.isclose(field[i, j, n], expected, atol=1e-12)

    def test_origin_reduces_to_cosine(self):
        # odd grid puts a sample exactly on r = 0, and J0(0) = 1
        x, y, X, Y, r, t, field = build_wave(Nx=21, Ny=21, Nt=50, tmax=4.0,
                                             c=1.0, amplitude=1.0,
                                             k=2.0 * np.pi * 1.5)
        assert r[10, 10] == 0.0
        assert np.allclose(field[10, 10, :], np.cos(2.0 * np.pi * 1.5 * t))

    def test_amplitude_scales_field(self):
        r = np.linspace(0.0, 1.0, 6).reshape(2, 3)
        t = make_times(1.0, 4)
        base = compute_field(r, t, amplitude=1.0)
        assert np.allclose(compute_field(r, t, amplitude=2.5), 2.5 * base)

    def test_repeat_runs_are_identical(self, small_params):
        first = build_wave(**small_params)[-1]
        second = build_wave(**small_params)[-1]
        assert np.array_equal(first, second)

    def test_lazy_slices_match_eager(self, small_params):
        x, y, X, Y, r, t, field = build_wave(**small_params)
        slices = list(iter_field_slices(r, t, k=small_params["k"]))
        assert [t_n for t_n, _ in slices] == list(t)
        for n, (_, Z) in enumerate(slices):
            assert np.array_equal(Z, field[:, :, n])

    def test_non_finite_values_propagate(self):
        r = np.array([[0.0, np.nan]])
        field = compute_field(r, make_times(1.0, 3))
        assert np.all(np.isnan(field[0, 1, :]))
        assert np.all(np.isfinite(field[0, 0, :]))


# =============================================================================
# Colour/height range
# =============================================================================


class TestFieldRange:
    """Range used for the z axis and colour scale."""

    def test_automatic_range_has_ten_percent_buffer(self, small_params):
        field = build_wave(**small_params)[-1]
        lo, hi = field_range(field)
        assert lo == pytest.approx(1.1 * field.min())
        assert hi == pytest.approx(1.1 * field.max())

    def test_manual_range_is_used_verbatim(self, small_params):
        field = build_wave(**small_params)[-1]
        assert field_range(field, -0.6, 0.95) == (-0.6, 0.95)

    def test_partial_manual_range_falls_back_to_automatic(self, small_params):
        field = build_wave(**small_params)[-1]
        assert field_range(field, -0.6, None) == field_range(field)

    def test_nan_is_not_masked(self):
        field = np.array([[[0.5, np.nan]]])
        lo, hi = field_range(field)
        assert np.isnan(lo) and np.isnan(hi)


# =============================================================================
# Validation
# =============================================================================


class TestCheckParams:
    """Invalid parameter combinations fail before any computation."""

    @pytest.mark.parametrize("name", ["Nx", "Ny", "Nt"])
    def test_non_positive_counts(self, name):
        with pytest.raises(ValueError, match=name):
            check_params(**{name: 0})

    def test_single_column_grid(self):
        with pytest.raises(ValueError, match="Nx"):
            check_params(Nx=1)

    def test_non_integer_count(self):
        with pytest.raises(ValueError, match="integer"):
            check_params(Nt=10.5)

    @pytest.mark.parametrize("name", ["Lx", "Ly", "tmax"])
    def test_non_positive_extent(self, name):
        with pytest.raises(ValueError, match=name):
            check_params(**{name: 0.0})

    @pytest.mark.parametrize("name", ["delay_time", "snapshot_dpi"])
    def test_non_positive_export_settings(self, name):
        with pytest.raises(ValueError, match=name):
            check_params(**{name: 0})

    def test_negative_pause(self):
        with pytest.raises(ValueError, match="pause_time"):
            check_params(pause_time=-0.1)

    def test_inverted_manual_range(self):
        with pytest.raises(ValueError, match="z_min"):
            check_params(z_min=1.0, z_max=-1.0)

    def test_build_wave_validates(self):
        with pytest.raises(ValueError):
            build_wave(Nt=-3)

    def test_defaults_are_valid(self):
        check_params()
