"""
Unit tests for the spectral filter constructor.
"""
import numpy as np
import pytest

from hilbertfft.errors import InvalidArgumentError
from hilbertfft.spectral_filter import bin_weights, spectral_filter


class TestSpectralFilterBasic:
    """Basic contract tests."""

    @pytest.mark.parametrize("m", [1, 2, 3, 4, 7, 8, 101, 256])
    def test_length_is_twice_bins(self, m):
        assert len(spectral_filter(m)) == 2 * m

    @pytest.mark.parametrize("m", [1, 2, 5, 16, 33])
    def test_values_drawn_from_0_1_2(self, m):
        assert set(np.unique(spectral_filter(m))) <= {0.0, 1.0, 2.0}

    @pytest.mark.parametrize("m", [3, 6, 9])
    def test_both_slots_share_weight(self, m):
        h = spectral_filter(m)
        np.testing.assert_array_equal(h[0::2], h[1::2])
        np.testing.assert_array_equal(h[0::2], bin_weights(m))

    def test_dtype_is_float64(self):
        assert spectral_filter(4).dtype == np.float64


class TestSpectralFilterShape:
    """Per-bin weights for even and odd bin counts."""

    @pytest.mark.parametrize("m", [2, 4, 10, 64])
    def test_even(self, m):
        h = bin_weights(m)
        assert h[0] == 1.0
        assert h[m // 2] == 1.0
        assert np.all(h[1:m // 2] == 2.0)
        assert np.all(h[m // 2 + 1:] == 0.0)

    @pytest.mark.parametrize("m", [1, 3, 5, 11, 63])
    def test_odd(self, m):
        h = bin_weights(m)
        assert h[0] == 1.0
        assert np.all(h[1:(m - 1) // 2 + 1] == 2.0)
        assert np.all(h[(m - 1) // 2 + 1:] == 0.0)

    def test_four_bins_exact(self):
        np.testing.assert_array_equal(
            spectral_filter(4), [1, 1, 2, 2, 1, 1, 0, 0]
        )

    def test_five_bins_exact(self):
        np.testing.assert_array_equal(bin_weights(5), [1, 2, 2, 0, 0])

    def test_single_bin_is_dc_only(self):
        np.testing.assert_array_equal(spectral_filter(1), [1, 1])

    def test_two_bins_dc_and_nyquist(self):
        np.testing.assert_array_equal(bin_weights(2), [1, 1])

    @pytest.mark.parametrize("m", [4, 5, 100, 101])
    def test_weights_sum_to_bin_count(self, m):
        """Total weight is preserved: DC + Nyquist + doubled half = m."""
        assert bin_weights(m).sum() == m


class TestSpectralFilterEdgeCases:
    """Edge case handling."""

    def test_zero_bins_empty(self):
        h = spectral_filter(0)
        assert len(h) == 0
        assert h.dtype == np.float64

    def test_numpy_integer_accepted(self):
        assert len(spectral_filter(np.int64(6))) == 12

    def test_negative_raises(self):
        with pytest.raises(InvalidArgumentError):
            spectral_filter(-1)

    @pytest.mark.parametrize("m", [2.5, "4", None, True])
    def test_non_integer_raises(self, m):
        with pytest.raises(InvalidArgumentError):
            bin_weights(m)

    def test_fresh_array_each_call(self):
        a = spectral_filter(8)
        a[:] = 0.0
        assert spectral_filter(8)[0] == 1.0
