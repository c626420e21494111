"""
Tests for Honigs selection and spectral deflation.
"""

import numpy as np
import pytest

from calsel import InvalidArgument, NumericalError, honigs
from calsel.selectors.honigs import deflate


@pytest.fixture
def absorbance():
    rng = np.random.RandomState(0)
    return rng.rand(40, 25) + 0.1


class TestDeflate:
    def test_selected_column_zeroed(self, absorbance):
        out = deflate(absorbance, 3, 7)
        np.testing.assert_allclose(out[:, 7], 0.0, atol=1e-12)

    def test_selected_row_zeroed(self, absorbance):
        out = deflate(absorbance, 3, 7)
        np.testing.assert_allclose(out[3], 0.0, atol=1e-12)

    def test_zero_pivot(self):
        with pytest.raises(NumericalError):
            deflate(np.zeros((3, 3)), 0, 0)


class TestHonigs:
    def test_k1_deflation_invariant(self, absorbance):
        res = honigs(absorbance, k=1)
        out = deflate(absorbance, res.model[0], res.bands[0])
        np.testing.assert_allclose(out[:, res.bands[0]], 0.0, atol=1e-12)

    def test_first_pick_is_largest_value(self, absorbance):
        res = honigs(absorbance, k=3)
        r, c = np.unravel_index(np.argmax(np.abs(absorbance)), absorbance.shape)
        assert res.model[0] == r
        assert res.bands[0] == c

    def test_counts_and_uniqueness(self, absorbance):
        res = honigs(absorbance, k=10)
        assert len(res.model) == len(res.bands) == 10
        assert len(np.unique(res.model)) == 10
        assert len(np.unique(res.bands)) == 10
        both = np.sort(np.concatenate([res.model, res.test]))
        np.testing.assert_array_equal(both, np.arange(40))

    def test_reflectance_converted(self, absorbance):
        reflectance = 10.0 ** (-absorbance)
        res_r = honigs(reflectance, k=5, type='R')
        res_a = honigs(np.log(1.0 / reflectance), k=5, type='A')
        np.testing.assert_array_equal(res_r.model, res_a.model)
        np.testing.assert_array_equal(res_r.bands, res_a.bands)

    def test_reflectance_must_be_positive(self, absorbance):
        with pytest.raises(NumericalError):
            honigs(absorbance - 1.0, k=2, type='reflectance')

    def test_all_zero_matrix(self):
        with pytest.raises(NumericalError):
            honigs(np.zeros((5, 5)), k=2)

    @pytest.mark.parametrize('kwargs', [
        {'k': None},
        {'k': 0},
        {'k': 26},
        {'k': 2, 'type': 'T'},
    ])
    def test_invalid_arguments(self, absorbance, kwargs):
        with pytest.raises(InvalidArgument):
            honigs(absorbance, **kwargs)

    def test_single_column(self):
        A = np.random.RandomState(2).rand(10, 1) + 0.1
        res = honigs(A, k=1)
        assert res.model[0] == np.argmax(A[:, 0])
        np.testing.assert_array_equal(res.bands, [0])
