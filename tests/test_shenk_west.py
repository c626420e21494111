"""
Tests for SELECT (Shenk-West) selection.
"""

import numpy as np
import pytest

from calsel import InvalidArgument, pairwise, shenk_west


@pytest.fixture
def X():
    rng = np.random.RandomState(0)
    return rng.randn(200, 3) @ rng.randn(3, 10)


def _normalised_distances(res, n_pc=3):
    return pairwise(np.asarray(res.pc)) / n_pc


class TestShenkWest:
    def test_partition(self, X):
        res = shenk_west(X, d_min=0.3, pc=3)
        both = np.sort(np.concatenate([res.model, res.test]))
        np.testing.assert_array_equal(both, np.arange(200))
        assert len(res.model) >= 1
        assert len(np.unique(res.model)) == len(res.model)

    def test_first_pick_is_densest(self, X):
        res = shenk_west(X, d_min=0.3, pc=3)
        counts = (_normalised_distances(res) < 0.3).sum(axis=0)
        assert res.model[0] == np.argmax(counts)

    def test_selected_points_are_separated(self, X):
        res = shenk_west(X, d_min=0.3, pc=3, threshold=0.0)
        D = _normalised_distances(res)[np.ix_(res.model, res.model)]
        off_diagonal = D[~np.eye(len(res.model), dtype=bool)]
        assert off_diagonal.min() >= 0.3

    def test_threshold_limits_selection(self, X):
        full = shenk_west(X, d_min=0.3, pc=3, threshold=0.0)
        early = shenk_west(X, d_min=0.3, pc=3, threshold=0.6)
        assert len(early.model) <= len(full.model)
        np.testing.assert_array_equal(full.model[:len(early.model)], early.model)

    def test_threshold_one_selects_single_sample(self, X):
        res = shenk_west(X, d_min=0.5, pc=3, threshold=1.0)
        assert len(res.model) == 1

    def test_remove_outliers(self, X):
        X = X.copy()
        X[0] = 100.0
        res = shenk_west(X, d_min=0.3, pc=3, threshold=0.0, rm_outlier=True)
        assert 0 in res.removed_outliers
        assert 0 not in res.model
        assert 0 in res.test

    def test_pc_fraction(self, X):
        res = shenk_west(X, d_min=0.3, pc=0.99)
        assert res.pc.shape[1] <= 4

    @pytest.mark.parametrize('kwargs', [
        {'d_min': None},
        {'d_min': 0.0},
        {'d_min': -1.0},
        {'d_min': 0.3, 'threshold': 1.5},
        {'d_min': 0.3, 'threshold': -0.1},
    ])
    def test_invalid_arguments(self, X, kwargs):
        with pytest.raises(InvalidArgument):
            shenk_west(X, **kwargs)

    def test_single_column(self):
        X = np.random.RandomState(3).randn(50, 1)
        res = shenk_west(X, d_min=0.3, pc=1)
        assert len(res.model) >= 1
        assert res.pc.shape == (50, 1)
