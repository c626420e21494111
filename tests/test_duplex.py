"""
Tests for DUPLEX selection.
"""

import numpy as np
import pytest

from calsel import CalselClampWarning, ConfigurationError, InvalidArgument, duplex, pairwise


@pytest.fixture
def X2d():
    rng = np.random.RandomState(0)
    return rng.randn(1000, 2)


class TestDuplex:
    def test_sizes_and_disjoint(self, X2d):
        res = duplex(X2d, k=15, metric='euclid')
        assert len(res.model) == 15
        assert len(res.test) == 15
        assert not np.any(np.isin(res.model, res.test))
        assert len(res.unselected) == 970
        union = np.concatenate([res.model, res.test, res.unselected])
        np.testing.assert_array_equal(np.sort(union), np.arange(1000))

    def test_farthest_pair_is_split(self, X2d):
        res = duplex(X2d, k=5, metric='euclid')
        D = pairwise(X2d)
        assert D[res.model[0], res.test[0]] == pytest.approx(D.max())

    def test_alternating_max_min_on_union(self, X2d):
        res = duplex(X2d, k=6, metric='euclid')
        D = pairwise(X2d)
        # selection order: model[0], test[0], model[1], test[1], ...
        order = np.ravel(np.column_stack([res.model, res.test]))
        for step in range(2, len(order)):
            chosen = order[:step]
            pool = np.setdiff1d(np.arange(1000), chosen)
            minima = D[np.ix_(chosen, pool)].min(axis=0)
            assert order[step] == pool[np.argmax(minima)]

    def test_both_sets_spread(self, X2d):
        res = duplex(X2d, k=15, metric='euclid')
        D = pairwise(X2d)
        nn = np.sort(D, axis=1)[:, 1]
        for subset in (res.model, res.test):
            inner = D[np.ix_(subset, subset)]
            inner = inner[~np.eye(len(subset), dtype=bool)]
            assert inner.min() > np.median(nn)

    def test_mahalanobis_with_pc(self, X2d):
        res = duplex(X2d, k=10, pc=2)
        assert res.pc.shape == (1000, 2)
        assert len(res.model) == len(res.test) == 10

    def test_k_clamped_to_half(self):
        X = np.random.RandomState(1).randn(11, 2)
        with pytest.warns(CalselClampWarning):
            res = duplex(X, k=8, metric='euclid')
        assert len(res.model) == 5
        assert len(res.test) == 5
        assert len(res.unselected) == 1

    def test_groups_stay_together(self):
        rng = np.random.RandomState(2)
        X = rng.randn(120, 3)
        group = np.repeat(np.arange(40), 3)
        res = duplex(X, k=12, metric='euclid', group=group)
        g_model = set(group[res.model])
        g_test = set(group[res.test])
        assert not g_model & g_test
        for g in g_model | g_test:
            members = np.flatnonzero(group == g)
            assert np.all(np.isin(members, res.model)) or np.all(np.isin(members, res.test))

    def test_single_group_has_no_validation_set(self):
        X = np.random.RandomState(4).randn(10, 2)
        with pytest.raises(ConfigurationError):
            duplex(X, k=2, metric='euclid', group=np.zeros(10, dtype=int))

    def test_two_groups_split_between_sets(self):
        X = np.random.RandomState(5).randn(10, 2)
        group = np.repeat([0, 1], 5)
        res = duplex(X, k=2, metric='euclid', group=group)
        assert len(set(group[res.model])) == 1
        assert len(set(group[res.test])) == 1
        assert set(group[res.model]) != set(group[res.test])
        assert len(res.unselected) == 0

    def test_too_few_rows(self):
        X = np.random.RandomState(3).randn(3, 2)
        with pytest.raises(InvalidArgument):
            duplex(X, k=2, metric='euclid')

    def test_invalid_k(self, X2d):
        with pytest.raises(InvalidArgument):
            duplex(X2d, k=1)

    def test_single_column(self):
        X = np.random.RandomState(6).randn(20, 1)
        res = duplex(X, k=3, metric='euclid')
        assert len(res.model) == len(res.test) == 3
        assert {res.model[0], res.test[0]} == {np.argmin(X[:, 0]), np.argmax(X[:, 0])}
