"""
Tests for Puchwein selection and its per-pass leverage trace.
"""

import numpy as np
import pytest

from calsel import InvalidArgument, pairwise, puchwein


@pytest.fixture
def X():
    rng = np.random.RandomState(0)
    return rng.randn(300, 5) @ rng.randn(5, 12)


class TestPuchwein:
    def test_trace_consistency(self, X):
        res = puchwein(X, k=0.2, pc=3)
        n_sel = np.array([len(sel) for sel in res.loops])
        assert len(res.leverage) == len(res.loops)
        np.testing.assert_array_equal(res.leverage.loop, np.arange(1, len(res.loops) + 1))
        np.testing.assert_array_equal(res.leverage.removed, 300 - n_sel)
        np.testing.assert_allclose(res.leverage.diff, res.leverage.obs - res.leverage.theor)

    def test_stops_at_min_sel(self, X):
        res = puchwein(X, k=0.2, pc=3, min_sel=5)
        sizes = [len(sel) for sel in res.loops]
        assert sizes[-1] <= 5
        assert all(size > 5 for size in sizes[:-1])

    def test_coarser_radius_selects_fewer(self, X):
        res = puchwein(X, k=0.2, pc=3)
        sizes = [len(sel) for sel in res.loops]
        for earlier, later in zip(sizes[:-1], sizes[1:]):
            assert earlier >= later

    @pytest.mark.parametrize('seed', [0, 1, 2, 3, 4])
    def test_small_factor_passes_are_nested(self, seed):
        rng = np.random.RandomState(seed)
        X = rng.randn(150, 4) @ rng.randn(4, 8)
        res = puchwein(X, k=0.05, pc=3, min_sel=1)
        assert len(res.loops[-1]) == 1
        for earlier, later in zip(res.loops[:-1], res.loops[1:]):
            assert len(earlier) >= len(later)
            assert np.all(np.isin(later, earlier))

    def test_candidates_separated_by_limit(self, X):
        res = puchwein(X, k=0.2, pc=3)
        Z = res.pc
        d_ini = 0.2 * max(3 - 2, 1)
        for m, sel in enumerate(res.loops, start=1):
            if len(sel) < 2:
                continue
            D = pairwise(Z[sel])
            D = D[~np.eye(len(sel), dtype=bool)]
            assert D.min() > m * d_ini

    def test_highest_leverage_always_first(self, X):
        res = puchwein(X, k=0.2, pc=3)
        Z = res.pc
        leverage = np.linalg.norm(Z - Z.mean(axis=0), axis=1)
        for sel in res.loops:
            assert sel[0] == np.argmax(leverage)

    def test_candidates_unique_and_valid(self, X):
        res = puchwein(X, k=0.2, pc=3)
        for sel in res.loops:
            assert len(np.unique(sel)) == len(sel)
            assert sel.min() >= 0 and sel.max() < 300

    def test_no_pass_chosen_by_default(self, X):
        res = puchwein(X, pc=3)
        assert res.model is None
        assert res.test is None
        assert res.loop_selected is None

    def test_loop_selects_pass(self, X):
        res = puchwein(X, pc=3, loop=2)
        np.testing.assert_array_equal(res.model, res.loops[1])
        both = np.sort(np.concatenate([res.model, res.test]))
        np.testing.assert_array_equal(both, np.arange(300))

    def test_select_after_inspection(self, X):
        res = puchwein(X, pc=3)
        best = int(res.leverage.loop[np.argmax(res.leverage.diff)])
        split = res.select(best)
        np.testing.assert_array_equal(split.model, res.loops[best - 1])
        assert len(split.model) + len(split.test) == 300

    def test_select_out_of_range(self, X):
        res = puchwein(X, pc=3)
        with pytest.raises(InvalidArgument):
            res.select(0)
        with pytest.raises(InvalidArgument):
            res.select(len(res.loops) + 1)

    def test_loop_beyond_trace(self, X):
        with pytest.raises(InvalidArgument):
            puchwein(X, pc=3, loop=10_000)

    def test_trace_frame(self, X):
        frame = puchwein(X, pc=3).leverage.to_frame()
        assert list(frame.columns) == ['loop', 'removed', 'obs', 'theor', 'diff']

    @pytest.mark.parametrize('k', [0, -0.1, 1.5])
    def test_invalid_k(self, X, k):
        with pytest.raises(InvalidArgument):
            puchwein(X, k=k)

    def test_single_column(self):
        X = np.random.RandomState(5).randn(50, 1)
        res = puchwein(X, pc=1)
        assert len(res.loops[-1]) <= 5
        assert res.pc.shape == (50, 1)
