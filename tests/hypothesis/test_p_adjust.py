"""
Tests for multiple testing correction.

R reference values verified against R p.adjust().
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from pyhtest.core.exceptions import ValidationError
from pyhtest.hypothesis import AdjustmentMethod, p_adjust


PV1 = [0.001, 0.01, 0.05, 0.1, 0.5, 0.9]
PV2 = [0.01, 0.04, 0.03, 0.005]


class TestHolm:

    def test_sorted_input(self):
        """p.adjust(c(0.01, 0.02, 0.03, 0.04, 0.05), 'holm')."""
        adj = p_adjust([0.01, 0.02, 0.03, 0.04, 0.05])
        assert_allclose(adj, [0.05, 0.08, 0.09, 0.09, 0.09], rtol=1e-12)

    def test_r_reference(self):
        adj = p_adjust(PV1, method="holm")
        assert_allclose(adj, [0.006, 0.05, 0.2, 0.3, 1.0, 1.0], rtol=1e-12)

    def test_unsorted_keeps_positions(self):
        """p.adjust(c(0.01, 0.04, 0.03, 0.005), 'holm')."""
        adj = p_adjust(PV2, method=AdjustmentMethod.HOLM_BONFERRONI)
        assert_allclose(adj, [0.03, 0.06, 0.06, 0.02], rtol=1e-12)

    def test_monotone_in_sorted_order(self, rng):
        p = rng.uniform(size=30)
        adj = p_adjust(p)
        assert np.all(np.diff(adj[np.argsort(p)]) >= 0)
        assert np.all(adj >= p)


class TestBenjaminiHochberg:

    def test_r_reference(self):
        adj = p_adjust(PV1, method="BH")
        assert_allclose(adj, [0.006, 0.03, 0.1, 0.15, 0.6, 0.9], rtol=1e-12)

    def test_unsorted_keeps_positions(self):
        adj = p_adjust(PV2, method="BH")
        assert_allclose(adj, [0.02, 0.04, 0.04, 0.02], rtol=1e-12)

    def test_fdr_alias(self):
        assert_allclose(p_adjust(PV1, "fdr"), p_adjust(PV1, "BH"))

    def test_never_above_holm(self, rng):
        p = rng.uniform(size=25)
        assert np.all(p_adjust(p, "BH") <= p_adjust(p, "holm") + 1e-15)


class TestBonferroni:

    def test_r_reference(self):
        adj = p_adjust(PV1, method="bonferroni")
        assert_allclose(adj, [0.006, 0.06, 0.3, 0.6, 1.0, 1.0], rtol=1e-12)


class TestPAdjustEdgeCases:

    def test_empty(self):
        adj = p_adjust([])
        assert adj.shape == (0,)

    def test_single_value_unchanged(self):
        for method in ("holm", "BH", "bonferroni"):
            assert_allclose(p_adjust([0.03], method), [0.03])

    def test_input_not_mutated(self):
        p = np.array(PV2)
        p_adjust(p, "BH")
        assert_allclose(p, PV2)

    def test_returns_new_array(self):
        p = np.array([0.5])
        assert p_adjust(p) is not p

    def test_invalid_method(self):
        with pytest.raises(ValidationError, match="method"):
            p_adjust(PV1, method="hochberg")

    @pytest.mark.parametrize("bad", [-0.01, 1.01, np.nan])
    def test_out_of_range(self, bad):
        with pytest.raises(ValidationError):
            p_adjust([0.1, bad])

    def test_not_1d(self):
        with pytest.raises(ValidationError):
            p_adjust([[0.1, 0.2], [0.3, 0.4]])
