"""
Tests for HypothesisDesign construction and validation.
"""

from dataclasses import FrozenInstanceError

import numpy as np
import pytest
from numpy.testing import assert_allclose

from pyhtest.core.exceptions import DimensionError, ValidationError
from pyhtest.hypothesis import Alternative, HypothesisDesign


class TestDesignConstruction:

    def test_defaults(self):
        design = HypothesisDesign.for_t_one_sample([1, 2, 3])
        assert design.test_type == "t_one_sample"
        assert design.alternative is Alternative.TWO_SIDED
        assert design.mu == 0.0
        assert design.correct is True

    def test_alternative_from_string(self):
        design = HypothesisDesign.for_t_one_sample([1, 2, 3], alternative="less")
        assert design.alternative is Alternative.LESS

    def test_frozen(self):
        design = HypothesisDesign.for_t_one_sample([1, 2, 3])
        with pytest.raises(FrozenInstanceError):
            design.test_type = "t_paired"

    def test_private_copy(self):
        x = np.array([1.0, 2.0, 3.0])
        design = HypothesisDesign.for_t_one_sample(x)
        x[0] = 100.0
        assert design.x[0] == 1.0

    def test_paired_stores_differences(self):
        design = HypothesisDesign.for_t_paired([5, 6, 7], [1, 1, 1])
        assert design.test_type == "t_paired"
        assert_allclose(design.x, [4.0, 5.0, 6.0])
        assert design.y is None

    def test_wilcoxon_one_sample_pairs_against_shift(self):
        design = HypothesisDesign.for_wilcoxon_one_sample([1.0, 4.0], shift=2.5)
        assert_allclose(design.x, [2.5, 2.5])
        assert_allclose(design.y, [1.0, 4.0])
        assert design.mu == 2.5

    def test_ordered_sample_kept_as_tuple(self):
        design = HypothesisDesign.for_mann_whitney(["a", "c"], ["b"])
        assert design.x == ("a", "c")
        assert design.test_type == "wilcox_rank_sum"

    def test_numeric_sample_becomes_array(self):
        design = HypothesisDesign.for_mann_whitney([1, 3], [2])
        assert isinstance(design.x, np.ndarray)
        assert design.x.dtype == np.float64

    def test_gof_uniform_expected(self):
        design = HypothesisDesign.for_chisq_gof([2, 4, 6, 8])
        assert_allclose(design.expected, [5.0, 5.0, 5.0, 5.0])

    def test_independence_keeps_correction(self):
        design = HypothesisDesign.for_chisq_independence(
            [[1, 2], [3, 4]], correction=False
        )
        assert design.correct is False
        assert design.table.shape == (2, 2)


class TestDesignValidation:

    def test_invalid_alternative(self):
        with pytest.raises(ValidationError, match="alternative"):
            HypothesisDesign.for_sign([1.0], [2.0], alternative="two-sided")

    def test_paired_t_too_short(self):
        with pytest.raises(ValidationError):
            HypothesisDesign.for_t_paired([1.0], [2.0])

    def test_two_sample_needs_two_each(self):
        with pytest.raises(ValidationError, match="y"):
            HypothesisDesign.for_t_two_sample([1, 2, 3], [4])

    def test_2d_sample_rejected(self):
        with pytest.raises(DimensionError):
            HypothesisDesign.for_t_one_sample([[1, 2], [3, 4]])

    def test_sign_length_mismatch(self):
        with pytest.raises(DimensionError):
            HypothesisDesign.for_sign([1, 2], [1, 2, 3])

    def test_table_with_nan(self):
        with pytest.raises(ValidationError):
            HypothesisDesign.for_chisq_independence([[1, np.nan], [3, 4]])

    def test_mann_whitney_mixed_types(self):
        """None cannot be compared with numbers."""
        with pytest.raises(ValidationError, match="x and y"):
            HypothesisDesign.for_mann_whitney([None, 1.0], [2.0, 3.0])


class TestDesignRepr:

    def test_one_sample(self):
        r = repr(HypothesisDesign.for_t_one_sample([1, 2, 3]))
        assert r == "HypothesisDesign(test_type='t_one_sample', n=3)"

    def test_two_sample(self):
        r = repr(HypothesisDesign.for_mann_whitney([1, 2], [3, 4, 5]))
        assert "n_x=2, n_y=3" in r

    def test_table(self):
        r = repr(HypothesisDesign.for_chisq_independence([[1, 2], [3, 4]]))
        assert "table=(2, 2)" in r
