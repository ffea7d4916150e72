import itertools

import pytest

from boolean import FALSE, TRUE, church_max, church_min, from_bool

BOOLS = [FALSE, TRUE]
PAIRS = list(itertools.product(BOOLS, BOOLS))


class TestIfThenElse:

    def test_selects_branch(self):
        assert TRUE.if_then_else(lambda: "yes", lambda: "no") == "yes"
        assert FALSE.if_then_else(lambda: "yes", lambda: "no") == "no"

    def test_only_chosen_branch_is_evaluated(self):
        def boom():
            raise AssertionError("不应被求值")
        assert TRUE.if_then_else(lambda: 1, boom) == 1
        assert FALSE.if_then_else(boom, lambda: 2) == 2

    def test_bool_conversion(self):
        assert TRUE.to_bool() is True
        assert FALSE.to_bool() is False
        assert from_bool(True) is TRUE
        assert from_bool(False) is FALSE

    def test_repr(self):
        assert repr(TRUE) == "TRUE"
        assert repr(FALSE) == "FALSE"


class TestOperators:

    @pytest.mark.parametrize("a, b", PAIRS)
    def test_and(self, a, b):
        assert (a & b).to_bool() == (a.to_bool() and b.to_bool())

    @pytest.mark.parametrize("a, b", PAIRS)
    def test_or(self, a, b):
        assert (a | b).to_bool() == (a.to_bool() or b.to_bool())

    @pytest.mark.parametrize("a", BOOLS)
    def test_not(self, a):
        assert (~a).to_bool() == (not a.to_bool())

    @pytest.mark.parametrize("a, b", PAIRS)
    def test_eq_ne(self, a, b):
        assert a.eq(b).to_bool() == (a.to_bool() == b.to_bool())
        assert a.ne(b).to_bool() == (a.to_bool() != b.to_bool())

    @pytest.mark.parametrize("a, b", PAIRS)
    def test_lt(self, a, b):
        assert a.lt(b).to_bool() == (a.to_bool() < b.to_bool())

    def test_short_circuit(self):
        def boom():
            raise AssertionError("不应被求值")
        assert FALSE.and_(boom) is FALSE
        assert TRUE.or_(boom) is TRUE
        assert TRUE.and_(lambda: FALSE) is FALSE

    def test_min_max(self):
        assert church_min(TRUE, FALSE) is FALSE
        assert church_max(TRUE, FALSE) is TRUE
        assert church_min(FALSE, TRUE) is FALSE
        assert church_max(FALSE, TRUE) is TRUE
