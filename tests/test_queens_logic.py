import pytest

from queens import solve
from queens_logic import NQueensLogic


class TestNQueensLogic:

    def test_zero_queens(self):
        assert NQueensLogic(0).solve() == {()}

    def test_four_queens(self):
        assert NQueensLogic(4).solve() == {(1, 3, 0, 2), (2, 0, 3, 1)}

    @pytest.mark.parametrize("n", [1, 2, 3, 5, 6])
    def test_agrees_with_backtracking(self, n):
        assert NQueensLogic(n).solve() == solve(n)

    def test_one_variable_per_row(self):
        assert len(NQueensLogic(5).queens) == 5

    def test_constraint_count(self):
        # 每行一个取值约束，每对行一个冲突约束
        assert len(NQueensLogic(4).get_constraints()) == 4 + 6

    def test_negative_size_rejected(self):
        with pytest.raises(ValueError):
            NQueensLogic(-1)
