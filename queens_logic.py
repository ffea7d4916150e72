import logging
from typing import Set, Tuple

from kanren import run, var, membero, lall
from unification import reify

from queens import check_board_size

logger = logging.getLogger(__name__)


def safe_pairo(col_i, col_j, distance):
    """逻辑约束：相隔 distance 行的两个皇后不在同一列，也不在同一对角线

    调用时两个变量都应已绑定，因此 get_constraints 会把它放在对应的 membero 之后。
    """
    def safe_pair_goal(S):
        a, b = reify((col_i, col_j), S)
        if a != b and abs(a - b) != distance:
            yield S
    return safe_pair_goal


class NQueensLogic:
    def __init__(self, n=6):
        """初始化N皇后问题的逻辑求解器
        Args:
            n (int): 棋盘大小和皇后数量，默认为6
        """
        check_board_size(n)
        self.N = n  # 设置棋盘大小
        self.cols = tuple(range(n))  # 创建列值域(0到n-1)
        self.queens = tuple(var() for _ in range(n))  # 创建n个逻辑变量表示皇后

    def get_constraints(self):
        """生成所有约束条件
        Returns:
            list: 按行交错排列的约束，第 j 行先取值，再检查它与前面每一行的冲突
        """
        constraints = []
        for j in range(self.N):
            # 列范围约束 - 第 j 行皇后的列值在 0 到 N-1 之间
            constraints.append(membero(self.queens[j], self.cols))
            # 列互异与对角线约束 - 与之前每一行比较
            for i in range(j):
                constraints.append(safe_pairo(self.queens[i], self.queens[j], j - i))
        return constraints

    def solve(self) -> Set[Tuple[int, ...]]:
        """求解N皇后问题
        Returns:
            set: 所有解，每个解是按行排列的列号元组
        """
        if self.N == 0:
            return {()}
        solutions = set(run(0, self.queens, lall(*self.get_constraints())))
        logger.debug("逻辑求解 N=%d 共有 %d 个解", self.N, len(solutions))
        return solutions
