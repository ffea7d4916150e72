import logging
import os
from typing import Iterable, Iterator, List, Sequence, Set, Tuple, Union

import numpy as np
import matplotlib.pyplot as plt

from cons_list import ConsList, Nil

logger = logging.getLogger(__name__)

Solution = Tuple[int, ...]

QUEEN = '♕'
EMPTY = '□'


def check_board_size(n: int) -> None:
    """棋盘大小必须是非负整数，负数直接报错"""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"棋盘大小必须是整数，而不是 {type(n).__name__}")
    if n < 0:
        raise ValueError(f"棋盘大小不能为负数: {n}")


def is_safe(col: int, placement: ConsList) -> bool:
    """检查在新的一行放置皇后是否安全

    新行的行号为 len(placement)。placement 的表头是最近放置的一行，
    所以表中第 k 个元素（从 0 开始）与新行相隔 k + 1 行。
    """
    for distance, c in enumerate(placement, 1):
        # 同列或同一对角线
        if c == col or abs(col - c) == distance:
            return False
    return True


def place_queens(n: int, k: int) -> Set[ConsList]:
    """递归地在前 k 行放置皇后，返回所有部分解

    每个部分解都是一个 ConsList，表头为最后放置的那一行。
    """
    if k == 0:
        return {Nil}
    return {
        queens.prepend(col)
        for queens in place_queens(n, k - 1)
        for col in range(n)
        if is_safe(col, queens)
    }


def solve(n: int) -> Set[Solution]:
    """求出 N 皇后问题的全部解

    Returns:
        set: 每个解是一个元组，第 i 个元素为第 i 行皇后所在的列
    """
    check_board_size(n)
    solutions = {tuple(queens.reverse()) for queens in place_queens(n, n)}
    logger.debug("N=%d 共有 %d 个解", n, len(solutions))
    return solutions


def iter_solutions(n: int) -> Iterator[Solution]:
    """惰性地逐个生成解，用显式栈代替递归，不受递归深度限制

    参数在调用时立即检查，而不是等到第一次 next()。
    """
    check_board_size(n)
    return _iter_solutions(n)


def _iter_solutions(n: int) -> Iterator[Solution]:
    stack: List[Tuple[int, ConsList]] = [(0, Nil)]
    while stack:
        row, queens = stack.pop()
        if row == n:
            yield tuple(queens.reverse())
            continue
        # 倒序压栈，使解按字典序输出
        for col in reversed(range(n)):
            if is_safe(col, queens):
                stack.append((row + 1, queens.prepend(col)))


def count_solutions(n: int) -> int:
    return sum(1 for _ in iter_solutions(n))


def render(placement: Union[ConsList, Sequence[int]], queen: str = QUEEN, empty: str = EMPTY) -> str:
    """将一个解可视化为棋盘字符串，第 0 行在最上面

    ConsList 的表头是最后一行，需要先反转；普通序列已经按行排列。
    """
    if isinstance(placement, ConsList):
        rows = list(placement.reverse())
    else:
        rows = list(placement)
    n = len(rows)
    board = []
    for col in rows:
        row = [empty] * n
        row[col] = queen
        board.append(' '.join(row))
    return '\n'.join(board)


def format_solutions(solutions: Iterable[Solution]) -> str:
    """把解集按固定顺序序列化为一行文本，便于写入日志"""
    return '{' + ', '.join(str(s) for s in sorted(solutions)) + '}'


def plot_solution(solution: Sequence[int], path: str) -> str:
    """用 matplotlib 画出棋盘并保存为图片，返回图片路径"""
    n = len(solution)
    board = np.indices((n, n)).sum(axis=0) % 2

    fig, ax = plt.subplots(figsize=(max(n, 1) * 0.6 + 1, max(n, 1) * 0.6 + 1))
    ax.imshow(board, cmap=plt.colormaps['Greys'], vmin=0, vmax=3, interpolation='nearest')
    ax.plot(list(solution), list(range(n)), 'r*', markersize=20)
    ax.set_xticks(np.arange(n))
    ax.set_yticks(np.arange(n))
    ax.set_title(f"{n}-Queens: {tuple(solution)}", fontsize=10)

    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    fig.savefig(path, bbox_inches='tight')
    plt.close(fig)
    logger.debug("棋盘图片已保存到 %s", path)
    return path


class NQueensSolver:
    def __init__(self, n: int = 8):
        """初始化N皇后问题求解器
        Args:
            n (int): 棋盘大小和皇后数量，默认为8
        """
        check_board_size(n)
        self.N = n

    def is_safe(self, col: int, placement: ConsList) -> bool:
        return is_safe(col, placement)

    def solve(self) -> Set[Solution]:
        return solve(self.N)

    def iter_solutions(self) -> Iterator[Solution]:
        return iter_solutions(self.N)

    def visualize_solution(self, solution: Sequence[int]) -> str:
        if len(solution) != self.N:
            raise ValueError(f"解的长度应为 {self.N}，实际为 {len(solution)}")
        return render(solution)


def parse_solver_args(parser):
    """解析与求解器相关的参数"""
    parser.add_argument(
        "--n",
        type=int,
        default=8,
        help="Board size and number of queens."
    )
    parser.add_argument(
        "--method",
        type=str,
        default="backtracking",
        choices=["backtracking", "lazy", "logic"],
        help='Search strategy: recursive "backtracking", stack-based "lazy", or miniKanren "logic".'
    )
    parser.add_argument(
        "--show",
        type=int,
        default=None,
        help="How many boards to print. Prints every solution if not provided."
    )
    parser.add_argument(
        "--plot_direction",
        type=str,
        default=None,
        help="If set, save a PNG image of every printed board into this directory."
    )
