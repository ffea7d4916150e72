import logging
import os
import time
from config import parse_args
from logging_utils import setup_logging
from queens import solve, iter_solutions, render, format_solutions, plot_solution
from queens_logic import NQueensLogic

logger = logging.getLogger(__name__)


def find_solutions(n, method):
    """按指定方法求解，返回解的集合和耗时（秒）"""
    start_time = time.perf_counter()  # 使用更高精度的计时器
    if method == "logic":
        solutions = NQueensLogic(n).solve()
    elif method == "lazy":
        solutions = set(iter_solutions(n))
    else:
        solutions = solve(n)
    total_time = time.perf_counter() - start_time
    return solutions, total_time


def main(argv=None):
    """
    主函数：解析参数，求解 N 皇后问题并打印棋盘。
    """
    args = parse_args(argv)
    log_file_handler = setup_logging(args)
    try:
        report(args)
    finally:
        if log_file_handler is not None:
            logging.getLogger().removeHandler(log_file_handler)
            log_file_handler.close()
    return 0


def report(args):
    """求解并打印结果，解集的文本形式写入 INFO 日志"""
    solutions, total_time = find_solutions(args.n, args.method)
    logger.info("N=%d, method=%s, %d solutions in %.4f s", args.n, args.method, len(solutions), total_time)
    logger.info("solutions: %s", format_solutions(solutions))

    # 打印结果
    print(f"找到 {len(solutions)} 个解决方案")

    # 遍历并展示每个解决方案
    ordered = sorted(solutions)
    if args.show is not None:
        ordered = ordered[:args.show]
    for idx, solution in enumerate(ordered, 1):
        print(f"\n解决方案 {idx}: {solution}")
        print(render(solution))
        print("\n" + "=" * 20)
        if args.plot_direction is not None:
            plot_solution(solution, os.path.join(args.plot_direction, f"queens_{args.n}_{idx}.png"))


# 程序入口
if __name__ == "__main__":
    main()
