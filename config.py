import argparse
from queens import parse_solver_args
from logging_utils import parse_logging_args


def parse_args(argv=None):
    """解析所有命令行参数"""
    parser = argparse.ArgumentParser(description="Enumerate every placement of N non-attacking queens on an NxN board.")

    # 调用分布在各模块的参数解析函数
    parse_solver_args(parser)
    parse_logging_args(parser)

    args = parser.parse_args(argv)

    # 健全性检查
    if args.n < 0:
        parser.error(f"--n must be non-negative, got {args.n}.")
    if args.show is not None and args.show < 0:
        parser.error(f"--show must be non-negative, got {args.show}.")

    return args
