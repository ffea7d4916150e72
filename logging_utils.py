import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
DATE_FORMAT = "%m/%d/%Y %H:%M:%S"


def parse_logging_args(parser):
    """解析与日志相关的参数"""
    parser.add_argument(
        "--log_level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for the console and the log file."
    )
    parser.add_argument(
        "--log_file",
        type=str,
        default=None,
        help="If set, also append log records to this file."
    )


def setup_logging(args):
    """
    配置日志记录，包括终端输出和文件日志。

    参数:
        args: 命令行参数，包含日志级别和日志文件路径
    """
    level = getattr(logging, args.log_level)
    logging.basicConfig(
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        level=level,
    )
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if args.log_file:
        log_file_handler = logging.FileHandler(args.log_file, mode="a", encoding="utf-8")
        log_file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(log_file_handler)
        return log_file_handler
    return None
