"""Console logging setup for pipeline runs. (管线运行时的控制台日志配置)"""
import logging
import sys


class _ColoredFormatter(logging.Formatter):
    _COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
    }
    _RESET = '\033[0m'

    def format(self, record: logging.LogRecord) -> str:
        color = self._COLORS.get(record.levelname, '')
        if not color:
            return super().format(record)
        # Colour a copy so other handlers see the plain level name / 仅对副本着色
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{self._RESET}"
        return super().format(record)


def setup_logging(level: int | str = logging.INFO) -> None:
    """Route all loggers to stdout with function names and line numbers. (将日志输出到 stdout，包含函数名与行号)"""
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    log_format = '%(asctime)s [%(levelname)s] %(name)s %(funcName)s():%(lineno)d - %(message)s'
    date_format = '%Y-%m-%d %H:%M:%S'

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    formatter = (
        _ColoredFormatter(log_format, datefmt=date_format)
        if sys.stdout.isatty()
        else logging.Formatter(log_format, datefmt=date_format)
    )
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    # matplotlib is chatty at DEBUG / matplotlib 在 DEBUG 级别输出过多
    logging.getLogger('matplotlib').setLevel(logging.WARNING)
