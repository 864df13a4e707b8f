import logging
import sys

LOGGER_NAME = "blogapi"

logger = logging.getLogger(LOGGER_NAME)


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    初始化项目日志：
    - 只给 blogapi 这个 logger 挂 handler，不动 root logger
    - 重复调用只会调整级别，不会重复挂 handler
    """
    logger.setLevel(level.upper())
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d - %(message)s")
        )
        logger.addHandler(handler)
    logger.propagate = False
    return logger
