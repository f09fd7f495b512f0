import logging

from leagueboard.config import config


def create_logger(level: int) -> logging.Logger:
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    formatter = logging.Formatter(log_format)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(formatter)

    _logger = logging.getLogger("leagueboard")
    _logger.setLevel(level)
    if not _logger.handlers:
        _logger.addHandler(handler)
    _logger.propagate = False
    return _logger


logger = create_logger(logging.getLevelName(config.log_level.upper()))
