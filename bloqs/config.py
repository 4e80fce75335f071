import os
import logging
from dataclasses import dataclass
from typing import Optional

_LEVELS = ('CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG', 'NOTSET')


@dataclass
class LoggingConfig:
    """logging configuration for the bloqs logger"""
    level: str = 'WARNING'
    format: str = '%(asctime)s - %(name)s - %(message)s'

    def __post_init__(self):
        self.level = self.level.upper()
        if self.level not in _LEVELS:
            raise ValueError(f"unknown log level: '{self.level}'")

    @classmethod
    def from_env(cls) -> 'LoggingConfig':
        """read BLOQS_LOG_LEVEL and BLOQS_LOG_FORMAT, falling back to defaults"""
        return cls(
            level=os.environ.get('BLOQS_LOG_LEVEL', cls.level),
            format=os.environ.get('BLOQS_LOG_FORMAT', cls.format),
        )


class _BloqsHandler(logging.StreamHandler):
    """marker type so repeated configuration replaces rather than stacks"""
    pass


def configure_logging(config: Optional[LoggingConfig] = None) -> logging.Logger:
    """apply config to the bloqs logger and return it"""
    config = config or LoggingConfig.from_env()
    logger = logging.getLogger('bloqs')
    logger.setLevel(config.level)

    for handler in [h for h in logger.handlers if isinstance(h, _BloqsHandler)]:
        logger.removeHandler(handler)

    handler = _BloqsHandler()
    handler.setFormatter(logging.Formatter(config.format))
    logger.addHandler(handler)
    return logger
