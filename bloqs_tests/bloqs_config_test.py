import os
import logging
import suite
from bloqs import S, LoggingConfig, configure_logging

test = suite.test
assert_that = suite.assert_that


class _Capture(logging.Handler):
    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.messages = []

    def emit(self, record):
        self.messages.append(record.getMessage())


def _with_clean_logger(func):
    logger = logging.getLogger('bloqs')
    saved_level, saved_handlers = logger.level, list(logger.handlers)
    try:
        return func(logger)
    finally:
        logger.setLevel(saved_level)
        logger.handlers[:] = saved_handlers


@test("logging config normalizes and validates the level")
def test_config_level():
    assert_that(LoggingConfig(level='debug').level == 'DEBUG', "level is upper-cased")
    assert_that(LoggingConfig().level == 'WARNING', "default level")
    suite.assert_raises(ValueError, LoggingConfig, level='chatty')


@test("logging config reads the environment")
def test_config_from_env():
    saved = os.environ.get('BLOQS_LOG_LEVEL')
    os.environ['BLOQS_LOG_LEVEL'] = 'info'
    try:
        config = LoggingConfig.from_env()
    finally:
        if saved is None:
            del os.environ['BLOQS_LOG_LEVEL']
        else:
            os.environ['BLOQS_LOG_LEVEL'] = saved
    assert_that(config.level == 'INFO', f"got {config.level}")
    assert_that(config.format == LoggingConfig.format, "format falls back to default")


@test("configure_logging installs a single handler")
def test_configure_idempotent():
    def check(logger):
        before = len(logger.handlers)
        configure_logging(LoggingConfig(level='INFO'))
        returned = configure_logging(LoggingConfig(level='DEBUG'))
        assert_that(returned is logger, "returns the bloqs logger")
        assert_that(len(logger.handlers) == before + 1, "repeat calls do not stack handlers")
        assert_that(logger.level == logging.DEBUG, "last config wins")

    _with_clean_logger(check)


@test("operations log at debug level")
def test_operations_log():
    def check(logger):
        capture = _Capture()
        logger.addHandler(capture)
        logger.setLevel(logging.DEBUG)
        S([1, 2, 3, 4]).select(lambda x: x > 2)
        suite.assert_raises(ZeroDivisionError, S([1, 0]).map, lambda x: 1 / x)
        assert_that("select kept 2 of 4 elements" in capture.messages, f"got {capture.messages}")
        assert_that("map failed at index 1" in capture.messages, f"got {capture.messages}")

    _with_clean_logger(check)


if __name__ == "__main__":
    suite.run(title="bloqs configuration test suite")
