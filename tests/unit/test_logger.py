import logging
from collections.abc import Iterator

import pytest

from ringkas.logging.logger import Log


@pytest.fixture()
def ringkas_logger() -> Iterator[logging.Logger]:
    """Let records reach caplog and restore the logger afterwards."""
    logger = Log._logger
    saved = (logger.level, logger.propagate, list(logger.handlers))
    logger.propagate = True
    yield logger
    logger.setLevel(saved[0])
    logger.propagate = saved[1]
    logger.handlers[:] = saved[2]


class TestLog:
    def test_context_is_appended(
        self,
        ringkas_logger: logging.Logger,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.INFO, logger="ringkas"):
            Log.info("Processing request", format="summary", has_url=False)
        assert caplog.messages[-1] == "Processing request [format=summary has_url=False]"

    def test_plain_message_without_context(
        self,
        ringkas_logger: logging.Logger,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="ringkas"):
            Log.warning("Key points use a foreign bullet")
        assert caplog.messages[-1] == "Key points use a foreign bullet"

    def test_configure_sets_level_and_single_handler(self, ringkas_logger: logging.Logger) -> None:
        ringkas_logger.handlers.clear()
        Log.configure("debug")
        Log.configure("warning")
        assert ringkas_logger.level == logging.WARNING
        assert len(ringkas_logger.handlers) == 1
        assert ringkas_logger.propagate is False

    def test_exception_attaches_given_exception(
        self,
        ringkas_logger: logging.Logger,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        error = RuntimeError("upstream down")
        with caplog.at_level(logging.ERROR, logger="ringkas"):
            Log.exception("Model call failed", exc_info=error, status=502)
        record = caplog.records[-1]
        assert record.getMessage() == "Model call failed [status=502]"
        assert record.levelno == logging.ERROR
        assert record.exc_info is not None
        assert record.exc_info[1] is error

    def test_exception_uses_the_exception_being_handled(
        self,
        ringkas_logger: logging.Logger,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.ERROR, logger="ringkas"):
            try:
                raise ValueError("bad json")
            except ValueError:
                Log.exception("Parse failed")
        record = caplog.records[-1]
        assert record.exc_info is not None
        assert isinstance(record.exc_info[1], ValueError)
