import logging

from microfetch.logger import TRACE_LEVEL, BoundLogger, create_logger


class RecordingLogger:
    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    def debug(self, msg: str, *args: object) -> None:
        self.calls.append(("debug", msg % args))

    def info(self, msg: str, *args: object) -> None:
        self.calls.append(("info", msg % args))

    def warning(self, msg: str, *args: object) -> None:
        self.calls.append(("warning", msg % args))

    def error(self, msg: str, *args: object) -> None:
        raise RuntimeError("broken sink")


def test_records_below_level_are_dropped() -> None:
    sink = RecordingLogger()
    logger = create_logger(logger=sink, level="info")
    logger.debug("hidden")
    logger.info("shown %d", 1)
    logger.warn("careful")
    assert sink.calls == [("info", "shown 1"), ("warning", "careful")]


def test_sink_failures_do_not_escape() -> None:
    logger = BoundLogger(RecordingLogger(), level="trace")
    logger.error("boom")
    logger.trace("no trace method")


def test_child_uses_named_stdlib_logger(caplog) -> None:
    base = logging.getLogger("microfetch-tests")
    logger = BoundLogger(base, level="trace").child("http")
    with caplog.at_level(TRACE_LEVEL, logger="microfetch-tests"):
        logger.trace("chunk bytes=%d", 3)
    assert caplog.records[0].name == "microfetch-tests.http"
    assert caplog.records[0].levelname == "TRACE"
    assert caplog.records[0].getMessage() == "chunk bytes=3"


def test_create_logger_reuses_bound_logger() -> None:
    bound = BoundLogger(RecordingLogger())
    assert create_logger(logger=bound, level="error") is bound


def test_trace_reaches_duck_typed_trace_method() -> None:
    class TraceSink(RecordingLogger):
        def trace(self, msg: str, *args: object) -> None:
            self.calls.append(("trace", msg % args))

    sink = TraceSink()
    create_logger(logger=sink, level="trace").trace("chunk bytes=%d", 7)
    assert sink.calls == [("trace", "chunk bytes=7")]
