"""Unit tests for logging utilities."""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog
from commandlines.core.common.logging_utils import (
    EnvironmentTaggingFilter,
    EnvironmentTaggingFormatter,
    LogContext,
    configure_logging,
    get_logger,
)


@pytest.fixture
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
    structlog.reset_defaults()


def _record(message: str = "hello") -> logging.LogRecord:
    return logging.LogRecord(
        name="commandlines.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )


def test_filter_tags_records_as_test() -> None:
    record = _record()
    assert EnvironmentTaggingFilter().filter(record) is True
    assert record.env_tag == "test"


def test_formatter_includes_tag_without_filter() -> None:
    output = EnvironmentTaggingFormatter(fmt="[%(env_tag)s] %(message)s").format(
        _record()
    )
    assert output == "[test] hello"


def test_configure_logging_writes_log_file(
    tmp_path: Path, restore_logging: None
) -> None:
    log_file = tmp_path / "commandlines.log"
    configure_logging(level="debug", log_file=str(log_file))

    logging.getLogger("commandlines.sample").debug("stdlib record")
    get_logger("commandlines.sample").info("structured record", argc=3)
    for handler in logging.getLogger().handlers:
        handler.flush()

    content = log_file.read_text()
    assert "[test]" in content
    assert "stdlib record" in content
    assert "structured record" in content
    assert "argc=3" in content


def test_configure_logging_sets_level(restore_logging: None) -> None:
    configure_logging(level=logging.ERROR)
    assert logging.getLogger().level == logging.ERROR


def test_configure_logging_unknown_level_falls_back_to_info(
    restore_logging: None,
) -> None:
    configure_logging(level="chatty")
    assert logging.getLogger().level == logging.INFO


def test_log_context_binds_values() -> None:
    logger = get_logger("commandlines.sample")
    context = LogContext(logger, executable="prog")
    with context as bound:
        assert bound is not None
        assert context.bound_logger is bound
    assert context.bound_logger is None
