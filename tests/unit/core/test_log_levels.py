"""Test log level filtering on the file sink."""

import pytest

from wpddev.core.log import (
    ConsoleSink,
    FileSink,
    LEVELS,
    LogfireSink,
    level_name,
    setup_logger,
)


@pytest.fixture(autouse=True)
def restore_test_logger(tmp_path):
    """Put the session's console logger back after each test."""
    yield
    setup_logger(
        log_root=tmp_path,
        run_name="test",
        console=ConsoleSink(level="debug"),
        file=FileSink(enabled=False),
        logfire=LogfireSink(enabled=False),
    )


def file_logger(tmp_path, level):
    log_file = tmp_path / f"{level}.log"
    logger = setup_logger(
        log_root=tmp_path,
        run_name="test",
        console=ConsoleSink(enabled=False),
        file=FileSink(enabled=True, level=level, path=str(log_file)),
        logfire=LogfireSink(enabled=False),
    )
    return logger, log_file


def test_trace_level_includes_all(tmp_path):
    logger, log_file = file_logger(tmp_path, "trace")

    logger.trace("TRACE message - should be included")
    logger.debug("DEBUG message - should be included")
    logger.info("INFO message - should be included")
    logger.close()

    content = log_file.read_text()
    assert "TRACE message" in content
    assert "DEBUG message" in content
    assert "INFO message" in content


def test_info_level_filters_debug_and_trace(tmp_path):
    logger, log_file = file_logger(tmp_path, "info")

    logger.trace("TRACE message - should be filtered")
    logger.debug("DEBUG message - should be filtered")
    logger.info("INFO message - should be included")
    logger.warn("WARN message - should be included")
    logger.error("ERROR message - should be included")
    logger.close()

    content = log_file.read_text()
    assert "TRACE message" not in content
    assert "DEBUG message" not in content
    assert "INFO message" in content
    assert "WARN message" in content
    assert "ERROR message" in content


def test_error_level_only_errors(tmp_path):
    logger, log_file = file_logger(tmp_path, "error")

    logger.info("INFO message - should be filtered")
    logger.warn("WARN message - should be filtered")
    logger.error("ERROR message - should be included")
    logger.close()

    content = log_file.read_text()
    assert "INFO message" not in content
    assert "WARN message" not in content
    assert "ERROR message" in content


def test_file_lines_use_template(tmp_path):
    logger, log_file = file_logger(tmp_path, "info")

    logger.info("Setup complete", launched=True)
    logger.close()

    line = log_file.read_text().strip().splitlines()[-1]
    assert "[info] Setup complete" in line
    assert "launched=True" in line


def test_logger_level_cascades_to_unset_sinks(tmp_path):
    log_file = tmp_path / "cascade.log"
    logger = setup_logger(
        log_root=tmp_path,
        run_name="test",
        level="error",
        console=ConsoleSink(enabled=False, level=None),
        file=FileSink(enabled=True, path=str(log_file)),
        logfire=LogfireSink(enabled=False),
    )

    assert logger.file.level == "error"
    logger.close()


def test_level_name_round_trip():
    for name, number in LEVELS.items():
        assert level_name(number) == name


def test_span_and_trace_reach_file(tmp_path):
    logger, log_file = file_logger(tmp_path, "trace")

    with logger.span("Waiting for Docker", attempts=3):
        logger.trace("Docker readiness probe 1/3", ready=False)
    logger.close()

    content = log_file.read_text()
    assert "Waiting for Docker" in content
    assert "Docker readiness probe 1/3" in content
    assert "ready=False" in content


def test_proxy_span_before_setup_is_a_no_op(monkeypatch):
    from wpddev.core import log

    monkeypatch.setattr(log, "_current_logger", None)

    with log.logger.span("nothing configured"):
        log.logger.trace("dropped")
