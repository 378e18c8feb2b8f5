"""
Tests for the loguru setup.
"""

import io

import pytest
from loguru import logger

from skillpack.logger import get_logger, setup_logging


@pytest.fixture(autouse=True)
def reset_sinks():
    yield
    logger.remove()


class TestLogging:
    def test_module_name_drops_package_prefix(self):
        stream = io.StringIO()
        setup_logging(level="DEBUG", console=stream)
        get_logger("skillpack.skills.loader").debug("parsed")
        assert "skills.loader" in stream.getvalue()
        assert "skillpack.skills.loader" not in stream.getvalue()

    def test_foreign_names_kept(self):
        stream = io.StringIO()
        setup_logging(level="DEBUG", console=stream)
        get_logger("conftest").info("hello")
        assert "conftest" in stream.getvalue()

    def test_console_level_filters(self):
        stream = io.StringIO()
        setup_logging(level="warning", console=stream)
        log = get_logger("skillpack.skills.metadata")
        log.info("quiet")
        log.warning("missing description")
        output = stream.getvalue()
        assert "quiet" not in output
        assert "missing description" in output

    def test_file_sink_records_debug(self, tmp_path):
        log_file = tmp_path / "logs" / "skillpack.log"
        setup_logging(level="ERROR", log_file=str(log_file), console=io.StringIO())
        get_logger("skillpack.skills.resources").debug("scanning scripts")
        logger.remove()
        text = log_file.read_text()
        assert "skills.resources" in text
        assert "scanning scripts" in text
