"""
Tests for the central logger.
"""

import pytest

from fxchain.utils.logger import LogLevel, logger, set_log_level, tag_message
from fxchain.presets import EffectChainPreset
from fxchain.presets.xml_utils import parse_xml_string


@pytest.fixture
def captured():
    """Collect (message, level) pairs from the Qt signal."""
    messages = []

    def on_record(msg, level):
        messages.append((msg, level))

    logger.signals.record_logged.connect(on_record)
    yield messages
    logger.signals.record_logged.disconnect(on_record)


@pytest.fixture
def restore_level():
    level = logger.level
    yield
    set_log_level(level)


class TestTagMessage:

    def test_plain(self):
        assert tag_message("saved") == "saved"

    def test_component_and_details(self):
        assert tag_message("saved", "PRESET", "a.xml") == "[PRESET] saved - a.xml"

    def test_details_only(self):
        assert tag_message("saved", details="a.xml") == "saved - a.xml"


class TestLogger:

    def test_component_tag(self, captured):
        logger.info("saved", component="PRESET", details="a.xml")
        assert ("[PRESET] saved - a.xml", LogLevel.INFO) in captured

    def test_convenience_helpers_log_debug(self, captured):
        logger.preset("p")
        logger.xml("x")
        assert ("[PRESET] p", LogLevel.DEBUG) in captured
        assert ("[XML] x", LogLevel.DEBUG) in captured

    def test_console_starts_at_info(self):
        assert logger.level == LogLevel.INFO

    def test_set_log_level(self, restore_level):
        set_log_level(LogLevel.DEBUG)
        assert logger.level == LogLevel.DEBUG
        set_log_level(LogLevel.WARNING)
        assert logger.level == LogLevel.WARNING

    def test_console_level_does_not_filter_signal(self, restore_level, captured):
        set_log_level(LogLevel.ERROR)
        logger.warning("still seen")
        assert ("still seen", LogLevel.WARNING) in captured

    def test_file_logging(self, tmp_path):
        log_path = tmp_path / "fxchain.log"
        logger.enable_file_logging(str(log_path))
        try:
            logger.warning("to file", component="PRESET")
            logger.preset("debug to file")
        finally:
            logger.disable_file_logging()
        text = log_path.read_text(encoding="utf-8")
        assert "[PRESET] to file" in text
        assert "[PRESET] debug to file" in text

    def test_file_logging_switches_files(self, tmp_path):
        first = tmp_path / "first.log"
        second = tmp_path / "second.log"
        logger.enable_file_logging(str(first))
        try:
            logger.enable_file_logging(str(second))
            logger.info("where")
        finally:
            logger.disable_file_logging()
        assert "where" not in first.read_text(encoding="utf-8")
        assert "where" in second.read_text(encoding="utf-8")

    def test_disable_without_file(self):
        logger.disable_file_logging()
        logger.disable_file_logging()


class TestParserLogging:
    """Defaults substituted during parsing are reported, never raised."""

    def test_unknown_mix_mode_warns(self, captured):
        EffectChainPreset.from_xml(parse_xml_string("<Chain><MixMode>SIDE</MixMode></Chain>"))
        assert any(level == LogLevel.WARNING and "SIDE" in msg for msg, level in captured)

    def test_wrong_tag_logged_at_debug(self, captured):
        EffectChainPreset.from_xml(parse_xml_string("<Rack/>"))
        assert any(level == LogLevel.DEBUG and "Not a chain element" in msg
                   for msg, level in captured)
