"""
Preset layer logging.

    from fxchain.utils.logger import logger

    logger.info("Chain preset saved", component="PRESET", details=str(path))
    logger.preset("Chain element has no content, using empty preset")

Everything goes through the stdlib "fxchain" logger. The terminal sees INFO
and up; listeners connected to logger.signals.record_logged see every
record, including the debug notes the parsers leave when they fall back
to a default.
"""

import logging
import sys
from enum import IntEnum
from typing import Optional
from PyQt5.QtCore import QObject, pyqtSignal


class LogLevel(IntEnum):
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class LogSignals(QObject):
    record_logged = pyqtSignal(str, int)  # tagged message, level


class SignalHandler(logging.Handler):
    """Re-emits each record on a Qt signal; safe to call from worker threads."""

    def __init__(self, signals: LogSignals):
        super().__init__(logging.DEBUG)
        self.signals = signals

    def emit(self, record: logging.LogRecord):
        try:
            self.signals.record_logged.emit(record.getMessage(), record.levelno)
        except Exception:
            self.handleError(record)


def tag_message(msg: str, component: Optional[str] = None,
                details: Optional[str] = None) -> str:
    """'[COMPONENT] msg - details', leaving out whatever is missing."""
    if component:
        msg = f"[{component}] {msg}"
    if details:
        msg = f"{msg} - {details}"
    return msg


class FxChainLogger:
    def __init__(self, name: str = "fxchain"):
        self._logger = logging.getLogger(name)
        self._logger.setLevel(logging.DEBUG)
        self._logger.propagate = False

        self.signals = LogSignals()
        self._logger.addHandler(SignalHandler(self.signals))

        self._console = logging.StreamHandler(sys.stdout)
        self._console.setLevel(LogLevel.INFO)
        self._console.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(message)s", datefmt="%H:%M:%S"))
        self._logger.addHandler(self._console)

        self._file: Optional[logging.FileHandler] = None

    @property
    def level(self) -> LogLevel:
        """Current console threshold."""
        return LogLevel(self._console.level)

    def set_level(self, level: LogLevel):
        self._console.setLevel(level)

    def enable_file_logging(self, filepath: str):
        """Mirror every record, debug included, into filepath (replaces any previous file)."""
        self.disable_file_logging()
        self._file = logging.FileHandler(filepath, encoding="utf-8")
        self._file.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))
        self._logger.addHandler(self._file)

    def disable_file_logging(self):
        if self._file is None:
            return
        self._logger.removeHandler(self._file)
        self._file.close()
        self._file = None

    def log(self, level: LogLevel, msg: str, component: Optional[str] = None,
            details: Optional[str] = None):
        self._logger.log(level, tag_message(msg, component, details))

    def debug(self, msg, component=None, details=None):
        self.log(LogLevel.DEBUG, msg, component, details)

    def info(self, msg, component=None, details=None):
        self.log(LogLevel.INFO, msg, component, details)

    def warning(self, msg, component=None, details=None):
        self.log(LogLevel.WARNING, msg, component, details)

    def error(self, msg, component=None, details=None):
        self.log(LogLevel.ERROR, msg, component, details)

    # Parser fallbacks are routine, so they stay below the console threshold.
    def preset(self, msg: str, details: Optional[str] = None):
        self.debug(msg, "PRESET", details)

    def xml(self, msg: str, details: Optional[str] = None):
        self.debug(msg, "XML", details)


logger = FxChainLogger()


def set_log_level(level: LogLevel):
    """Set the console threshold of the shared logger."""
    logger.set_level(level)
