"""
Logging System for symbolic_math

The library only emits two kinds of records: warnings (repeated
simplification that does not settle) and debug traces (rule applications,
evaluation failures), the latter only at VERBOSE level.
"""

import logging
import sys
from typing import Optional
from enum import Enum
from datetime import datetime


class LogLevel(Enum):
    """Enumeration of logging levels for symbolic_math"""
    SILENT = 0      # Nothing
    MINIMAL = 1     # Warnings
    VERBOSE = 2     # Warnings plus rule-by-rule and evaluation traces


class SymbolicMathLogger:
    """
    Level-gated wrapper around the 'symbolic_math' standard logger
    """

    def __init__(self, log_level: LogLevel = LogLevel.MINIMAL,
                 log_to_file: bool = False, log_file_path: Optional[str] = None):
        self.log_level = log_level

        self.logger = logging.getLogger('symbolic_math')
        self.logger.setLevel(logging.DEBUG)
        # Handlers from an earlier configuration may hold open files
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)
        self.logger.propagate = True

        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

        if self.log_level != LogLevel.SILENT:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        if log_to_file:
            if log_file_path is None:
                log_file_path = f"symbolic_math_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
            file_handler = logging.FileHandler(log_file_path)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def _should_log(self, required_level: LogLevel) -> bool:
        return self.log_level.value >= required_level.value

    def warning(self, message: str):
        """Shown from minimal level onwards"""
        if self._should_log(LogLevel.MINIMAL):
            self.logger.warning(message)

    def debug(self, message: str):
        """Only in verbose mode"""
        if self._should_log(LogLevel.VERBOSE):
            self.logger.debug(f"DEBUG: {message}")

    def is_verbose(self) -> bool:
        return self._should_log(LogLevel.VERBOSE)


# Global logger instance
_global_logger: Optional[SymbolicMathLogger] = None


def get_logger() -> SymbolicMathLogger:
    """Get or create the global logger instance"""
    global _global_logger
    if _global_logger is None:
        _global_logger = SymbolicMathLogger()
    return _global_logger


def set_log_level(level: LogLevel):
    """Change the level without touching the handlers"""
    global _global_logger
    if _global_logger is None:
        _global_logger = SymbolicMathLogger(log_level=level)
    else:
        _global_logger.log_level = level


def configure_logging(log_level: LogLevel = LogLevel.MINIMAL,
                      log_to_file: bool = False,
                      log_file_path: Optional[str] = None) -> SymbolicMathLogger:
    """Replace the global logger, closing the handlers of the previous one"""
    global _global_logger
    _global_logger = SymbolicMathLogger(
        log_level=log_level,
        log_to_file=log_to_file,
        log_file_path=log_file_path
    )
    return _global_logger


def log_warning(message: str):
    get_logger().warning(message)
