"""
Logging System for Expression CSE

Centralized logger with verbosity levels. The library is quiet by default;
callers raise the level to see per-call optimizer diagnostics.
"""

import logging
import sys
from typing import Optional, Dict, Any
from enum import Enum
from datetime import datetime


class LogLevel(Enum):
    """Enumeration of logging levels"""
    SILENT = 0      # No output
    MINIMAL = 1     # Warnings only
    MODERATE = 2    # Summaries
    DETAILED = 3    # Per-optimization results
    VERBOSE = 4     # Debug details including cache statistics


class CSELogger:
    """
    Centralized logger for expression optimization
    """

    def __init__(self, log_level: LogLevel = LogLevel.MINIMAL,
                 log_to_file: bool = False, log_file_path: Optional[str] = None):
        self.log_level = log_level
        self.log_to_file = log_to_file
        self.log_file_path: Optional[str] = None

        self.logger = logging.getLogger('expression_cse')
        self.logger.setLevel(logging.DEBUG)
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()
        self.logger.propagate = False

        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

        if self.log_level != LogLevel.SILENT:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        if log_to_file:
            if log_file_path is None:
                log_file_path = f"expression_cse_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
            self.log_file_path = log_file_path
            file_handler = logging.FileHandler(log_file_path)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def _should_log(self, required_level: LogLevel) -> bool:
        """Check if message should be logged based on current log level"""
        return self.log_level.value >= required_level.value

    def info(self, message: str, required_level: LogLevel = LogLevel.MODERATE):
        """General information with configurable level"""
        if self._should_log(required_level):
            self.logger.info(message)

    def warning(self, message: str):
        """Warnings - shown from minimal level onwards"""
        if self._should_log(LogLevel.MINIMAL):
            self.logger.warning(message)

    def debug(self, message: str):
        """Debug information - only in verbose mode"""
        if self._should_log(LogLevel.VERBOSE):
            self.logger.debug(f"DEBUG: {message}")

    def result_summary(self, results: Dict[str, Any],
                       required_level: LogLevel = LogLevel.DETAILED):
        """Log a block of key/value results"""
        if not self._should_log(required_level):
            return

        self.logger.info("=" * 60)
        for key, value in results.items():
            if isinstance(value, float):
                self.logger.info(f"{key:.<30} {value:.6f}")
            else:
                self.logger.info(f"{key:.<30} {value}")


# Global logger instance
_global_logger: Optional[CSELogger] = None


def get_logger() -> CSELogger:
    """Get or create the global logger instance"""
    global _global_logger
    if _global_logger is None:
        _global_logger = CSELogger()
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global logging level"""
    global _global_logger
    if _global_logger is None or _global_logger.log_level == LogLevel.SILENT:
        # a silent logger was built without a console handler
        previous = _global_logger
        _global_logger = CSELogger(
            log_level=level,
            log_to_file=previous.log_to_file if previous else False,
            log_file_path=previous.log_file_path if previous else None
        )
    else:
        _global_logger.log_level = level


def configure_logging(log_level: LogLevel = LogLevel.MINIMAL,
                      log_to_file: bool = False,
                      log_file_path: Optional[str] = None) -> CSELogger:
    """Configure the global logging system"""
    global _global_logger
    _global_logger = CSELogger(
        log_level=log_level,
        log_to_file=log_to_file,
        log_file_path=log_file_path
    )
    return _global_logger


def log_info(message: str, level: LogLevel = LogLevel.MODERATE):
    """Log info message at specified level"""
    get_logger().info(message, level)


def log_debug(message: str):
    """Log debug message"""
    get_logger().debug(message)
