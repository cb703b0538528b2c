"""
Logger Utility for SecureCheck
Provides consistent logging configuration and the assessment audit trail
"""

import logging
import time
from datetime import datetime
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"


def setup_logger(verbosity: int = 1,
                 log_file: Optional[str] = None,
                 logger_name: str = "securecheck",
                 log_dir: str = "logs",
                 console: Optional[Console] = None) -> logging.Logger:
    """Set up logger with console and file output."""

    logger = logging.getLogger(logger_name)
    logger.setLevel(logging.DEBUG if verbosity >= 2 else logging.INFO)

    # Clear existing handlers
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    # Console handler with rich formatting
    console_handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=True,
        show_path=(verbosity >= 2),
        rich_tracebacks=True,
        markup=False
    )

    if verbosity <= 0:
        console_level = logging.WARNING
    elif verbosity >= 2:
        console_level = logging.DEBUG
    else:
        console_level = logging.INFO
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))

    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
    else:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_path = Path(log_dir) / f"securecheck_{timestamp}.log"
    log_path.parent.mkdir(parents=True, exist_ok=True)

    # Detailed format for file
    file_handler = logging.FileHandler(log_path, encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))

    logger.addHandler(file_handler)

    if not log_file:
        logger.debug(f"Detailed logs saved to: {log_path}")

    return logger


class AuditLogger:
    """Audit trail of assessment requests, rejections and exports."""

    def __init__(self, audit_log_file: str = "logs/assessment_audit.log"):
        self.audit_log_file = Path(audit_log_file)
        self.audit_log_file.parent.mkdir(parents=True, exist_ok=True)

        self.logger = logging.getLogger("securecheck.audit")
        self.logger.setLevel(logging.INFO)
        self.logger.propagate = False

        # Clear existing handlers
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)

        handler = logging.FileHandler(self.audit_log_file, encoding='utf-8')
        handler.setLevel(logging.INFO)
        handler.setFormatter(logging.Formatter(
            "%(asctime)s - AUDIT - %(levelname)s - %(message)s"
        ))

        self.logger.addHandler(handler)

    def log_assessment_start(self, domain: str):
        self.logger.info(f"ASSESSMENT_START - Domain: {domain}")

    def log_assessment_end(self, domain: str, risk_score: int, overall_risk: str, duration: float):
        self.logger.info(
            f"ASSESSMENT_END - Domain: {domain} - Score: {risk_score} - "
            f"Risk: {overall_risk} - Duration: {duration:.2f}s"
        )

    def log_validation_rejected(self, raw_input: str):
        self.logger.warning(f"VALIDATION_REJECTED - Input: {raw_input[:100]!r}")

    def log_export(self, domain: str, fmt: str, path: str):
        self.logger.info(f"EXPORT - Domain: {domain} - Format: {fmt} - Path: {path}")

    def log_export_failed(self, domain: str, error_message: str):
        self.logger.error(f"EXPORT_FAILED - Domain: {domain} - Message: {error_message}")

    def close(self):
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)


def cleanup_old_logs(log_dir: str = "logs", days: int = 30) -> int:
    """Delete log files older than ``days``; returns how many were removed."""
    logs_dir = Path(log_dir)
    if not logs_dir.exists():
        return 0

    cutoff_time = time.time() - (days * 24 * 60 * 60)
    removed = 0

    for log_file in logs_dir.glob("*.log"):
        if log_file.stat().st_mtime < cutoff_time:
            try:
                log_file.unlink()
                removed += 1
            except OSError as e:
                logging.getLogger(__name__).warning(f"Error deleting {log_file}: {e}")

    return removed
