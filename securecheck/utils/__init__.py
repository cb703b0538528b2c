"""
SecureCheck Utility Modules
Logging, console presentation and batch reporting utilities
"""

from .logger import AuditLogger, setup_logger
from .progress_manager import ProgressManager
from .report import ReportGenerator

__all__ = [
    "AuditLogger",
    "setup_logger",
    "ProgressManager",
    "ReportGenerator"
]
