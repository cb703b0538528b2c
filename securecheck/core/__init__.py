"""
SecureCheck Core Components
Assessment engine, report model, export and orchestration
"""

from .domain import clean_domain, is_trusted_domain, is_valid_domain
from .engine import perform_security_assessment, simple_hash
from .model import DNSStatus, HeaderFinding, SSLStatus, SecurityReport
from .result_manager import ResultManager
from .scanner import AssessmentError, AssessmentService, InvalidDomainError

__all__ = [
    "clean_domain",
    "is_trusted_domain",
    "is_valid_domain",
    "perform_security_assessment",
    "simple_hash",
    "DNSStatus",
    "HeaderFinding",
    "SSLStatus",
    "SecurityReport",
    "ResultManager",
    "AssessmentError",
    "AssessmentService",
    "InvalidDomainError"
]
