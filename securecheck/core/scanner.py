"""
SecureCheck Assessment Service
Validates user input, simulates scan latency and runs the assessment engine
"""

import asyncio
import logging
import random
import time
from typing import Iterable, List, Optional

from .domain import clean_domain, is_valid_domain
from .engine import perform_security_assessment
from .model import SecurityReport


INVALID_DOMAIN_MESSAGE = "Please enter a valid domain (e.g., example.com)"
ASSESSMENT_FAILED_MESSAGE = "An error occurred during the security check. Please try again."


class InvalidDomainError(ValueError):
    """Raised when input does not look like a domain; no report is generated."""

    def __init__(self, value: str):
        super().__init__(INVALID_DOMAIN_MESSAGE)
        self.value = value


class AssessmentError(RuntimeError):
    """Raised when the engine fails unexpectedly."""


class AssessmentService:
    """Caller-side orchestration around the pure assessment engine."""

    def __init__(self,
                 min_delay: float = 1.5,
                 jitter: float = 1.0,
                 logger: Optional[logging.Logger] = None,
                 audit_logger=None,
                 progress_manager=None):
        self.min_delay = max(0.0, float(min_delay))
        self.jitter = max(0.0, float(jitter))
        self.logger = logger or logging.getLogger(__name__)
        self.audit_logger = audit_logger
        self.progress_manager = progress_manager

        # Statistics
        self.total_assessments = 0
        self.rejected_inputs = 0

    def validate(self, value: str) -> str:
        """Return the stripped input or raise InvalidDomainError."""
        candidate = value.strip()
        if not is_valid_domain(candidate):
            self.rejected_inputs += 1
            self.logger.warning(f"Rejected invalid domain input: {value!r}")
            if self.audit_logger:
                self.audit_logger.log_validation_rejected(value)
            raise InvalidDomainError(value)
        return candidate

    def simulated_delay(self) -> float:
        """Cosmetic scan latency in seconds; has no effect on report content."""
        if self.min_delay == 0 and self.jitter == 0:
            return 0.0
        return self.min_delay + random.random() * self.jitter

    async def assess(self, value: str) -> SecurityReport:
        """Validate, wait out the simulated scan, then run the engine."""
        candidate = self.validate(value)

        if self.audit_logger:
            self.audit_logger.log_assessment_start(clean_domain(candidate))

        start = time.monotonic()
        delay = self.simulated_delay()

        if self.progress_manager:
            self.progress_manager.start_assessment(candidate)
        try:
            if delay > 0:
                await asyncio.sleep(delay)

            try:
                report = perform_security_assessment(candidate)
            except Exception as e:
                self.logger.error(f"Assessment failed for {candidate}: {e}")
                raise AssessmentError(ASSESSMENT_FAILED_MESSAGE) from e
        finally:
            if self.progress_manager:
                self.progress_manager.stop_assessment()

        duration = time.monotonic() - start
        self.total_assessments += 1

        self.logger.info(
            f"Security analysis for {report.domain} is ready "
            f"(score {report.risk_score}/100, {report.overall_risk} risk)"
        )
        if self.audit_logger:
            self.audit_logger.log_assessment_end(
                report.domain, report.risk_score, report.overall_risk, duration
            )

        return report

    async def assess_many(self, values: Iterable[str]) -> List[SecurityReport]:
        """Assess domains one after another; the first invalid input aborts the batch."""
        reports = []
        for value in values:
            reports.append(await self.assess(value))
        return reports
