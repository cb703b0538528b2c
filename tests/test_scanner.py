"""
Test suite for the assessment service
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from securecheck.core.scanner import (
    ASSESSMENT_FAILED_MESSAGE,
    INVALID_DOMAIN_MESSAGE,
    AssessmentError,
    AssessmentService,
    InvalidDomainError,
)


@pytest.fixture
def audit_logger():
    return MagicMock()


@pytest.fixture
def progress_manager():
    return MagicMock()


@pytest.fixture
def service(audit_logger, progress_manager):
    return AssessmentService(
        min_delay=0,
        jitter=0,
        audit_logger=audit_logger,
        progress_manager=progress_manager,
    )


class TestValidation:
    """Test cases for input validation."""

    def test_valid_input_is_stripped(self, service):
        assert service.validate("  example.com ") == "example.com"

    @pytest.mark.parametrize("value", ["", "not a domain", "localhost", "example"])
    def test_invalid_input_raises(self, service, audit_logger, value):
        with pytest.raises(InvalidDomainError) as exc_info:
            service.validate(value)

        assert str(exc_info.value) == INVALID_DOMAIN_MESSAGE
        assert exc_info.value.value == value
        assert service.rejected_inputs == 1
        audit_logger.log_validation_rejected.assert_called_once_with(value)


class TestSimulatedDelay:

    def test_disabled(self, service):
        assert service.simulated_delay() == 0.0

    def test_within_bounds(self):
        service = AssessmentService(min_delay=1.5, jitter=1.0)
        for _ in range(20):
            assert 1.5 <= service.simulated_delay() <= 2.5

    def test_negative_values_clamped(self):
        service = AssessmentService(min_delay=-1, jitter=-2)
        assert service.simulated_delay() == 0.0


class TestAssess:
    """Test cases for AssessmentService.assess."""

    @pytest.mark.asyncio
    async def test_assess_returns_report(self, service, audit_logger, progress_manager):
        report = await service.assess("https://www.example.com")

        assert report.domain == "example.com"
        assert report.risk_score == 90
        assert service.total_assessments == 1
        audit_logger.log_assessment_start.assert_called_once_with("example.com")
        audit_logger.log_assessment_end.assert_called_once()
        assert audit_logger.log_assessment_end.call_args[0][:3] == ("example.com", 90, "Low")
        assert audit_logger.log_assessment_start.call_args[0][0] == audit_logger.log_assessment_end.call_args[0][0]
        progress_manager.start_assessment.assert_called_once()
        progress_manager.stop_assessment.assert_called_once()

    @pytest.mark.asyncio
    async def test_invalid_domain_skips_engine(self, service, progress_manager):
        with patch("securecheck.core.scanner.perform_security_assessment") as mock_engine:
            with pytest.raises(InvalidDomainError):
                await service.assess("not a domain")

        mock_engine.assert_not_called()
        progress_manager.start_assessment.assert_not_called()
        assert service.total_assessments == 0

    @pytest.mark.asyncio
    async def test_engine_failure_wrapped(self, service, audit_logger, progress_manager):
        boom = RuntimeError("boom")
        with patch("securecheck.core.scanner.perform_security_assessment", side_effect=boom):
            with pytest.raises(AssessmentError) as exc_info:
                await service.assess("example.com")

        assert str(exc_info.value) == ASSESSMENT_FAILED_MESSAGE
        assert exc_info.value.__cause__ is boom
        progress_manager.stop_assessment.assert_called_once()
        audit_logger.log_assessment_end.assert_not_called()
        assert service.total_assessments == 0

    @pytest.mark.asyncio
    async def test_waits_simulated_delay(self):
        service = AssessmentService(min_delay=1.5, jitter=1.0)

        with patch("securecheck.core.scanner.random.random", return_value=0.5), \
                patch("securecheck.core.scanner.asyncio.sleep", new_callable=AsyncMock) as mock_sleep:
            report = await service.assess("google.com")

        mock_sleep.assert_awaited_once_with(2.0)
        assert report.risk_score == 100

    @pytest.mark.asyncio
    async def test_no_sleep_when_disabled(self, service):
        with patch("securecheck.core.scanner.asyncio.sleep", new_callable=AsyncMock) as mock_sleep:
            await service.assess("example.com")

        mock_sleep.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delay_does_not_change_content(self, service):
        delayed = AssessmentService(min_delay=0.01, jitter=0.01)

        first = await service.assess("example.org")
        second = await delayed.assess("example.org")

        assert first.same_content(second)

    @pytest.mark.asyncio
    async def test_assess_many(self, service):
        reports = await service.assess_many(["example.com", "example.org", "google.com"])

        assert [r.domain for r in reports] == ["example.com", "example.org", "google.com"]
        assert [r.overall_risk for r in reports] == ["Low", "High", "Low"]
        assert service.total_assessments == 3

    @pytest.mark.asyncio
    async def test_assess_many_stops_at_invalid(self, service):
        with pytest.raises(InvalidDomainError):
            await service.assess_many(["example.com", "bad input", "google.com"])

        assert service.total_assessments == 1
