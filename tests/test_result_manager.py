"""
Test suite for report storage and the export document
"""

import json
from datetime import date, datetime, timezone
from pathlib import Path
from unittest.mock import patch

import pytest

from securecheck.core.engine import perform_security_assessment
from securecheck.core.result_manager import (
    RISK_INTERPRETATIONS,
    ResultManager,
    export_filename,
    risk_interpretation,
)
from securecheck.core.summary import ADMINISTRATIVE_CONTROLS


class _LateEveningClock(datetime):
    """23:30 UTC, already the next morning on a clock east of UTC."""

    @classmethod
    def now(cls, tz=None):
        if tz is None:
            return datetime(2026, 10, 20, 9, 30)
        return datetime(2026, 10, 19, 23, 30, tzinfo=timezone.utc).astimezone(tz)


@pytest.fixture
def manager(tmp_path):
    return ResultManager(str(tmp_path / "reports"))


@pytest.fixture
def report():
    return perform_security_assessment("example.com")


class TestHelpers:

    def test_export_filename(self, report):
        name = export_filename(report, today=date(2026, 10, 19))
        assert name == "security-report-example-com-2026-10-19.html"

    def test_export_filename_uses_utc_date(self, report):
        with patch("securecheck.core.result_manager.datetime", _LateEveningClock):
            name = export_filename(report)
        assert name == "security-report-example-com-2026-10-19.html"

    def test_export_filename_extension(self):
        report = perform_security_assessment("docs.github.com")
        name = export_filename(report, "json", today=date(2026, 1, 2))
        assert name == "security-report-docs-github-com-2026-01-02.json"

    @pytest.mark.parametrize("score,level", [
        (100, "Low"), (70, "Low"), (69, "Medium"), (40, "Medium"), (39, "High"), (0, "High"),
    ])
    def test_interpretation_bands(self, score, level):
        assert risk_interpretation(score) == RISK_INTERPRETATIONS[level]


class TestResultManager:
    """Test cases for ResultManager."""

    def test_creates_subdirectories(self, tmp_path):
        ResultManager(str(tmp_path / "out"))
        assert (tmp_path / "out" / "json").is_dir()
        assert (tmp_path / "out" / "html").is_dir()

    @pytest.mark.asyncio
    async def test_save_and_load_round_trip(self, manager, report):
        path = await manager.save_report(report)

        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        assert data["report"]["riskScore"] == 90
        assert data["report"]["ssl"]["certificateStatus"] == "Valid"
        assert data["metadata"]["tool"].startswith("SecureCheck v")

        loaded = manager.load_report(path)
        assert loaded == report

    def test_load_bare_report(self, manager, tmp_path):
        report = perform_security_assessment("example.org")
        path = tmp_path / "bare.json"
        path.write_text(json.dumps(report.to_dict()), encoding="utf-8")

        loaded = manager.load_report(str(path))
        assert loaded.same_content(report)
        assert loaded.ssl.expiry_days is None
        assert loaded.dns.response_time == "N/A"

    @pytest.mark.parametrize("field,value", [
        ("certificateStatus", "Maybe"),
        ("overallRisk", "Severe"),
    ])
    def test_load_rejects_unknown_labels(self, manager, tmp_path, report, field, value):
        data = report.to_dict()
        if field == "certificateStatus":
            data["ssl"][field] = value
        else:
            data[field] = value
        path = tmp_path / "tampered.json"
        path.write_text(json.dumps(data), encoding="utf-8")

        with pytest.raises(ValueError, match=value):
            manager.load_report(str(path))

    def test_load_missing_file(self, manager, tmp_path):
        with pytest.raises(FileNotFoundError):
            manager.load_report(str(tmp_path / "missing.json"))

    def test_render_document_sections(self, manager, report):
        html = manager.render_document(report, today=date(2026, 10, 19))

        assert "Security Assessment Report - example.com" in html
        assert "Assessment Overview" in html
        assert "90/100" in html
        assert "Strong (Low Risk)" in html
        assert "49 days" in html
        assert "✗ Missing" in html
        assert "59ms" in html
        assert "STRONG security posture" in html
        assert "NIST Cybersecurity Framework" in html
        assert "Enable HSTS with a minimum max-age of 31536000 seconds" in html
        for control in ADMINISTRATIVE_CONTROLS:
            assert control in html
        assert "2026-10-19" in html
        assert "qualified cybersecurity professionals" in html

    def test_render_date_matches_utc_clock(self, manager, report):
        late = report.__class__.from_dict({**report.to_dict(), "timestamp": "2026-10-19T23:30:00.000Z"})
        with patch("securecheck.core.result_manager.datetime", _LateEveningClock):
            html = manager.render_document(late)
        assert "2026-10-19 23:30:00 UTC" in html
        assert "@bottom-right { content: \"2026-10-19\"" in html
        assert "2026-10-20" not in html
        assert "2026-10-20" not in html

    def test_render_high_risk_document(self, manager):
        html = manager.render_document(perform_security_assessment("example.org"))

        assert "25/100" in html
        assert "Weak (High Risk)" in html
        assert "WEAK security posture" in html
        assert "✗ Not Available" in html
        assert "✗ Unreachable" in html
        assert "nosniff" in html

    def test_render_escapes_domain(self, manager, report):
        tampered = report.__class__.from_dict({**report.to_dict(), "domain": "<script>x</script>.com"})
        html = manager.render_document(tampered)
        assert "<script>x</script>" not in html

    @pytest.mark.asyncio
    async def test_generate_reports(self, manager, report):
        paths = await manager.generate_reports(report, ["json", "html"])

        assert set(paths) == {"json", "html"}
        assert Path(paths["json"]).parent.name == "json"
        assert Path(paths["html"]).name.startswith("security-report-example-com-")
        assert Path(paths["html"]).read_text(encoding="utf-8").startswith("<!DOCTYPE html>")

    @pytest.mark.asyncio
    async def test_generate_reports_rejects_unknown_format(self, manager, report):
        with pytest.raises(ValueError, match="pdf"):
            await manager.generate_reports(report, ["pdf"])
