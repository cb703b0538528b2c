"""
Result Manager for SecureCheck
Handles storage, reloading and export of security reports
"""

import json
import logging
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Dict, Iterable, Optional

from jinja2 import Template

from .. import DISCLAIMER as UI_DISCLAIMER, __version__
from .engine import LOW_RISK_THRESHOLD, MEDIUM_RISK_THRESHOLD
from .model import SecurityReport
from .summary import ADMINISTRATIVE_CONTROLS, rating_for


SUPPORTED_FORMATS = ("json", "html")

RISK_INTERPRETATIONS = {
    "Low": (
        "The assessed website demonstrates a STRONG security posture with minimal identified risks. "
        "Core security controls are in place, and the site appears to follow security best practices. "
        "Regular monitoring and periodic reassessment are recommended to maintain this level of security."
    ),
    "Medium": (
        "The assessed website shows a MODERATE security posture with some areas requiring attention. "
        "While basic security measures are present, there are gaps that could potentially be exploited. "
        "Implementing the recommended controls would significantly improve the security posture."
    ),
    "High": (
        "The assessed website has a WEAK security posture with significant risks identified. "
        "Critical security controls appear to be missing or misconfigured. "
        "Immediate action is recommended to address the identified vulnerabilities and reduce exposure to attacks."
    ),
}

SCORING_METHODOLOGY = (
    "The security score is calculated based on: SSL/TLS availability (-30 if missing), "
    "certificate validity (-10 to -20 for issues), presence of security headers (-10 each if missing), "
    "and DNS reachability (-15 if unreachable). This methodology aligns with NIST Cybersecurity Framework "
    "principles and ISO/IEC 27001 control objectives."
)

EXPORT_DISCLAIMER = (
    "This tool provides informational results only and does not guarantee website security. "
    "Only publicly accessible, non-intrusive checks are simulated. "
    "This is an educational tool developed for a university course project and should not be used "
    "as the sole basis for security decisions. Results are generated using simulated data and "
    "deterministic algorithms for demonstration purposes. For actual security assessments, "
    "please consult with qualified cybersecurity professionals."
)


def risk_interpretation(score: int) -> str:
    """Pick the interpretation paragraph using the same bands as the overall risk."""
    if score >= LOW_RISK_THRESHOLD:
        return RISK_INTERPRETATIONS["Low"]
    if score >= MEDIUM_RISK_THRESHOLD:
        return RISK_INTERPRETATIONS["Medium"]
    return RISK_INTERPRETATIONS["High"]


def _utc_today() -> date:
    return datetime.now(timezone.utc).date()


def export_filename(report: SecurityReport, extension: str = "html",
                    today: Optional[date] = None) -> str:
    """``security-report-<domain-with-hyphens>-<YYYY-MM-DD>.<extension>``"""
    today = today or _utc_today()
    return f"security-report-{report.domain.replace('.', '-')}-{today.isoformat()}.{extension}"


EXPORT_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
    <title>Security Assessment Report - {{ report.domain }}</title>
    <meta charset="utf-8">
    <style>
        @page { size: A4; margin: 20mm 20mm 25mm 20mm;
                @bottom-left { content: "SecureCheck \\2014 Website Security Assessment Tool"; font-size: 8pt; color: #808080; }
                @bottom-center { content: "Page " counter(page) " of " counter(pages); font-size: 8pt; color: #808080; }
                @bottom-right { content: "{{ export_date }}"; font-size: 8pt; color: #808080; } }
        body { font-family: Helvetica, Arial, sans-serif; font-size: 10pt; color: #000; margin: 0; }
        .header { background: rgb(0, 100, 80); color: white; text-align: center; padding: 14px 0; }
        .header h1 { font-size: 22pt; margin: 0 0 6px 0; }
        .header p { margin: 2px 0; }
        .section { page-break-inside: avoid; }
        .section-header { background: rgb(0, 128, 100); color: white; font-size: 12pt; font-weight: bold; padding: 4px 8px; margin-top: 18px; }
        h3 { font-size: 11pt; margin: 12px 0 6px 0; }
        table { width: 100%; border-collapse: collapse; margin-bottom: 8px; page-break-inside: avoid; }
        th { background: rgb(0, 100, 80); color: white; text-align: left; padding: 4px; }
        td { border: 1px solid #ccc; padding: 4px; vertical-align: top; }
        td.label { font-weight: bold; width: 35%; }
        td.index { text-align: center; width: 24px; }
        tr:nth-child(even) td { background: #f5f5f5; }
        .disclaimer { font-style: italic; font-size: 9pt; }
        .new-page { page-break-before: always; }
        .footer { display: none; }
        @media screen { .footer { display: block; margin-top: 30px; font-size: 8pt; color: #808080; text-align: center; } }
    </style>
</head>
<body>
    <div class="header">
        <h1>Security Assessment Report</h1>
        <p>Website Security Assessment &amp; Guidance Tool</p>
        <p>University Course Project &mdash; Information Security Management</p>
    </div>

    <div class="section">
        <div class="section-header">Assessment Overview</div>
        <table>
            <tr><td class="label">Domain Tested</td><td>{{ report.domain }}</td></tr>
            <tr><td class="label">Assessment Date</td><td>{{ assessment_date }}</td></tr>
            <tr><td class="label">Security Score</td><td>{{ report.risk_score }}/100</td></tr>
            <tr><td class="label">Risk Level</td><td>{{ rating_label }}</td></tr>
        </table>
    </div>

    <div class="section">
        <div class="section-header">Detailed Findings</div>

        <h3>SSL/TLS Configuration</h3>
        <table>
            <tr><td class="label">SSL/TLS Encryption</td><td>{{ '✓ Available' if report.ssl.available else '✗ Not Available' }}</td></tr>
            <tr><td class="label">Certificate Status</td><td>{{ report.ssl.certificate_status }}</td></tr>
            <tr><td class="label">Certificate Expiry</td><td>{{ '%d days' % report.ssl.expiry_days if report.ssl.expiry_days else 'N/A' }}</td></tr>
        </table>

        <h3>HTTP Security Headers</h3>
        <table>
            <tr><th>Header</th><th>Status</th><th>Purpose</th></tr>
            {% for header in report.headers %}
            <tr>
                <td>{{ header.name }}</td>
                <td>{{ '✓ Present' if header.present else '✗ Missing' }}</td>
                <td>{{ header.description }}</td>
            </tr>
            {% endfor %}
        </table>

        <h3>DNS Configuration</h3>
        <table>
            <tr><td class="label">DNS Resolution</td><td>{{ '✓ Reachable' if report.dns.reachable else '✗ Unreachable' }}</td></tr>
            <tr><td class="label">Response Time</td><td>{{ report.dns.response_time }}</td></tr>
        </table>
    </div>

    <div class="section">
        <div class="section-header">Risk Interpretation</div>
        <p>{{ interpretation }}</p>
        <h3>Scoring Methodology</h3>
        <p>{{ methodology }}</p>
    </div>

    <div class="section new-page">
        <div class="section-header">Recommended Security Controls</div>

        <h3>Technical Controls (NIST CSF)</h3>
        <table>
            <tr><th>#</th><th>Recommendation</th></tr>
            {% for rec in report.recommendations %}
            <tr><td class="index">{{ loop.index }}</td><td>{{ rec }}</td></tr>
            {% endfor %}
        </table>

        <h3>Administrative Controls (ISO 27001)</h3>
        <table>
            <tr><th>#</th><th>Recommendation</th></tr>
            {% for control in administrative_controls %}
            <tr><td class="index">{{ loop.index }}</td><td>{{ control }}</td></tr>
            {% endfor %}
        </table>
    </div>

    <div class="section">
        <div class="section-header">Disclaimer</div>
        <p class="disclaimer">{{ disclaimer }}</p>
    </div>

    <div class="footer">
        <p>SecureCheck &mdash; Website Security Assessment Tool v{{ version }} | {{ export_date }}</p>
    </div>
</body>
</html>
"""


class ResultManager:
    """Manages saved reports and export documents."""

    def __init__(self, output_dir: str = "./reports"):
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.logger = logging.getLogger(__name__)

        # Create subdirectories
        (self.output_dir / "json").mkdir(exist_ok=True)
        (self.output_dir / "html").mkdir(exist_ok=True)

    async def save_report(self, report: SecurityReport) -> str:
        """Save the serialized report to a JSON file."""
        filepath = self.output_dir / "json" / export_filename(report, "json")

        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump({
                "metadata": {
                    "generated_at": datetime.now().isoformat(),
                    "tool": f"SecureCheck v{__version__}",
                    "disclaimer": UI_DISCLAIMER,
                },
                "report": report.to_dict(),
            }, f, indent=2, ensure_ascii=False)

        self.logger.info(f"Report saved to: {filepath}")
        return str(filepath)

    def render_document(self, report: SecurityReport, today: Optional[date] = None) -> str:
        """Render the export document as print-ready HTML."""
        today = today or _utc_today()
        rating, _ = rating_for(report)

        try:
            assessed_at = datetime.fromisoformat(report.timestamp.replace("Z", "+00:00"))
            assessment_date = assessed_at.strftime("%Y-%m-%d %H:%M:%S UTC")
        except ValueError:
            assessment_date = report.timestamp

        template = Template(EXPORT_TEMPLATE, autoescape=True)
        return template.render(
            report=report,
            assessment_date=assessment_date,
            rating_label=f"{rating} ({report.overall_risk} Risk)",
            interpretation=risk_interpretation(report.risk_score),
            methodology=SCORING_METHODOLOGY,
            administrative_controls=ADMINISTRATIVE_CONTROLS,
            disclaimer=EXPORT_DISCLAIMER,
            export_date=today.isoformat(),
            version=__version__,
        )

    async def export_document(self, report: SecurityReport) -> str:
        """Write the export document for a report."""
        filepath = self.output_dir / "html" / export_filename(report, "html")

        html_content = self.render_document(report)

        with open(filepath, 'w', encoding='utf-8') as f:
            f.write(html_content)

        self.logger.info(f"Export document generated: {filepath}")
        return str(filepath)

    async def generate_reports(self,
                               report: SecurityReport,
                               formats: Iterable[str] = SUPPORTED_FORMATS) -> Dict[str, str]:
        """Generate the requested formats; errors propagate to the caller."""
        reports = {}

        for fmt in formats:
            if fmt == "json":
                reports["json"] = await self.save_report(report)
            elif fmt == "html":
                reports["html"] = await self.export_document(report)
            else:
                raise ValueError(f"Unsupported report format: {fmt}")

        self.logger.debug(f"Generated {len(reports)} reports for {report.domain}")
        return reports

    def load_report(self, filepath: str) -> SecurityReport:
        """Load a report from a JSON file written by ``save_report``."""
        with open(filepath, 'r', encoding='utf-8') as f:
            data = json.load(f)

        # Accept bare report dictionaries as well
        report = SecurityReport.from_dict(data.get("report", data))
        self.logger.info(f"Loaded report for {report.domain} from {filepath}")
        return report
