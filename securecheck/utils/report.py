"""
Report Generation Utilities for SecureCheck
Summary formats for one or more assessed domains
"""

import csv
import logging
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

from tabulate import tabulate

from ..core.model import SecurityReport


class ReportGenerator:
    """Generate batch summary formats from security reports."""

    def __init__(self, output_dir: str = "./reports"):
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.logger = logging.getLogger(__name__)

    @staticmethod
    def _row(report: SecurityReport) -> List:
        return [
            report.domain,
            f"{report.risk_score}/100",
            report.overall_risk,
            report.ssl.certificate_status if report.ssl.available else "None",
            f"{report.headers_present}/{len(report.headers)}",
            report.dns.response_time,
        ]

    @staticmethod
    def risk_counts(reports: List[SecurityReport]) -> Dict[str, int]:
        counts = {"Low": 0, "Medium": 0, "High": 0}
        for report in reports:
            counts[report.overall_risk] = counts.get(report.overall_risk, 0) + 1
        return counts

    def generate_csv_report(self, reports: List[SecurityReport],
                            filename: Optional[str] = None) -> str:
        """Generate CSV report with one row per domain."""
        if not filename:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            filename = f"assessments_{timestamp}.csv"

        filepath = self.output_dir / filename

        columns = [
            'Domain', 'Timestamp', 'Risk_Score', 'Overall_Risk', 'SSL_Available',
            'Certificate_Status', 'Expiry_Days', 'Headers_Missing', 'DNS_Reachable',
            'Response_Time', 'Recommendations'
        ]

        with open(filepath, 'w', newline='', encoding='utf-8') as csvfile:
            writer = csv.writer(csvfile)
            writer.writerow(columns)

            for report in reports:
                writer.writerow([
                    report.domain,
                    report.timestamp,
                    report.risk_score,
                    report.overall_risk,
                    report.ssl.available,
                    report.ssl.certificate_status,
                    report.ssl.expiry_days if report.ssl.expiry_days is not None else '',
                    '; '.join(h.name for h in report.missing_headers),
                    report.dns.reachable,
                    report.dns.response_time,
                    '; '.join(report.recommendations),
                ])

        self.logger.info(f"CSV report generated: {filepath}")
        return str(filepath)

    def generate_summary_report(self, reports: List[SecurityReport],
                                filename: Optional[str] = None) -> str:
        """Generate plain-text summary report."""
        if not filename:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            filename = f"summary_{timestamp}.txt"

        filepath = self.output_dir / filename
        counts = self.risk_counts(reports)

        content = []
        content.append("=" * 70)
        content.append("SECURECHECK ASSESSMENT SUMMARY REPORT")
        content.append("=" * 70)
        content.append("")
        content.append(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
        content.append(f"Domains Assessed: {len(reports)}")
        content.append("")

        content.append("DOMAINS BY RISK LEVEL")
        content.append("-" * 21)
        for level in ("High", "Medium", "Low"):
            content.append(f"{level:>8}: {counts[level]}")
        content.append("")

        for report in sorted(reports, key=lambda r: r.risk_score):
            content.append(f"{report.domain} - {report.risk_score}/100 ({report.overall_risk} Risk)")
            for i, rec in enumerate(report.recommendations, 1):
                content.append(f"  {i}. {rec}")
            content.append("")

        content.append("DISCLAIMER")
        content.append("-" * 10)
        content.append("Results are simulated for educational purposes and do not reflect")
        content.append("the real security posture of the assessed websites.")
        content.append("")
        content.append("=" * 70)

        with open(filepath, 'w', encoding='utf-8') as f:
            f.write('\n'.join(content))

        self.logger.info(f"Summary report generated: {filepath}")
        return str(filepath)

    @staticmethod
    def generate_console_summary(reports: List[SecurityReport]) -> str:
        """Generate console-friendly summary table."""
        summary_table = tabulate(
            [ReportGenerator._row(report) for report in reports],
            headers=['Domain', 'Score', 'Risk', 'Certificate', 'Headers', 'DNS'],
            tablefmt='grid'
        )

        counts = ReportGenerator.risk_counts(reports)
        return (
            f"\nAssessment Summary: {len(reports)} domain(s) - "
            f"{counts['High']} High | {counts['Medium']} Medium | {counts['Low']} Low\n\n"
            f"{summary_table}\n"
        )
