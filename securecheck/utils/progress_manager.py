"""
Progress Manager for SecureCheck
Handles the simulated scan spinner, colored log lines and rich report rendering
"""

from datetime import datetime
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.table import Table

from ..core.model import SecurityReport
from ..core.summary import build_posture_summary


RISK_STYLES = {
    "Low": "green",
    "Medium": "yellow",
    "High": "red",
}


def _mark(ok: bool, yes: str, no: str) -> str:
    return f"[green]✓ {yes}[/green]" if ok else f"[red]✗ {no}[/red]"


class ProgressManager:
    """Console presentation for assessments."""

    def __init__(self, console: Console, verbosity: int = 1):
        self.console = console
        self.verbosity = verbosity
        self.progress: Optional[Progress] = None
        self.progress_task = None

    def start_assessment(self, domain: str):
        """Show the spinner while the simulated checks run."""
        self.log_message("INFO", f"Running simulated security checks for {domain}...")
        self.progress = Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            TimeElapsedColumn(),
            console=self.console,
            transient=True
        )
        self.progress.start()
        self.progress_task = self.progress.add_task("Analyzing Security Posture", total=None)

    def stop_assessment(self):
        if self.progress:
            self.progress.stop()
        self.progress = None
        self.progress_task = None

    def log_message(self, level: str, message: str):
        """Log a message with timestamp and color coding."""
        colors = {
            "INFO": "cyan",
            "SUCCESS": "green bold",
            "WARNING": "yellow",
            "ERROR": "red"
        }

        color = colors.get(level, "white")
        if self.verbosity >= 1 or level == "ERROR":
            self.console.print(f"[{self._get_timestamp()}] [{level}] {message}", style=color, markup=False)

    def show_report(self, report: SecurityReport, show_summary: bool = True):
        """Render a report as rich panels and tables."""
        style = RISK_STYLES.get(report.overall_risk, "white")

        self.console.print(Panel(
            f"[bold]{report.domain}[/bold]\n"
            f"Security Score: [{style}]{report.risk_score}/100[/{style}]   "
            f"Risk Level: [{style}]{report.overall_risk}[/{style}]\n"
            f"[dim]Assessed {report.timestamp}[/dim]",
            title="Security Report",
            border_style=style
        ))

        ssl_table = Table(title="SSL/TLS Configuration", show_header=False)
        ssl_table.add_column("Check", style="bold")
        ssl_table.add_column("Result")
        ssl_table.add_row("SSL/TLS Encryption", _mark(report.ssl.available, "Available", "Not Available"))
        ssl_table.add_row("Certificate Status", report.ssl.certificate_status)
        ssl_table.add_row(
            "Certificate Expiry",
            f"{report.ssl.expiry_days} days" if report.ssl.expiry_days else "N/A"
        )
        self.console.print(ssl_table)

        headers_table = Table(title="HTTP Security Headers", header_style="bold magenta")
        headers_table.add_column("Header", style="cyan")
        headers_table.add_column("Status", justify="center")
        headers_table.add_column("Purpose")
        for header in report.headers:
            headers_table.add_row(header.name, _mark(header.present, "Present", "Missing"), header.description)
        self.console.print(headers_table)

        dns_table = Table(title="DNS Configuration", show_header=False)
        dns_table.add_column("Check", style="bold")
        dns_table.add_column("Result")
        dns_table.add_row("DNS Resolution", _mark(report.dns.reachable, "Reachable", "Unreachable"))
        dns_table.add_row("Response Time", report.dns.response_time)
        self.console.print(dns_table)

        recommendations = "\n".join(f"{i}. {rec}" for i, rec in enumerate(report.recommendations, 1))
        self.console.print(Panel(recommendations, title="Recommendations", border_style="cyan"))

        if show_summary:
            self.show_posture_summary(report)

    def show_posture_summary(self, report: SecurityReport):
        summary = build_posture_summary(report)
        style = RISK_STYLES.get(report.overall_risk, "white")

        self.console.print(
            f"\n[bold]Overall Security Rating:[/bold] [{style}]{summary.rating}[/{style}] "
            f"- {summary.rating_description}"
        )

        findings_table = Table(title="Key Findings", header_style="bold magenta")
        findings_table.add_column("Category", style="cyan", no_wrap=True)
        findings_table.add_column("Status", justify="center")
        findings_table.add_column("Finding")
        for finding in summary.key_findings:
            findings_table.add_row(
                finding.category,
                "[green]✓[/green]" if finding.status else "[red]✗[/red]",
                finding.finding
            )
        self.console.print(findings_table)

        risks_table = Table(title="Identified Risks", header_style="bold magenta")
        risks_table.add_column("Severity", justify="center")
        risks_table.add_column("Risk", style="bold")
        risks_table.add_column("Impact")
        for risk in summary.identified_risks:
            risk_style = RISK_STYLES.get(risk.severity, "white")
            risks_table.add_row(f"[{risk_style}]{risk.severity}[/{risk_style}]", risk.risk, risk.impact)
        self.console.print(risks_table)

        if self.verbosity >= 2:
            admin = "\n".join(f"• {c}" for c in summary.administrative_controls)
            technical = "\n".join(f"• {c}" for c in summary.technical_controls)
            self.console.print(Panel(admin, title="Administrative Controls (ISO 27001)", border_style="blue"))
            self.console.print(Panel(technical, title="Technical Controls (NIST CSF)", border_style="blue"))

    def _get_timestamp(self) -> str:
        """Get current timestamp in HH:MM:SS format."""
        return datetime.now().strftime("%H:%M:%S")
