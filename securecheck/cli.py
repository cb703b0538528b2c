#!/usr/bin/env python3
"""
SecureCheck CLI Interface
Command-line interface for the SecureCheck security assessment tool
"""

import asyncio
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from securecheck import DISCLAIMER
from securecheck.core.domain import clean_domain, is_valid_domain
from securecheck.core.result_manager import SUPPORTED_FORMATS, ResultManager
from securecheck.core.scanner import AssessmentError, AssessmentService, INVALID_DOMAIN_MESSAGE, InvalidDomainError
from securecheck.utils.logger import AuditLogger, cleanup_old_logs, setup_logger
from securecheck.utils.progress_manager import ProgressManager
from securecheck.utils.report import ReportGenerator

app = typer.Typer(
    name="securecheck",
    help="SecureCheck - Website Security Assessment & Guidance Tool",
    no_args_is_help=True
)

console = Console()

BANNER = "SecureCheck  |  Website Security Assessment & Guidance Tool"

BATCH_FORMATS = ("txt", "csv")


def parse_formats(formats: str) -> List[str]:
    """Split and check a comma-separated list of output formats."""
    requested = [f.strip().lower() for f in formats.split(",") if f.strip()]
    allowed = SUPPORTED_FORMATS + BATCH_FORMATS
    unknown = [f for f in requested if f not in allowed]
    if unknown:
        console.print(f"[red]ERROR: Unknown format(s): {', '.join(unknown)}[/red]")
        console.print(f"Supported formats: {', '.join(allowed)}")
        raise typer.Exit(1)
    return requested


def collect_targets(domains: Optional[List[str]], scope_file: Optional[str]) -> List[str]:
    targets = [d.strip() for d in (domains or []) if d.strip()]
    if scope_file:
        try:
            with open(scope_file, 'r', encoding='utf-8') as f:
                targets.extend(line.strip() for line in f if line.strip() and not line.startswith("#"))
        except FileNotFoundError:
            console.print(f"[red]ERROR: Scope file {scope_file} not found[/red]")
            raise typer.Exit(1)
    return targets


def validate_targets(service: AssessmentService, targets: List[str]) -> bool:
    """Reject malformed input before any assessment runs."""
    valid = True
    for target in targets:
        try:
            service.validate(target)
        except InvalidDomainError as e:
            console.print(f"[red]Invalid Domain: {e}[/red] (got {escape(repr(target))})", highlight=False)
            valid = False
    return valid


@app.command()
def assess(
    domains: Optional[List[str]] = typer.Argument(
        None, help="Domain(s) to assess (e.g., example.com)"
    ),
    scope_file: Optional[str] = typer.Option(
        None, "--scope-file", "-s",
        help="File containing one domain per line"
    ),
    output_dir: str = typer.Option(
        "./reports", "--output-dir", "-o",
        envvar="SECURECHECK_OUTPUT_DIR",
        help="Output directory for reports"
    ),
    formats: str = typer.Option(
        "json,html", "--format", "-f",
        help="Comma-separated report formats: json, html, txt, csv"
    ),
    delay: float = typer.Option(
        1.5, "--delay",
        envvar="SECURECHECK_DELAY",
        help="Minimum simulated scan time in seconds (0 disables)"
    ),
    jitter: float = typer.Option(
        1.0, "--jitter",
        envvar="SECURECHECK_JITTER",
        help="Random extra simulated scan time in seconds"
    ),
    no_export: bool = typer.Option(
        False, "--no-export",
        help="Only print results, do not write report files"
    ),
    log_dir: str = typer.Option(
        "logs", "--log-dir",
        envvar="SECURECHECK_LOG_DIR",
        help="Directory for log files"
    ),
    verbose: int = typer.Option(
        1, "--verbose", "-v",
        help="Verbosity level: 0=minimal, 1=standard, 2=debug"
    )
):
    """Run a simulated security assessment of one or more domains."""

    console.print(Text(BANNER, style="cyan bold"))
    console.print(Panel(DISCLAIMER, title="⚠️  Educational Tool Disclaimer", border_style="yellow"))

    requested_formats = parse_formats(formats)
    targets = collect_targets(domains, scope_file)

    if not targets:
        console.print("[red]ERROR: Provide at least one domain or a --scope-file[/red]")
        raise typer.Exit(1)

    logger = setup_logger(verbose, log_dir=log_dir)
    audit_logger = AuditLogger(str(Path(log_dir) / "assessment_audit.log"))
    progress_manager = ProgressManager(console, verbosity=verbose)

    service = AssessmentService(
        min_delay=delay,
        jitter=jitter,
        logger=logger,
        audit_logger=audit_logger,
        progress_manager=progress_manager
    )

    if not validate_targets(service, targets):
        audit_logger.close()
        raise typer.Exit(1)

    async def run_assessments():
        reports = []
        per_report = [f for f in requested_formats if f in SUPPORTED_FORMATS]
        result_manager = ResultManager(output_dir) if per_report and not no_export else None

        for target in targets:
            report = await service.assess(target)
            reports.append(report)
            progress_manager.show_report(report)

            if result_manager:
                try:
                    paths = await result_manager.generate_reports(report, per_report)
                except Exception as e:
                    console.print(f"[red]Export failed: {escape(str(e))}[/red]")
                    audit_logger.log_export_failed(report.domain, str(e))
                    continue
                for fmt, path in paths.items():
                    audit_logger.log_export(report.domain, fmt, path)
                    progress_manager.log_message("SUCCESS", f"{fmt.upper()} report saved to: {path}")

        batch = [f for f in requested_formats if f in BATCH_FORMATS]
        if not no_export and batch:
            generator = ReportGenerator(output_dir)
            try:
                if "txt" in batch:
                    path = generator.generate_summary_report(reports)
                    progress_manager.log_message("SUCCESS", f"Summary saved to: {path}")
                if "csv" in batch:
                    path = generator.generate_csv_report(reports)
                    progress_manager.log_message("SUCCESS", f"CSV saved to: {path}")
            except Exception as e:
                console.print(f"[red]Export failed: {escape(str(e))}[/red]")
                audit_logger.log_export_failed(",".join(r.domain for r in reports), str(e))

        if len(reports) > 1:
            console.print(ReportGenerator.generate_console_summary(reports), markup=False)

        return reports

    try:
        asyncio.run(run_assessments())
        progress_manager.log_message("SUCCESS", "Assessment completed successfully!")

    except KeyboardInterrupt:
        console.print("[yellow]Assessment interrupted by user[/yellow]")
        raise typer.Exit(1)
    except AssessmentError as e:
        console.print(f"[red]Assessment Failed: {e}[/red]")
        raise typer.Exit(1)
    except Exception as e:
        console.print(f"[red]Assessment failed: {escape(str(e))}[/red]")
        if verbose >= 2:
            import traceback
            console.print(traceback.format_exc())
        raise typer.Exit(1)
    finally:
        audit_logger.close()


@app.command()
def export(
    report_file: str = typer.Argument(..., help="Report JSON written by 'assess'"),
    output_dir: str = typer.Option(
        "./reports", "--output-dir", "-o",
        envvar="SECURECHECK_OUTPUT_DIR",
        help="Output directory for the export document"
    )
):
    """Regenerate the export document from a saved report."""
    result_manager = ResultManager(output_dir)

    try:
        report = result_manager.load_report(report_file)
        path = asyncio.run(result_manager.export_document(report))
    except Exception as e:
        console.print(f"[red]Export failed: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]Export document created: {path}[/green]")


@app.command()
def validate(
    domain: str = typer.Argument(..., help="Domain to check")
):
    """Check whether input is a well-formed domain and show its cleaned form."""
    if not is_valid_domain(domain):
        console.print(f"[red]✗ Invalid Domain: {INVALID_DOMAIN_MESSAGE}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]✓ Valid domain[/green] -> {clean_domain(domain)}", highlight=False)


@app.command()
def glossary(
    search: str = typer.Option("", "--search", "-q", help="Filter terms by name or definition"),
    category: Optional[str] = typer.Option(None, "--category", "-c", help="Only show one category")
):
    """List cybersecurity terms grouped by category."""
    from securecheck.data.glossary import CATEGORIES, SECURITY_TERMS, category_counts, group_by_category, search_terms

    try:
        terms = search_terms(search, category)
    except ValueError as e:
        console.print(f"[red]ERROR: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    counts = category_counts()
    filters = "  ".join(f"{name} ({counts[name]})" for name in CATEGORIES)
    console.print(f"[cyan]Cybersecurity Terms[/cyan]  All ({len(SECURITY_TERMS)})  {filters}\n")

    if not terms:
        console.print("[yellow]No terms match your search[/yellow]")
        return

    for name, group in group_by_category(terms).items():
        if not group:
            continue
        table = Table(title=f"{name} ({len(group)} terms)", show_header=True, header_style="bold magenta")
        table.add_column("Term", style="cyan", no_wrap=True)
        table.add_column("Definition")
        for term in group:
            table.add_row(term.term, term.definition)
        console.print(table)


@app.command()
def clean_logs(
    days: int = typer.Option(30, "--days", help="Delete logs older than this many days"),
    log_dir: str = typer.Option("logs", "--log-dir", envvar="SECURECHECK_LOG_DIR", help="Directory for log files")
):
    """Delete old log files."""
    removed = cleanup_old_logs(log_dir, days)
    console.print(f"Deleted {removed} old log file(s)")


@app.command()
def version():
    """Show version information."""
    from securecheck import __version__, __author__
    console.print(f"SecureCheck v{__version__}")
    console.print(f"By {__author__}")


if __name__ == "__main__":
    app()
