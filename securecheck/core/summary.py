"""
Security posture summary

Consolidates a SecurityReport into the rating, key findings, non-technical
risks and recommended controls shown alongside the detailed results.
"""

from dataclasses import dataclass
from typing import List, Tuple

from .model import SecurityReport


RATINGS = {
    "Low": ("Strong", "Low Risk - Excellent security posture"),
    "Medium": ("Moderate", "Medium Risk - Improvements recommended"),
    "High": ("Weak", "High Risk - Immediate action required"),
}

ADMINISTRATIVE_CONTROLS = (
    "Establish and maintain an Information Security Policy",
    "Implement security awareness training for personnel",
    "Define incident response procedures",
    "Conduct periodic security audits and reviews",
    "Document security controls and configurations",
    "Establish vendor security assessment processes",
)

BASELINE_TECHNICAL_CONTROLS = (
    "Implement Web Application Firewall (WAF) for additional protection",
    "Enable security logging and monitoring (SIEM integration recommended)",
    "Configure automated security scanning in CI/CD pipelines",
    "Implement Content Security Policy with strict directives",
)

DEPLOY_CERTIFICATE_CONTROL = "Deploy SSL/TLS certificates from a trusted Certificate Authority"

MAX_TECHNICAL_CONTROLS = 8


@dataclass(frozen=True)
class KeyFinding:
    category: str
    status: bool
    finding: str


@dataclass(frozen=True)
class IdentifiedRisk:
    severity: str
    risk: str
    impact: str


@dataclass(frozen=True)
class PostureSummary:
    rating: str
    rating_description: str
    key_findings: Tuple[KeyFinding, ...]
    identified_risks: Tuple[IdentifiedRisk, ...]
    administrative_controls: Tuple[str, ...]
    technical_controls: Tuple[str, ...]


def rating_for(report: SecurityReport) -> Tuple[str, str]:
    return RATINGS[report.overall_risk]


def _key_findings(report: SecurityReport) -> Tuple[KeyFinding, ...]:
    ssl = report.ssl

    if ssl.certificate_status == "Valid":
        cert_finding = f"Certificate is valid with {ssl.expiry_days} days until expiry"
    elif ssl.certificate_status == "Expired":
        cert_finding = "SSL certificate has expired - browsers will show security warnings"
    else:
        cert_finding = "Certificate status could not be verified"

    if report.dns.reachable:
        dns_finding = f"DNS resolution successful ({report.dns.response_time})"
    else:
        dns_finding = "DNS resolution failed - website may be unreachable"

    return (
        KeyFinding(
            "Encryption",
            ssl.available,
            "SSL/TLS encryption is active, protecting data in transit" if ssl.available
            else "No SSL/TLS encryption detected - data may be transmitted insecurely",
        ),
        KeyFinding("Certificate", ssl.certificate_status == "Valid", cert_finding),
        KeyFinding(
            "Security Headers",
            report.headers_present >= 3,
            f"{report.headers_present} of {len(report.headers)} recommended security headers are configured",
        ),
        KeyFinding("DNS", report.dns.reachable, dns_finding),
    )


def _identified_risks(report: SecurityReport) -> Tuple[IdentifiedRisk, ...]:
    risks: List[IdentifiedRisk] = []
    missing = [h.name for h in report.missing_headers]

    if not report.ssl.available:
        risks.append(IdentifiedRisk(
            "High",
            "User data could be intercepted",
            "Sensitive information like passwords or personal data could be read by attackers during transmission",
        ))

    if report.ssl.certificate_status == "Expired":
        risks.append(IdentifiedRisk(
            "High",
            "Website trust is compromised",
            "Visitors will see browser warnings and may leave the site, damaging reputation and user trust",
        ))

    if any("Content-Security-Policy" in name for name in missing):
        risks.append(IdentifiedRisk(
            "Medium",
            "Vulnerable to script injection attacks",
            "Malicious code could be injected into the website, potentially stealing user data or defacing content",
        ))

    if any("X-Frame-Options" in name for name in missing):
        risks.append(IdentifiedRisk(
            "Medium",
            "Susceptible to clickjacking",
            "Users could be tricked into clicking hidden buttons or links, leading to unintended actions",
        ))

    if not report.dns.reachable:
        risks.append(IdentifiedRisk(
            "High",
            "Website availability issues",
            "Users cannot access the website, resulting in lost business and poor user experience",
        ))

    if not risks:
        risks.append(IdentifiedRisk(
            "Low",
            "No critical risks identified",
            "Current security controls appear adequate. Continue monitoring and maintaining security posture.",
        ))

    return tuple(risks)


def _technical_controls(report: SecurityReport) -> Tuple[str, ...]:
    candidates = list(report.recommendations)
    if not report.ssl.available:
        candidates.append(DEPLOY_CERTIFICATE_CONTROL)
    candidates.extend(BASELINE_TECHNICAL_CONTROLS)

    # dict keeps first-seen order
    unique = list(dict.fromkeys(candidates))
    return tuple(unique[:MAX_TECHNICAL_CONTROLS])


def build_posture_summary(report: SecurityReport) -> PostureSummary:
    rating, description = rating_for(report)
    return PostureSummary(
        rating=rating,
        rating_description=description,
        key_findings=_key_findings(report),
        identified_risks=_identified_risks(report),
        administrative_controls=ADMINISTRATIVE_CONTROLS,
        technical_controls=_technical_controls(report),
    )
