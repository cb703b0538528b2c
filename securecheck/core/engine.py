"""
SecureCheck Assessment Engine
Deterministic, simulated security assessment of a domain name

IMPORTANT: no network request is ever made. Every result is derived from a
32-bit rolling hash of the cleaned domain and the trusted-domain allow-list,
so the same input always yields the same report (apart from its timestamp).

Risk rating:
- Base score starts at 100
- No SSL: -30, Unknown certificate: -10, Expired certificate: -20
- Each missing security header: -10
- DNS unreachable: -15
- Score >= 70 is Low risk, 40-69 Medium, below 40 High
"""

import logging
from datetime import datetime, timezone
from typing import List, Tuple

from .domain import clean_domain, is_trusted_domain
from .model import DNSStatus, HeaderFinding, SSLStatus, SecurityReport

logger = logging.getLogger(__name__)


# (name, description, modulus, threshold, recommendation)
HEADER_CHECKS: Tuple[Tuple[str, str, int, int, str], ...] = (
    (
        "HSTS (Strict-Transport-Security)",
        "Forces browsers to use HTTPS, preventing downgrade attacks",
        7, 2,
        "Enable HSTS with a minimum max-age of 31536000 seconds",
    ),
    (
        "Content-Security-Policy",
        "Prevents XSS attacks by controlling resource loading",
        11, 4,
        "Implement a strict CSP that limits script and style sources",
    ),
    (
        "X-Frame-Options",
        "Prevents clickjacking by controlling iframe embedding",
        5, 1,
        "Set to DENY or SAMEORIGIN to prevent framing attacks",
    ),
    (
        "X-Content-Type-Options",
        "Prevents MIME type sniffing attacks",
        4, 0,
        "Set to 'nosniff' to prevent MIME type confusion",
    ),
)

SSL_PENALTY = 30
CERT_UNKNOWN_PENALTY = 10
CERT_EXPIRED_PENALTY = 20
HEADER_PENALTY = 10
DNS_PENALTY = 15

LOW_RISK_THRESHOLD = 70
MEDIUM_RISK_THRESHOLD = 40

REC_ENABLE_SSL = "Implement SSL/TLS encryption to secure data in transit"
REC_RENEW_CERT = "Renew the SSL/TLS certificate immediately"
REC_VERIFY_CERT = "Verify SSL/TLS certificate configuration"
REC_CHECK_DNS = "Investigate DNS configuration and ensure proper resolution"
REC_ALL_CLEAR = "Continue monitoring and maintain current security controls"


def simple_hash(value: str) -> int:
    """32-bit signed rolling hash (``acc * 31 + unit``), returned as an absolute value.

    Iterates UTF-16 code units and wraps exactly like signed 32-bit integer
    arithmetic, so ``abs(-2**31)`` yields ``2**31``.
    """
    data = value.encode("utf-16-le", "surrogatepass")
    acc = 0
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        acc = (acc * 31 + unit) & 0xFFFFFFFF
    if acc & 0x80000000:
        acc -= 0x100000000
    return abs(acc)


def risk_level_for_score(score: int) -> str:
    if score >= LOW_RISK_THRESHOLD:
        return "Low"
    if score >= MEDIUM_RISK_THRESHOLD:
        return "Medium"
    return "High"


def _assess_ssl(hash_value: int, trusted: bool) -> SSLStatus:
    if not (trusted or hash_value % 10 > 2):
        return SSLStatus(available=False, certificate_status="Unknown")
    if trusted:
        return SSLStatus(True, "Valid", 90 + hash_value % 275)

    cert_roll = hash_value % 100
    if cert_roll > 20:
        return SSLStatus(True, "Valid", 30 + hash_value % 335)
    if cert_roll > 5:
        return SSLStatus(True, "Unknown")
    return SSLStatus(True, "Expired")


def _assess_headers(hash_value: int, trusted: bool) -> Tuple[HeaderFinding, ...]:
    return tuple(
        HeaderFinding(
            name=name,
            description=description,
            present=trusted or hash_value % modulus > threshold,
            recommendation=recommendation,
        )
        for name, description, modulus, threshold, recommendation in HEADER_CHECKS
    )


def _assess_dns(hash_value: int, trusted: bool) -> DNSStatus:
    reachable = trusted or hash_value % 20 > 1
    response_time = f"{50 + hash_value % 150}ms" if reachable else "N/A"
    return DNSStatus(reachable=reachable, response_time=response_time)


def calculate_risk_score(ssl: SSLStatus, headers: Tuple[HeaderFinding, ...], dns: DNSStatus) -> int:
    score = 100
    if not ssl.available:
        score -= SSL_PENALTY
    if ssl.certificate_status == "Unknown":
        score -= CERT_UNKNOWN_PENALTY
    elif ssl.certificate_status == "Expired":
        score -= CERT_EXPIRED_PENALTY

    score -= HEADER_PENALTY * sum(1 for header in headers if not header.present)

    if not dns.reachable:
        score -= DNS_PENALTY

    return max(0, min(100, score))


def build_recommendations(ssl: SSLStatus, headers: Tuple[HeaderFinding, ...], dns: DNSStatus) -> Tuple[str, ...]:
    recommendations: List[str] = []

    if not ssl.available:
        recommendations.append(REC_ENABLE_SSL)
    if ssl.certificate_status == "Expired":
        recommendations.append(REC_RENEW_CERT)
    if ssl.certificate_status == "Unknown":
        recommendations.append(REC_VERIFY_CERT)

    recommendations.extend(h.recommendation for h in headers if not h.present)

    if not dns.reachable:
        recommendations.append(REC_CHECK_DNS)

    if not recommendations:
        recommendations.append(REC_ALL_CLEAR)

    return tuple(recommendations)


def _utc_timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def perform_security_assessment(value: str) -> SecurityReport:
    """
    Perform a simulated security assessment.

    The input is cleaned but not validated; callers should gate it with
    ``is_valid_domain`` first. Any string is accepted.

    Args:
        value: Raw domain input

    Returns:
        Fully populated SecurityReport
    """
    domain = clean_domain(value)
    hash_value = simple_hash(domain)
    trusted = is_trusted_domain(domain)

    ssl = _assess_ssl(hash_value, trusted)
    headers = _assess_headers(hash_value, trusted)
    dns = _assess_dns(hash_value, trusted)

    risk_score = calculate_risk_score(ssl, headers, dns)

    logger.debug(
        f"Assessed {domain!r}: hash={hash_value} trusted={trusted} score={risk_score}"
    )

    return SecurityReport(
        domain=domain,
        timestamp=_utc_timestamp(),
        ssl=ssl,
        headers=headers,
        dns=dns,
        overall_risk=risk_level_for_score(risk_score),
        risk_score=risk_score,
        recommendations=build_recommendations(ssl, headers, dns),
    )
