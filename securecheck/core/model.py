"""
Core models for SecureCheck

Defines the immutable report records produced by the assessment engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


CERTIFICATE_STATUSES = ("Valid", "Unknown", "Expired")
RISK_LEVELS = ("Low", "Medium", "High")


@dataclass(frozen=True)
class SSLStatus:
    available: bool
    certificate_status: str  # Valid|Unknown|Expired
    expiry_days: Optional[int] = None  # only set when certificate_status == "Valid"


@dataclass(frozen=True)
class HeaderFinding:
    name: str
    description: str
    present: bool
    recommendation: str


@dataclass(frozen=True)
class DNSStatus:
    reachable: bool
    response_time: str  # "123ms" or "N/A"


@dataclass(frozen=True)
class SecurityReport:
    """Simulated security report for a single cleaned domain.

    Note: `timestamp` is an ISO8601 string to ease serialization and report generation.
    It is the only field that differs between two assessments of the same domain.
    """

    domain: str
    timestamp: str
    ssl: SSLStatus
    headers: Tuple[HeaderFinding, ...]
    dns: DNSStatus
    overall_risk: str  # Low|Medium|High
    risk_score: int  # 0 - 100, higher is better
    recommendations: Tuple[str, ...]

    @property
    def missing_headers(self) -> Tuple[HeaderFinding, ...]:
        return tuple(h for h in self.headers if not h.present)

    @property
    def headers_present(self) -> int:
        return sum(1 for h in self.headers if h.present)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the camelCase field names of exported reports."""
        return {
            "domain": self.domain,
            "timestamp": self.timestamp,
            "ssl": {
                "available": self.ssl.available,
                "certificateStatus": self.ssl.certificate_status,
                "expiryDays": self.ssl.expiry_days,
            },
            "headers": [
                {
                    "name": h.name,
                    "description": h.description,
                    "present": h.present,
                    "recommendation": h.recommendation,
                }
                for h in self.headers
            ],
            "dns": {
                "reachable": self.dns.reachable,
                "responseTime": self.dns.response_time,
            },
            "overallRisk": self.overall_risk,
            "riskScore": self.risk_score,
            "recommendations": list(self.recommendations),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SecurityReport":
        ssl = data["ssl"]
        dns = data["dns"]

        if ssl["certificateStatus"] not in CERTIFICATE_STATUSES:
            raise ValueError(f"Unknown certificate status: {ssl['certificateStatus']!r}")
        if data["overallRisk"] not in RISK_LEVELS:
            raise ValueError(f"Unknown risk level: {data['overallRisk']!r}")

        return cls(
            domain=data["domain"],
            timestamp=data["timestamp"],
            ssl=SSLStatus(
                available=bool(ssl["available"]),
                certificate_status=ssl["certificateStatus"],
                expiry_days=ssl.get("expiryDays"),
            ),
            headers=tuple(
                HeaderFinding(
                    name=h["name"],
                    description=h["description"],
                    present=bool(h["present"]),
                    recommendation=h["recommendation"],
                )
                for h in data["headers"]
            ),
            dns=DNSStatus(reachable=bool(dns["reachable"]), response_time=dns["responseTime"]),
            overall_risk=data["overallRisk"],
            risk_score=int(data["riskScore"]),
            recommendations=tuple(data["recommendations"]),
        )

    def same_content(self, other: "SecurityReport") -> bool:
        """Compare two reports ignoring the generation timestamp."""
        mine = self.to_dict()
        theirs = other.to_dict()
        mine.pop("timestamp")
        theirs.pop("timestamp")
        return mine == theirs
