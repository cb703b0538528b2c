"""
Domain normalization, validation and trust classification
"""

import re


# Well-known domains that receive favorable simulated results.
# The bare "edu"/"gov" entries also make the exact strings "edu" and "gov" trusted.
TRUSTED_DOMAINS = (
    "google.com", "github.com", "microsoft.com", "apple.com",
    "amazon.com", "cloudflare.com", "mozilla.org", "w3.org",
    "stackoverflow.com", "wikipedia.org", "edu", "gov",
)

TRUSTED_SUFFIXES = (".edu", ".gov")

_PREFIX_RE = re.compile(r"^(https?://)?(www\.)?")
_PREFIX_RE_ANY_CASE = re.compile(r"^(https?://)?(www\.)?", re.IGNORECASE)
_WWW_RE = re.compile(r"^www\.")
_DOMAIN_RE = re.compile(r"([a-zA-Z0-9-]+\.)+[a-zA-Z]{2,}")


def clean_domain(value: str) -> str:
    """Normalize user input to a bare, lower-case domain.

    Strips whitespace, the scheme, a leading ``www.`` and anything from the
    first ``/`` or ``?`` onward. Never raises; the result may be empty.
    Prefixes are stripped until none remain so that cleaning is idempotent.
    """
    cleaned = value.strip().lower()
    while True:
        stripped = _PREFIX_RE.sub("", cleaned, count=1).strip()
        if stripped == cleaned:
            break
        cleaned = stripped
    return cleaned.split("/")[0].split("?")[0].strip()


def is_valid_domain(value: str) -> bool:
    """Check that the input names a domain like ``example.com``."""
    candidate = _PREFIX_RE_ANY_CASE.sub("", value.strip(), count=1)
    candidate = candidate.split("/")[0].split("?")[0]
    return _DOMAIN_RE.fullmatch(candidate) is not None


def is_trusted_domain(domain: str) -> bool:
    normalized = _WWW_RE.sub("", domain.lower(), count=1)
    if normalized.endswith(TRUSTED_SUFFIXES):
        return True
    return any(
        normalized == trusted or normalized.endswith("." + trusted)
        for trusted in TRUSTED_DOMAINS
    )
