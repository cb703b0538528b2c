"""
SecureCheck
Website Security Assessment & Guidance Tool

An educational tool that produces simulated, deterministic security reports
for a domain name. No real network scanning is performed.

Copyright (c) 2026 SecureCheck Team
Licensed under MIT License
"""

__version__ = "1.0.0"
__author__ = "SecureCheck Team"
__description__ = "Website Security Assessment & Guidance Tool"

# Shown before every assessment and embedded in exported reports
DISCLAIMER = (
    "This tool provides informational results only and does not guarantee website security. "
    "Results are simulated for educational purposes and should not be used as a basis for "
    "security decisions. Always consult professional security auditors for actual assessments."
)

import logging

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())
