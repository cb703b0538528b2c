"""
SecureCheck static data
"""

from .glossary import CATEGORIES, SECURITY_TERMS, SecurityTerm, search_terms

__all__ = [
    "CATEGORIES",
    "SECURITY_TERMS",
    "SecurityTerm",
    "search_terms"
]
