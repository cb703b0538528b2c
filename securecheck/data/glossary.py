"""
Cybersecurity glossary
Curated security terms grouped by Information Security Management category
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple


CATEGORIES = ("Governance", "Cryptography", "Network Security", "Web Security", "Risk Management")

_TERMS_PATH = Path(__file__).with_name("security_terms.json")


@dataclass(frozen=True)
class SecurityTerm:
    term: str
    definition: str
    category: str


def _load_terms() -> Tuple[SecurityTerm, ...]:
    with open(_TERMS_PATH, "r", encoding="utf-8") as f:
        raw = json.load(f)
    return tuple(SecurityTerm(item["term"], item["definition"], item["category"]) for item in raw)


SECURITY_TERMS = _load_terms()


def _check_category(category: str) -> None:
    if category not in CATEGORIES:
        raise ValueError(
            f"Unknown category {category!r}; expected one of: {', '.join(CATEGORIES)}"
        )


def search_terms(query: str = "", category: Optional[str] = None) -> List[SecurityTerm]:
    """Case-insensitive match on term name or definition, optionally within one category."""
    if category is not None:
        _check_category(category)

    needle = query.strip().lower()
    return [
        term for term in SECURITY_TERMS
        if (needle in term.term.lower() or needle in term.definition.lower())
        and (category is None or term.category == category)
    ]


def group_by_category(terms: List[SecurityTerm]) -> Dict[str, List[SecurityTerm]]:
    grouped: Dict[str, List[SecurityTerm]] = {category: [] for category in CATEGORIES}
    for term in terms:
        grouped[term.category].append(term)
    return grouped


def category_counts() -> Dict[str, int]:
    return {category: len(terms) for category, terms in group_by_category(list(SECURITY_TERMS)).items()}
