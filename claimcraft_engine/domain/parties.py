"""Party type rules shared by the interest and compensation calculators"""

from typing import Optional, Union

from claimcraft_engine.domain.models import PartyType

PartyTypeLike = Union[PartyType, str, None]

BUSINESS_TYPES = frozenset({PartyType.BUSINESS, PartyType.SOLE_TRADER})

_COMPANY_INDICATORS = (
    " ltd", " limited", " plc", " llp", " lp",
    " inc", " corp", " corporation",
    "trading as", "t/a",
)


def coerce_party_type(value: PartyTypeLike) -> Optional[PartyType]:
    """Accept an enum member or its display value ("Sole Trader"); None if unknown"""
    if isinstance(value, PartyType):
        return value
    if not value:
        return None
    try:
        return PartyType(value)
    except ValueError:
        return None


def is_business(party_type: PartyTypeLike) -> bool:
    """Sole traders count as businesses under the Late Payment Act 1998"""
    return coerce_party_type(party_type) in BUSINESS_TYPES


def is_b2b(claimant_type: PartyTypeLike, defendant_type: PartyTypeLike) -> bool:
    """
    Business-to-business test.

    Decides both the interest regime (Late Payment Act vs County Courts Act
    s.69) and whether fixed compensation is due. Every caller must use this.
    """
    return is_business(claimant_type) and is_business(defendant_type)


def interest_act(b2b: bool) -> str:
    return (
        "the Late Payment of Commercial Debts (Interest) Act 1998"
        if b2b
        else "section 69 of the County Courts Act 1984"
    )


def interest_act_short(b2b: bool) -> str:
    return "Late Payment Act 1998" if b2b else "County Courts Act 1984 s.69"


def interest_rate_description(b2b: bool) -> str:
    return "8% above Bank of England Base Rate" if b2b else "8% per annum"


def infer_party_type(name: str, company_number: Optional[str] = None) -> PartyType:
    """Guess a party type from a registered number or a company-style name"""
    if not name:
        return PartyType.INDIVIDUAL

    if company_number and company_number.strip():
        return PartyType.BUSINESS

    # Pad so a bare "Acme Ltd" still matches " ltd"
    lowered = f" {name.lower()} "
    if any(indicator in lowered for indicator in _COMPANY_INDICATORS):
        return PartyType.BUSINESS

    return PartyType.INDIVIDUAL
