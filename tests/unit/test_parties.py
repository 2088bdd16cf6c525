"""Unit tests for party type rules"""

import pytest

from claimcraft_engine.domain.models import PartyType
from claimcraft_engine.domain.parties import (
    coerce_party_type,
    infer_party_type,
    interest_act,
    interest_act_short,
    interest_rate_description,
    is_b2b,
    is_business,
)


def test_coerce_party_type():
    assert coerce_party_type(PartyType.BUSINESS) is PartyType.BUSINESS
    assert coerce_party_type("Sole Trader") is PartyType.SOLE_TRADER
    assert coerce_party_type("Company") is None
    assert coerce_party_type(None) is None


@pytest.mark.parametrize(
    "party_type,business",
    [
        (PartyType.BUSINESS, True),
        (PartyType.SOLE_TRADER, True),
        (PartyType.INDIVIDUAL, False),
        (None, False),
        ("unknown", False),
    ],
)
def test_is_business(party_type, business):
    assert is_business(party_type) is business


@pytest.mark.parametrize(
    "claimant,defendant,expected",
    [
        (PartyType.BUSINESS, PartyType.BUSINESS, True),
        (PartyType.SOLE_TRADER, PartyType.SOLE_TRADER, True),
        (PartyType.BUSINESS, PartyType.SOLE_TRADER, True),
        (PartyType.BUSINESS, PartyType.INDIVIDUAL, False),
        (PartyType.INDIVIDUAL, PartyType.BUSINESS, False),
        (PartyType.INDIVIDUAL, PartyType.INDIVIDUAL, False),
    ],
)
def test_is_b2b(claimant, defendant, expected):
    assert is_b2b(claimant, defendant) is expected


def test_interest_act_wording():
    assert interest_act(True) == "the Late Payment of Commercial Debts (Interest) Act 1998"
    assert interest_act(False) == "section 69 of the County Courts Act 1984"
    assert interest_act_short(True) == "Late Payment Act 1998"
    assert interest_act_short(False) == "County Courts Act 1984 s.69"
    assert "Base Rate" in interest_rate_description(True)
    assert interest_rate_description(False) == "8% per annum"


@pytest.mark.parametrize(
    "name,company_number,expected",
    [
        ("Acme Ltd", None, PartyType.BUSINESS),
        ("ACME LIMITED", None, PartyType.BUSINESS),
        ("Big Bank plc", None, PartyType.BUSINESS),
        ("Smith & Co LLP", None, PartyType.BUSINESS),
        ("Jane Doe t/a Doe Plumbing", None, PartyType.BUSINESS),
        ("Jane Doe", "01234567", PartyType.BUSINESS),
        ("Jane Doe", None, PartyType.INDIVIDUAL),
        ("Jane Doe", "   ", PartyType.INDIVIDUAL),
        # "ltd" must start a word
        ("Saltdean Bakery", None, PartyType.INDIVIDUAL),
        ("", None, PartyType.INDIVIDUAL),
    ],
)
def test_infer_party_type(name, company_number, expected):
    assert infer_party_type(name, company_number) is expected
