"""Unit tests for imported record normalisation"""

import pytest
from datetime import date
from decimal import Decimal

from claimcraft_engine.domain.models import PartyType, SolvencyStatus
from claimcraft_engine.domain.normalization import (
    normalize_invoice,
    normalize_party,
    normalize_xero_invoice,
    parse_party_type,
    parse_solvency_status,
)


class TestParty:
    def test_complete_party(self):
        result = normalize_party(
            {
                "type": "Business",
                "name": " Widgets Ltd ",
                "address": "2 Mill Lane",
                "city": "Croydon",
                "postcode": "cr26xh",
                "solvencyStatus": "active",
                "companyNumber": "09876543",
            },
            role="defendant",
        )

        assert result.is_valid
        party = result.value
        assert party.type == PartyType.BUSINESS
        assert party.name == "Widgets Ltd"
        assert party.postcode == "CR2 6XH"
        assert party.county == "Greater London"
        assert party.solvency_status == SolvencyStatus.ACTIVE
        assert party.company_number == "09876543"
        assert result.warnings == []

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("consumer", PartyType.INDIVIDUAL),
            ("Sole Trader", PartyType.SOLE_TRADER),
            ("sole_trader", PartyType.SOLE_TRADER),
            ("Limited Company", PartyType.BUSINESS),
            (PartyType.BUSINESS, PartyType.BUSINESS),
            ("partnership", None),
            (3, None),
        ],
    )
    def test_parse_party_type(self, raw, expected):
        assert parse_party_type(raw) == expected

    def test_missing_type_is_inferred(self):
        result = normalize_party({"name": "Acme Ltd"}, role="claimant")

        assert result.is_valid
        assert result.value.type == PartyType.BUSINESS
        assert "claimant: party type not supplied, inferred as Business" in result.warnings

    def test_unknown_type_is_an_error(self):
        result = normalize_party({"name": "Acme", "type": "partnership"}, role="claimant")

        assert not result.is_valid
        assert result.value is None
        assert result.errors == ["claimant: unknown party type 'partnership'"]

    def test_explicit_county_is_kept(self):
        result = normalize_party({"type": "Individual", "name": "Jo", "postcode": "M1 1AE", "county": "Lancashire"})
        assert result.value.county == "Lancashire"

    def test_invalid_postcode_is_a_warning(self):
        result = normalize_party({"type": "Individual", "name": "Jo", "postcode": "nowhere"}, role="defendant")

        assert result.is_valid
        assert result.value.postcode == "nowhere"
        assert "defendant: 'nowhere' is not a valid UK postcode" in result.warnings

    def test_missing_name_is_a_warning(self):
        result = normalize_party({"type": "Individual"}, role="defendant")

        assert result.is_valid
        assert "defendant: name is missing" in result.warnings

    def test_unknown_solvency_defaults(self):
        result = normalize_party({"type": "Business", "name": "Widgets Ltd", "solvency_status": "wobbly"})

        assert result.value.solvency_status == SolvencyStatus.UNKNOWN
        assert any("solvency status" in w for w in result.warnings)
        assert parse_solvency_status("DISSOLVED") == SolvencyStatus.DISSOLVED


class TestInvoice:
    def test_complete_invoice(self):
        result = normalize_invoice(
            {
                "invoiceNumber": "INV-001",
                "totalAmount": "£2,400.004",
                "dateIssued": "01/03/2025",
                "dueDate": "2025-03-31",
                "currency": "gbp",
                "description": "Website build",
            },
            today=date(2025, 6, 1),
        )

        assert result.is_valid
        invoice = result.value
        assert invoice.invoice_number == "INV-001"
        assert invoice.total_amount == Decimal("2400.00")
        assert invoice.date_issued == date(2025, 3, 1)
        assert invoice.due_date == date(2025, 3, 31)
        assert invoice.currency == "GBP"
        assert result.warnings == []

    @pytest.mark.parametrize(
        "amount,error",
        [
            (None, "invoice: amount is missing"),
            ("", "invoice: amount is missing"),
            ("lots", "invoice: amount 'lots' is not a usable amount"),
            ("1e30", "invoice: amount '1e30' is not a usable amount"),
            (0, "invoice: amount must be greater than zero"),
            (-10, "invoice: amount must be greater than zero"),
        ],
    )
    def test_bad_amount(self, amount, error):
        result = normalize_invoice({"invoice_number": "1", "total_amount": amount, "date_issued": "2025-01-01"})

        assert not result.is_valid
        assert result.errors == [error]

    @pytest.mark.parametrize(
        "issued,error",
        [
            (None, "invoice: issue date is missing"),
            ("2025-02-30", "invoice: issue date '2025-02-30' is not a valid date"),
            ("1850-01-01", "invoice: issue date '1850-01-01' is not a valid date"),
        ],
    )
    def test_bad_issue_date(self, issued, error):
        result = normalize_invoice({"invoice_number": "1", "total_amount": 100, "date_issued": issued})

        assert not result.is_valid
        assert result.errors == [error]

    def test_errors_are_collected_together(self):
        result = normalize_invoice({})

        assert len(result.errors) == 2
        assert "invoice: invoice number is missing" in result.warnings

    def test_invalid_due_date_dropped(self):
        result = normalize_invoice({"invoice_number": "1", "total_amount": 100, "date_issued": "2025-01-01", "due_date": "soon"})

        assert result.is_valid
        assert result.value.due_date is None
        assert any("default terms apply" in w for w in result.warnings)

    def test_future_issue_date_is_a_warning(self):
        result = normalize_invoice(
            {"invoice_number": "1", "total_amount": 100, "date_issued": "2025-07-01"}, today=date(2025, 6, 1)
        )

        assert result.is_valid
        assert result.warnings == ["invoice: issue date 2025-07-01 is in the future"]

    def test_due_date_before_issue_date_dropped(self):
        result = normalize_invoice(
            {"invoice_number": "1", "total_amount": 100, "date_issued": "2025-01-10", "due_date": "2025-01-01"}
        )

        assert result.is_valid
        assert result.value.due_date is None
        assert "invoice: due date is before the issue date, default terms apply" in result.warnings


XERO_INVOICE = {
    "Type": "ACCREC",
    "InvoiceNumber": "INV-0042",
    "Reference": "March retainer",
    "Status": "AUTHORISED",
    "Date": "/Date(1740787200000+0000)/",
    "DueDate": "2025-03-31T00:00:00",
    "Total": 1200.0,
    "AmountDue": 450.0,
    "CurrencyCode": "GBP",
    "Contact": {"ContactID": "c-1", "Name": "Widgets Ltd"},
}

XERO_CONTACT = {
    "Name": "Widgets Ltd",
    "EmailAddress": "accounts@widgets.example",
    "Addresses": [
        {"AddressType": "POBOX", "AddressLine1": "PO Box 12", "City": "Leeds", "PostalCode": "LS1 4AP"},
        {
            "AddressType": "STREET",
            "AddressLine1": "2 Mill Lane",
            "AddressLine2": "Unit 4",
            "City": "Croydon",
            "PostalCode": "cr2 6xh",
        },
    ],
    "Phones": [{"PhoneType": "DEFAULT", "PhoneNumber": ""}, {"PhoneType": "MOBILE", "PhoneNumber": "07700 900123"}],
}


class TestXero:
    def test_invoice_and_contact(self):
        party_result, invoice_result = normalize_xero_invoice(XERO_INVOICE, XERO_CONTACT)

        assert party_result.is_valid
        party = party_result.value
        assert party.type == PartyType.BUSINESS
        assert party.address == "2 Mill Lane, Unit 4"
        assert party.city == "Croydon"
        assert party.postcode == "CR2 6XH"
        assert party.email == "accounts@widgets.example"
        assert party.phone == "07700 900123"

        assert invoice_result.is_valid
        invoice = invoice_result.value
        assert invoice.invoice_number == "INV-0042"
        assert invoice.total_amount == Decimal("450.00")
        assert invoice.date_issued == date(2025, 3, 1)
        assert invoice.due_date == date(2025, 3, 31)
        assert invoice.description == "March retainer"

    def test_total_used_when_amount_due_absent(self):
        invoice = {k: v for k, v in XERO_INVOICE.items() if k != "AmountDue"}
        _, invoice_result = normalize_xero_invoice(invoice)

        assert invoice_result.value.total_amount == Decimal("1200.00")

    def test_bills_are_rejected(self):
        _, invoice_result = normalize_xero_invoice({**XERO_INVOICE, "Type": "ACCPAY"})

        assert not invoice_result.is_valid
        assert "invoice: ACCPAY is not a sales invoice" in invoice_result.errors

    @pytest.mark.parametrize("status", ["PAID", "VOIDED", "DELETED"])
    def test_closed_invoices_are_rejected(self, status):
        _, invoice_result = normalize_xero_invoice({**XERO_INVOICE, "Status": status})

        assert not invoice_result.is_valid
        assert f"invoice: status {status} has nothing to recover" in invoice_result.errors
