"""Normalisation of loosely-typed imported records into Party / InvoiceRecord

Form posts, CSV rows and accounting exports arrive with missing or badly
typed fields. Everything passes through here before it reaches a
calculator: the result is either a fully typed record or a list of errors.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, Generic, List, Mapping, Optional, Tuple, TypeVar

from claimcraft_engine.domain.models import InvoiceRecord, Party, PartyType, SolvencyStatus
from claimcraft_engine.domain.parties import infer_party_type
from claimcraft_engine.utils.date_utils import is_past_date, parse_date
from claimcraft_engine.utils.money import round_money, to_decimal
from claimcraft_engine.utils.postcodes import county_from_postcode, format_uk_postcode, validate_uk_postcode

T = TypeVar("T")

_PARTY_TYPE_ALIASES = {
    "individual": PartyType.INDIVIDUAL,
    "consumer": PartyType.INDIVIDUAL,
    "person": PartyType.INDIVIDUAL,
    "sole trader": PartyType.SOLE_TRADER,
    "sole_trader": PartyType.SOLE_TRADER,
    "soletrader": PartyType.SOLE_TRADER,
    "business": PartyType.BUSINESS,
    "company": PartyType.BUSINESS,
    "limited company": PartyType.BUSINESS,
}

# Xero statuses with nothing left to recover
_CLOSED_XERO_STATUSES = {"PAID", "VOIDED", "DELETED"}


@dataclass
class NormalizationResult(Generic[T]):
    value: Optional[T] = None
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return self.value is not None and not self.errors


def _pick(raw: Mapping[str, Any], *keys: str) -> Any:
    """First present, non-blank value among snake_case / camelCase spellings"""
    for key in keys:
        value = raw.get(key)
        if value is None:
            continue
        if isinstance(value, str) and not value.strip():
            continue
        return value
    return None


def _text(value: Any) -> str:
    return str(value).strip() if value is not None else ""


def parse_party_type(value: Any) -> Optional[PartyType]:
    if isinstance(value, PartyType):
        return value
    if not isinstance(value, str):
        return None
    return _PARTY_TYPE_ALIASES.get(value.strip().lower())


def parse_solvency_status(value: Any) -> Optional[SolvencyStatus]:
    if isinstance(value, SolvencyStatus):
        return value
    if not isinstance(value, str):
        return None
    for status in SolvencyStatus:
        if status.value.lower() == value.strip().lower():
            return status
    return None


def normalize_party(raw: Mapping[str, Any], role: str = "party") -> NormalizationResult[Party]:
    """
    Build a Party from a raw mapping.

    Errors: an explicit but unrecognised party type.
    Warnings: missing name, type inferred from name, invalid postcode,
    unrecognised solvency status.
    """
    result: NormalizationResult[Party] = NormalizationResult()

    name = _text(_pick(raw, "name", "Name"))
    if not name:
        result.warnings.append(f"{role}: name is missing")

    company_number = _text(_pick(raw, "company_number", "companyNumber")) or None

    raw_type = _pick(raw, "type", "party_type", "partyType")
    if raw_type is None:
        party_type = infer_party_type(name, company_number)
        result.warnings.append(f"{role}: party type not supplied, inferred as {party_type.value}")
    else:
        party_type = parse_party_type(raw_type)
        if party_type is None:
            result.errors.append(f"{role}: unknown party type {raw_type!r}")

    raw_status = _pick(raw, "solvency_status", "solvencyStatus")
    solvency = SolvencyStatus.UNKNOWN
    if raw_status is not None:
        parsed_status = parse_solvency_status(raw_status)
        if parsed_status is None:
            result.warnings.append(f"{role}: unknown solvency status {raw_status!r}, treated as Unknown")
        else:
            solvency = parsed_status

    postcode = _text(_pick(raw, "postcode", "postal_code", "PostalCode"))
    county = _text(_pick(raw, "county", "region", "Region"))
    if postcode:
        if validate_uk_postcode(postcode):
            postcode = format_uk_postcode(postcode)
            county = county or county_from_postcode(postcode)
        else:
            result.warnings.append(f"{role}: {postcode!r} is not a valid UK postcode")

    if result.errors:
        return result

    result.value = Party(
        type=party_type,
        name=name,
        address=_text(_pick(raw, "address", "address_line_1", "AddressLine1")),
        city=_text(_pick(raw, "city", "City")),
        county=county,
        postcode=postcode,
        phone=_text(_pick(raw, "phone")) or None,
        email=_text(_pick(raw, "email", "EmailAddress")) or None,
        company_number=company_number,
        solvency_status=solvency,
    )
    return result


def normalize_invoice(raw: Mapping[str, Any], today: date | None = None) -> NormalizationResult[InvoiceRecord]:
    """
    Build an InvoiceRecord from a raw mapping.

    Errors: missing/invalid issue date, missing/non-positive amount, or an
    amount that is not numeric or beyond MAX_AMOUNT.
    Warnings: missing invoice number, issue date after today, unusable due
    date, due date before the issue date. An unusable due date is dropped so
    the default payment terms apply.
    """
    result: NormalizationResult[InvoiceRecord] = NormalizationResult()

    raw_amount = _pick(raw, "total_amount", "totalAmount", "amount")
    amount = to_decimal(raw_amount)
    if raw_amount is None:
        result.errors.append("invoice: amount is missing")
    elif amount is None:
        result.errors.append(f"invoice: amount {raw_amount!r} is not a usable amount")
    elif amount <= 0:
        result.errors.append("invoice: amount must be greater than zero")

    raw_issued = _pick(raw, "date_issued", "dateIssued", "invoice_date")
    date_issued = parse_date(raw_issued)
    if raw_issued is None:
        result.errors.append("invoice: issue date is missing")
    elif date_issued is None:
        result.errors.append(f"invoice: issue date {raw_issued!r} is not a valid date")
    elif not is_past_date(date_issued, today):
        result.warnings.append(f"invoice: issue date {date_issued.isoformat()} is in the future")

    raw_due = _pick(raw, "due_date", "dueDate")
    due_date = parse_date(raw_due)
    if raw_due is not None and due_date is None:
        result.warnings.append(f"invoice: due date {raw_due!r} is not a valid date, default terms apply")
    if due_date is not None and date_issued is not None and due_date < date_issued:
        result.warnings.append("invoice: due date is before the issue date, default terms apply")
        due_date = None

    invoice_number = _text(_pick(raw, "invoice_number", "invoiceNumber"))
    if not invoice_number:
        result.warnings.append("invoice: invoice number is missing")

    if result.errors:
        return result

    result.value = InvoiceRecord(
        invoice_number=invoice_number,
        total_amount=round_money(amount),
        date_issued=date_issued,
        due_date=due_date,
        currency=(_text(_pick(raw, "currency")) or "GBP").upper(),
        description=_text(_pick(raw, "description")),
    )
    return result


def _xero_address(contact: Mapping[str, Any]) -> Dict[str, Any]:
    addresses = contact.get("Addresses") or []
    by_type = {a.get("AddressType"): a for a in addresses if isinstance(a, Mapping)}
    address = by_type.get("STREET") or by_type.get("POBOX") or {}
    lines = [address.get("AddressLine1"), address.get("AddressLine2")]
    return {
        "address": ", ".join(line.strip() for line in lines if line and line.strip()),
        "city": address.get("City"),
        "region": address.get("Region"),
        "postcode": address.get("PostalCode"),
    }


def normalize_xero_invoice(
    invoice: Mapping[str, Any],
    contact: Optional[Mapping[str, Any]] = None,
    today: date | None = None,
) -> Tuple[NormalizationResult[Party], NormalizationResult[InvoiceRecord]]:
    """
    Map a Xero ACCREC invoice (and optionally its full contact) to a
    defendant Party and an InvoiceRecord.

    The outstanding AmountDue is the principal, falling back to Total.
    """
    contact = {**(invoice.get("Contact") or {}), **(contact or {})}
    phones = contact.get("Phones") or []
    phone = next((p.get("PhoneNumber") for p in phones if isinstance(p, Mapping) and p.get("PhoneNumber")), None)

    party_result = normalize_party(
        {
            "name": contact.get("Name"),
            "email": contact.get("EmailAddress"),
            "phone": phone,
            "company_number": contact.get("CompanyNumber"),
            **_xero_address(contact),
        },
        role="defendant",
    )

    amount_due = invoice.get("AmountDue")
    invoice_result = normalize_invoice(
        {
            "invoice_number": invoice.get("InvoiceNumber"),
            "total_amount": amount_due if amount_due is not None else invoice.get("Total"),
            "date_issued": invoice.get("Date"),
            "due_date": invoice.get("DueDate"),
            "currency": invoice.get("CurrencyCode"),
            "description": invoice.get("Reference"),
        },
        today=today,
    )

    invoice_type = invoice.get("Type")
    if invoice_type and invoice_type != "ACCREC":
        invoice_result.errors.append(f"invoice: {invoice_type} is not a sales invoice")
        invoice_result.value = None

    status = invoice.get("Status")
    if status in _CLOSED_XERO_STATUSES:
        invoice_result.errors.append(f"invoice: status {status} has nothing to recover")
        invoice_result.value = None

    return party_result, invoice_result
