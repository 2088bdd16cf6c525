"""Domain models - pure Python dataclasses representing claims, results and deadlines"""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Optional


class PartyType(str, Enum):
    INDIVIDUAL = "Individual"
    SOLE_TRADER = "Sole Trader"
    BUSINESS = "Business"


class SolvencyStatus(str, Enum):
    UNKNOWN = "Unknown"
    ACTIVE = "Active"
    INSOLVENT = "Insolvent"
    DISSOLVED = "Dissolved"


class DeadlinePriority(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


class DeadlineStatus(str, Enum):
    PENDING = "Pending"
    COMPLETED = "Completed"
    SNOOZED = "Snoozed"


class DeadlineType(str, Enum):
    LBA_RESPONSE = "lba_response"
    ACKNOWLEDGMENT_OF_SERVICE = "acknowledgment_of_service"
    DEFENCE = "defence"
    DEFAULT_JUDGMENT = "default_judgment"
    ENFORCEMENT = "enforcement"
    CUSTOM = "custom"


class LifecycleEvent(str, Enum):
    """Procedural events that start a CPR clock"""

    LBA_SENT = "lba_sent"
    CLAIM_SERVED = "claim_served"
    ACKNOWLEDGED = "acknowledged"
    JUDGMENT_ENTERED = "judgment_entered"


@dataclass(frozen=True)
class Party:
    """Claimant or defendant"""

    type: PartyType
    name: str
    address: str = ""
    city: str = ""
    county: str = ""
    postcode: str = ""
    phone: Optional[str] = None
    email: Optional[str] = None
    company_number: Optional[str] = None
    solvency_status: SolvencyStatus = SolvencyStatus.UNKNOWN


@dataclass(frozen=True)
class InvoiceRecord:
    """The unpaid invoice a claim is founded on"""

    invoice_number: str
    total_amount: Decimal  # principal
    date_issued: date
    due_date: Optional[date] = None
    currency: str = "GBP"
    description: str = ""


@dataclass(frozen=True)
class Claim:
    claimant: Party
    defendant: Party
    invoice: InvoiceRecord
    id: str = ""


@dataclass(frozen=True)
class InterestResult:
    """Output of the interest calculator"""

    days_overdue: int
    daily_rate: Decimal  # 4dp
    total_interest: Decimal  # 2dp
    annual_rate_percent: Decimal = Decimal("0")
    is_b2b: bool = False


@dataclass(frozen=True)
class CheckResult:
    passed: bool
    message: str


@dataclass(frozen=True)
class AssessmentResult:
    """Point-in-time viability snapshot"""

    is_viable: bool
    limitation_check: CheckResult
    value_check: CheckResult
    solvency_check: CheckResult
    recommendation: str


@dataclass(frozen=True)
class ClaimFinancials:
    interest: InterestResult
    compensation: Decimal
    court_fee: Decimal
    total_debt: Decimal  # principal + interest + compensation
    grand_total: Decimal  # total_debt + court fee


@dataclass(frozen=True)
class ClaimCalculation:
    financials: ClaimFinancials
    assessment: AssessmentResult


@dataclass(frozen=True)
class Deadline:
    """A dated obligation attached to exactly one claim"""

    id: str
    claim_id: str
    type: DeadlineType
    title: str
    due_date: date
    priority: DeadlinePriority = DeadlinePriority.MEDIUM
    status: DeadlineStatus = DeadlineStatus.PENDING
    description: str = ""
    legal_reference: Optional[str] = None
    snoozed_until: Optional[date] = None
    completed_at: Optional[datetime] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
