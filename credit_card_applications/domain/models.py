"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Optional


class Decision(str, Enum):
    """Outcome of a credit card application evaluation"""

    AUTO_ACCEPTED = "auto_accepted"
    AUTO_DECLINED = "auto_declined"
    REFERRED_TO_HUMAN = "referred_to_human"
    REFERRED_TO_HUMAN_FRAUD_RISK = "referred_to_human_fraud_risk"


class ValidationMode(str, Enum):
    """How thoroughly the validator checks a frequent flyer number"""

    QUICK = "quick"
    DETAILED = "detailed"


@dataclass(frozen=True)
class Application:
    """Credit card application submitted for evaluation"""

    frequent_flyer_number: Optional[str] = None
    gross_annual_income: Decimal = field(default=Decimal("0"))
    age: int = 0
    last_name: Optional[str] = None


@dataclass(frozen=True)
class ValidationResult:
    """Validity reported through the result-shaped lookup"""

    is_valid: bool


@dataclass(frozen=True)
class ReferenceLookup:
    """Reference-shaped lookup: the validator may hand back a rewritten number"""

    frequent_flyer_number: Optional[str]
    is_valid: bool


@dataclass(frozen=True)
class ReferenceEvaluation:
    """Decision plus the frequent flyer number as left by the validator"""

    decision: Decision
    frequent_flyer_number: Optional[str]
