"""Frequent flyer validation service contract (external collaborator)"""

from abc import ABC, abstractmethod
from typing import Optional

from credit_card_applications.domain.events import LookupPerformedEvent
from credit_card_applications.domain.models import (
    ReferenceLookup,
    ValidationMode,
    ValidationResult,
)


class LicenceData(ABC):
    """Licence held by the validation service"""

    @property
    @abstractmethod
    def licence_key(self) -> str:
        pass


class ServiceInformation(ABC):
    """Metadata about the validation service"""

    @property
    @abstractmethod
    def licence(self) -> LicenceData:
        pass


class FrequentFlyerValidator(ABC):
    """
    Checks frequent flyer numbers on behalf of the evaluator.

    Implementations live outside this package; the evaluator only consumes
    this interface. Each of the three validity calls must fire
    lookup_performed exactly once per invocation.

    validation_mode is shared mutable state: CreditCardApplicationEvaluator
    writes it before every full-pipeline lookup, so one validator instance
    shared between threads needs external synchronization.
    """

    @abstractmethod
    def is_valid(self, frequent_flyer_number: Optional[str]) -> bool:
        """Return whether the number is acceptable."""
        pass

    @abstractmethod
    def is_valid_with_result(self, frequent_flyer_number: Optional[str]) -> ValidationResult:
        """Same check, validity carried in a result object."""
        pass

    @abstractmethod
    def is_valid_by_reference(self, frequent_flyer_number: Optional[str]) -> ReferenceLookup:
        """
        Same check, allowed to rewrite the number.

        Returns the number as the service wants the caller to keep it,
        together with the validity flag.
        """
        pass

    @property
    @abstractmethod
    def validation_mode(self) -> ValidationMode:
        pass

    @validation_mode.setter
    @abstractmethod
    def validation_mode(self, value: ValidationMode) -> None:
        pass

    @property
    @abstractmethod
    def service_information(self) -> ServiceInformation:
        pass

    @property
    @abstractmethod
    def lookup_performed(self) -> LookupPerformedEvent:
        pass
