"""Pytest fixtures for testing"""

from decimal import Decimal
from unittest.mock import DEFAULT, Mock, PropertyMock

import pytest

from credit_card_applications.config import Settings
from credit_card_applications.domain.evaluator import CreditCardApplicationEvaluator
from credit_card_applications.domain.events import LookupPerformedEvent
from credit_card_applications.domain.models import Application, ReferenceLookup, ValidationMode, ValidationResult
from credit_card_applications.domain.validator import FrequentFlyerValidator


@pytest.fixture
def validator() -> Mock:
    """
    Validator double that reports every number valid under a "Valid" licence.

    Each lookup fires lookup_performed like a real service would. Override
    is_valid.return_value to change the answer; assigning side_effect
    replaces the announcement.
    """
    validator = Mock(spec=FrequentFlyerValidator)
    validator.lookup_performed = LookupPerformedEvent()
    validator.service_information.licence.licence_key = "Valid"

    def announce(*args, **kwargs):
        validator.lookup_performed.notify()
        return DEFAULT

    def announce_reference(frequent_flyer_number):
        validator.lookup_performed.notify()
        return ReferenceLookup(frequent_flyer_number=frequent_flyer_number, is_valid=True)

    validator.is_valid.side_effect = announce
    validator.is_valid.return_value = True
    validator.is_valid_with_result.side_effect = announce
    validator.is_valid_with_result.return_value = ValidationResult(is_valid=True)
    validator.is_valid_by_reference.side_effect = announce_reference
    return validator


@pytest.fixture
def validation_mode(validator: Mock) -> PropertyMock:
    """Track writes to validator.validation_mode"""
    mode = PropertyMock(return_value=ValidationMode.QUICK)
    type(validator).validation_mode = mode
    return mode


@pytest.fixture
def licence_key(validator: Mock) -> PropertyMock:
    """Track reads of validator.service_information.licence.licence_key"""
    key = PropertyMock(return_value="Valid")
    type(validator.service_information.licence).licence_key = key
    return key


@pytest.fixture
def settings() -> Settings:
    """Settings with library defaults, independent of the environment"""
    return Settings(_env_file=None)


@pytest.fixture
def evaluator(validator: Mock, settings: Settings) -> CreditCardApplicationEvaluator:
    return CreditCardApplicationEvaluator(validator, settings=settings)


@pytest.fixture
def low_income_application() -> Application:
    """Applicant who is auto-declined once the number checks out"""
    return Application(
        frequent_flyer_number="test",
        gross_annual_income=Decimal("19999"),
        age=25,
        last_name="Jones",
    )
