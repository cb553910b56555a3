"""Credit card application evaluator - rule pipeline and lookup counting"""

from typing import Callable, Optional

from credit_card_applications.config import Settings, settings as default_settings
from credit_card_applications.domain.exceptions import ValidatorRequiredError
from credit_card_applications.domain.fraud import FraudLookup
from credit_card_applications.domain.models import (
    Application,
    Decision,
    ReferenceEvaluation,
    ValidationMode,
)
from credit_card_applications.domain.validator import FrequentFlyerValidator
from credit_card_applications.infrastructure.observability.logging import (
    log_decision,
    log_validator_failure,
)
from credit_card_applications.infrastructure.observability.metrics import (
    record_decision,
    validator_failure_counter,
)

ValidatorErrorHook = Callable[[Application, Exception], None]


class CreditCardApplicationEvaluator:
    """
    Turn a credit card application into a Decision.

    Three entry points exist and they do not apply the same rules:

    - evaluate(): fraud lookup, high income, licence expiry, validation mode,
      contained validity lookup, then the age and income rules.
    - evaluate_with_result() / evaluate_with_reference(): high income, an
      uncontained validity lookup, then the age and income rules. No fraud
      lookup, no licence check, no validation mode write.

    The evaluator subscribes to validator.lookup_performed when constructed
    and never unsubscribes, so lookup_count tracks every lookup the validator
    announces for as long as both objects live, including lookups triggered
    by other evaluators sharing the same validator.
    """

    def __init__(
        self,
        validator: FrequentFlyerValidator,
        fraud_lookup: Optional[FraudLookup] = None,
        *,
        settings: Optional[Settings] = None,
        on_validator_error: Optional[ValidatorErrorHook] = None,
    ):
        if validator is None:
            raise ValidatorRequiredError("validator")

        self._validator = validator
        self._fraud_lookup = fraud_lookup
        self.settings = settings or default_settings
        self._on_validator_error = on_validator_error or log_validator_failure
        self._lookup_count = 0

        validator.lookup_performed.subscribe(self._on_lookup_performed)

    @property
    def lookup_count(self) -> int:
        """Validity lookups announced by the validator since construction"""
        return self._lookup_count

    def _on_lookup_performed(self) -> None:
        self._lookup_count += 1

    def evaluate(self, application: Application) -> Decision:
        """
        Run the full rule pipeline.

        Side effect: sets validator.validation_mode (DETAILED from
        detailed_lookup_min_age upwards, QUICK below) immediately before the
        validity lookup. Any exception raised by the lookup is handed to the
        on_validator_error hook and the application is referred to a human.
        """
        decision = self._evaluate(application)
        self._record("evaluate", decision, application)
        return decision

    def evaluate_with_result(self, application: Application) -> Decision:
        """Reduced pipeline using the result-shaped validity lookup. Errors propagate."""
        if application.gross_annual_income >= self.settings.high_income_threshold:
            decision = Decision.AUTO_ACCEPTED
        else:
            result = self._validator.is_valid_with_result(application.frequent_flyer_number)
            decision = self._decide_after_lookup(application, result.is_valid)

        self._record("with_result", decision, application)
        return decision

    def evaluate_with_reference(
        self, application: Application, frequent_flyer_number: Optional[str]
    ) -> ReferenceEvaluation:
        """
        Reduced pipeline using the reference-shaped validity lookup.

        frequent_flyer_number is what gets validated, not the number on the
        application. The validator may rewrite it; the returned
        ReferenceEvaluation carries the number as the validator left it, or
        the caller's number unchanged when no lookup happened. Errors
        propagate.
        """
        if application.gross_annual_income >= self.settings.high_income_threshold:
            evaluation = ReferenceEvaluation(Decision.AUTO_ACCEPTED, frequent_flyer_number)
        else:
            lookup = self._validator.is_valid_by_reference(frequent_flyer_number)
            evaluation = ReferenceEvaluation(
                decision=self._decide_after_lookup(application, lookup.is_valid),
                frequent_flyer_number=lookup.frequent_flyer_number,
            )

        self._record("with_reference", evaluation.decision, application)
        return evaluation

    def _evaluate(self, application: Application) -> Decision:
        if self._fraud_lookup is not None and self._fraud_lookup.is_fraud_risk(application):
            return Decision.REFERRED_TO_HUMAN_FRAUD_RISK

        if application.gross_annual_income >= self.settings.high_income_threshold:
            return Decision.AUTO_ACCEPTED

        licence_key = self._validator.service_information.licence.licence_key
        if licence_key == self.settings.expired_licence_key:
            return Decision.REFERRED_TO_HUMAN

        self._validator.validation_mode = (
            ValidationMode.DETAILED
            if application.age >= self.settings.detailed_lookup_min_age
            else ValidationMode.QUICK
        )

        try:
            is_valid = self._validator.is_valid(application.frequent_flyer_number)
        except Exception as e:
            validator_failure_counter.inc()
            self._on_validator_error(application, e)
            return Decision.REFERRED_TO_HUMAN

        return self._decide_after_lookup(application, is_valid)

    def _decide_after_lookup(self, application: Application, is_valid: bool) -> Decision:
        """Rules shared by every pipeline once the number has been checked"""
        if not is_valid:
            return Decision.REFERRED_TO_HUMAN

        if application.age <= self.settings.auto_referral_max_age:
            return Decision.REFERRED_TO_HUMAN

        if application.gross_annual_income < self.settings.low_income_threshold:
            return Decision.AUTO_DECLINED

        return Decision.REFERRED_TO_HUMAN

    def _record(self, variant: str, decision: Decision, application: Application) -> None:
        record_decision(variant, decision)
        log_decision(variant, decision, application)
