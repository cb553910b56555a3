"""Prometheus metrics for decision outcomes and validator health"""

from prometheus_client import Counter

from credit_card_applications.domain.models import Decision

# Decision metrics
decision_counter = Counter(
    "credit_card_decision_total",
    "Total credit card application decisions made",
    ["variant", "outcome"],  # evaluate | with_result | with_reference
)

fraud_referral_counter = Counter(
    "credit_card_fraud_referrals_total",
    "Applications referred to a human for fraud risk",
)

# Validator metrics
validator_failure_counter = Counter(
    "credit_card_validator_failures_total",
    "Frequent flyer lookups that raised and were contained",
)


def record_decision(variant: str, decision: Decision) -> None:
    """Record decision metrics for monitoring outcome distribution"""
    decision_counter.labels(variant=variant, outcome=decision.value).inc()

    if decision is Decision.REFERRED_TO_HUMAN_FRAUD_RISK:
        fraud_referral_counter.inc()
