"""Fraud risk lookup - replaceable policy consulted before any other rule"""

from typing import Optional

from credit_card_applications.config import Settings, settings as default_settings
from credit_card_applications.domain.models import Application


class FraudLookup:
    """
    Decide whether an application should go to a human for fraud review.

    is_fraud_risk() is the public entry point used by the evaluator.
    Subclasses replace the policy by overriding check_application(); the
    reference policy flags a single watched last name.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or default_settings

    def is_fraud_risk(self, application: Application) -> bool:
        return self.check_application(application)

    def check_application(self, application: Application) -> bool:
        # Production lookups apply far richer rules than this
        return application.last_name == self.settings.fraud_watch_last_name
