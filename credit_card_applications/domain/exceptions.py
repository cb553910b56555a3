"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ValidatorRequiredError(DomainException, ValueError):
    """Evaluator was constructed without a frequent flyer validator"""

    def __init__(self, argument_name: str = "validator"):
        super().__init__(f"{argument_name} is required")
        self.argument_name = argument_name


class FrequentFlyerValidationError(DomainException):
    """Frequent flyer validation service failed or is unavailable"""

    pass
