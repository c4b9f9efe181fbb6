"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidArgumentError(DomainException, ValueError):
    """Amount, rate or installment table is negative, NaN or otherwise unusable"""

    pass
