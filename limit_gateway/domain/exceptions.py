"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidLimitError(DomainException):
    """Daily limit is zero or negative, so usage cannot be computed"""

    pass


class DataProviderError(DomainException):
    """Spending data provider returned an error or is unavailable"""

    pass


class InvalidTransactionAmountError(DomainException):
    """Transaction amount is zero or negative"""

    pass
