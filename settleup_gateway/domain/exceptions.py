"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidAmountError(DomainException):
    """Monetary value is not a valid currency amount"""

    pass


class InvalidDebtEdgeError(DomainException):
    """Debt edge is malformed (self-debt, non-positive amount)"""

    pass


class InvalidExpenseError(DomainException):
    """Expense data cannot be turned into debt edges"""

    pass


class GroupNotFoundError(DomainException):
    """No settlement has ever been stored for the group"""

    pass
