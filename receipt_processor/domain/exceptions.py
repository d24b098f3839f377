"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidReceiptError(DomainException):
    """Receipt payload is not valid JSON or has the wrong shape"""

    pass
