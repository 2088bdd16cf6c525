"""Domain-specific exceptions"""

from typing import List


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ConfigurationError(DomainException):
    """Statutory configuration is missing or nonsensical"""

    pass


class RecordValidationError(DomainException):
    """Imported claim data could not be normalised into typed records"""

    def __init__(self, errors: List[str]):
        self.errors = errors
        super().__init__("; ".join(errors))
