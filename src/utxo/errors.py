"""
Validation Layer - Errors and Results
Validation failures are returned as data; exceptions are reserved for misuse
"""
from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class UTXOError(Exception):
    """Base class for errors raised by the UTXO layer"""


class UTXOPoolError(UTXOError):
    """Raised on invalid pool mutations (e.g. inserting an existing id)"""


class TransactionError(UTXOError):
    """Raised when a transaction cannot be built or signed as requested"""


class ValidationErrorKind(Enum):
    """Fixed set of reasons a transaction can be rejected"""
    UTXO_NOT_FOUND = "UTXO_NOT_FOUND"
    DOUBLE_SPENDING = "DOUBLE_SPENDING"
    NEGATIVE_AMOUNT = "NEGATIVE_AMOUNT"
    INVALID_SIGNATURE = "INVALID_SIGNATURE"
    AMOUNT_MISMATCH = "AMOUNT_MISMATCH"


@dataclass(frozen=True)
class ValidationError:
    kind: ValidationErrorKind
    message: str


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one transaction; valid iff errors is empty"""
    valid: bool
    errors: Tuple[ValidationError, ...] = ()

    @property
    def kinds(self) -> Tuple[ValidationErrorKind, ...]:
        return tuple(error.kind for error in self.errors)

    @classmethod
    def from_errors(cls, errors) -> 'ValidationResult':
        errors = tuple(errors)
        return cls(valid=not errors, errors=errors)


def create_validation_error(kind: ValidationErrorKind, message: str) -> ValidationError:
    """Build a ValidationError, rejecting kinds outside the fixed enumeration"""
    if not isinstance(kind, ValidationErrorKind):
        raise TypeError(f"kind must be a ValidationErrorKind, got {kind!r}")
    return ValidationError(kind=kind, message=message)
