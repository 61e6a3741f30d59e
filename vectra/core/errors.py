"""
Library exceptions.

Every error vectra raises derives from VectraError and also from the
builtin exception callers would expect for the same situation.
"""

from typing import Any, Dict, Optional


class VectraError(Exception):
    """Base exception for vectra errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Error payload suitable for structured logging"""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class InvalidExponentError(VectraError, ValueError):
    """Raised when a polynomial exponent is negative"""

    def __init__(self, exponent: int):
        super().__init__(
            message=f"Exponent must be non-negative, got {exponent}",
            details={"exponent": exponent}
        )


class CoefficientTypeError(VectraError, TypeError):
    """Raised when a value cannot be used as a coefficient of the requested kind"""

    def __init__(self, value: Any, expected: str):
        super().__init__(
            message=f"Cannot use {type(value).__name__} value {value!r} as {expected}",
            details={"type": type(value).__name__, "expected": expected}
        )


class ZeroVectorError(VectraError, ZeroDivisionError):
    """Raised when an operation needs a direction but the vector has none"""

    def __init__(self, operation: str):
        super().__init__(
            message=f"Cannot {operation} a zero vector",
            details={"operation": operation}
        )


class UnitError(VectraError, ValueError):
    """Raised when unit dimensions cannot be combined"""

    def __init__(self, message: str, **details: Any):
        super().__init__(message=message, details=details)
