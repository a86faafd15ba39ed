"""
Centralised application exceptions
"""
from abc import ABC
from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(Enum):
    """Standard error codes"""
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Not found errors
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    ORDER_NOT_FOUND = "ORDER_NOT_FOUND"

    # Infrastructure errors
    EVENT_SYSTEM_UNAVAILABLE = "EVENT_SYSTEM_UNAVAILABLE"


class BaseApplicationException(Exception, ABC):
    """Base exception for the application"""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 400
    ):
        self.message = message
        self.error_code = error_code.value
        self.details = details or {}
        self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the exception into an API response body"""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "status_code": self.status_code
        }


class NotFoundException(BaseApplicationException):
    """Entity not found"""

    def __init__(
        self,
        entity_type: str,
        entity_id: Any = None,
        error_code: ErrorCode = ErrorCode.ENTITY_NOT_FOUND,
        details: Optional[Dict[str, Any]] = None
    ):
        if entity_id is not None:
            message = f"{entity_type} with id '{entity_id}' not found"
        else:
            message = f"{entity_type} not found"

        error_details = details or {}
        if entity_id is not None:
            error_details["entity_id"] = entity_id
        error_details["entity_type"] = entity_type

        super().__init__(message, error_code, error_details, 404)


class InfrastructureException(BaseApplicationException):
    """Infrastructure errors"""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.EVENT_SYSTEM_UNAVAILABLE,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        super().__init__(message, error_code, details, status_code)


class ExceptionFactory:
    """Factory for frequently raised exceptions"""

    @staticmethod
    def order_not_found(order_id: Any) -> NotFoundException:
        return NotFoundException("Order", order_id, ErrorCode.ORDER_NOT_FOUND)

    @staticmethod
    def event_system_unavailable(reason: str) -> InfrastructureException:
        return InfrastructureException(
            f"Event system unavailable: {reason}",
            ErrorCode.EVENT_SYSTEM_UNAVAILABLE,
            status_code=503,
        )
