"""
Error taxonomy shared by the transport, the REST core and the resource modules
"""

from typing import Any, Dict, List, Optional


class StarkBankError(Exception):
    """Base class for every error raised by this package"""
    pass


class ValidationError(StarkBankError):
    """Raised when caller input is invalid or the API rejects it as invalid"""

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.errors = errors or []


class SchemaError(ValidationError):
    """Raised when a raw API record does not match the shape a maker expects"""

    def __init__(self, resource: str, key: str, message: str):
        super().__init__(f"{resource}: {message}")
        self.resource = resource
        self.key = key


class NotFound(StarkBankError):
    """Raised when the requested object does not exist"""
    pass


class AuthorizationError(StarkBankError):
    """Raised when the caller context is missing or rejected by the API"""
    pass


class TransportError(StarkBankError):
    """Raised for network failures, timeouts and server-side errors"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
