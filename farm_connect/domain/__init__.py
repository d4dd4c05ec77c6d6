from .errors import (
    CredentialMissingError,
    FarmConnectError,
    InvalidFieldError,
    MediatorBusyError,
    RemoteCallError,
    ResponseParseError,
    SessionUnavailableError,
)
from .fields import FieldSpec, parse_number, validate_fields

__all__ = [
    "CredentialMissingError",
    "FarmConnectError",
    "FieldSpec",
    "InvalidFieldError",
    "MediatorBusyError",
    "RemoteCallError",
    "ResponseParseError",
    "SessionUnavailableError",
    "parse_number",
    "validate_fields",
]
