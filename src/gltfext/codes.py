"""Diagnostic code constants for gltfext.

These constants prevent stringly-typed result codes and ensure
client code uses the correct registration and issue codes.
"""

from enum import Enum


class RegistrationCode(str, Enum):
    """Outcome of a registry mutation."""

    OK = "OK"
    INVALID_NAME = "INVALID_NAME"
    DUPLICATE_KEY = "DUPLICATE_KEY"
    NOT_REGISTERED = "NOT_REGISTERED"
    REGISTRY_FROZEN = "REGISTRY_FROZEN"


class IssueCode(str, Enum):
    """Issues recorded while intercepting unrecognized fields."""

    # Errors (value stored as raw node)
    CONVERSION_FAILED = "CONVERSION_FAILED"

    # Warnings (non-blocking)
    UNREGISTERED_EXTENSION = "UNREGISTERED_EXTENSION"
