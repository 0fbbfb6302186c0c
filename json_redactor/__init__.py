"""
JSON Redactor - Structure-preserving masking of sensitive JSON values

This package redacts values inside arbitrary JSON documents before they
reach logs or audit trails, while keeping the document valid JSON with
the same keys, key order and array lengths.

Architecture:
    - RedactorOptions: Immutable policy (names, conditional rules, modes)
    - JsonRedactor: Engine that parses, walks, masks and serializes
    - RedactionProfile: Abstract base class for reusable rule bundles
    - profiles/: Directory containing specific profile implementations

Example:
    from json_redactor import JsonRedactor, RedactorOptions

    redactor = JsonRedactor(RedactorOptions(redact_names=["ssn"]))
    redactor.redact('{"name": "Ann", "ssn": 123456789}')
    # '{"name":"Ann","ssn":"[REDACTED]"}'
"""

from .options import (
    DEFAULT_MASK,
    ComparisonMode,
    ConditionalRule,
    ContainerPolicy,
    Formatting,
    OnParseError,
    RedactorOptions,
)
from .base_profile import RedactionProfile
from .engine import JsonRedactor, RedactionResult, get_default_engine
from .config import load_options_from_env

__all__ = [
    "DEFAULT_MASK",
    "ComparisonMode",
    "ConditionalRule",
    "ContainerPolicy",
    "Formatting",
    "JsonRedactor",
    "OnParseError",
    "RedactionProfile",
    "RedactionResult",
    "RedactorOptions",
    "get_default_engine",
    "load_options_from_env",
]
