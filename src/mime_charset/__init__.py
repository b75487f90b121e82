"""MIME Charset - IANA charset names for Media Types and HTTP headers

This package parses charset names into registered or unregistered values,
formats them back in canonical spelling, and compares them across aliases.
"""

from .charsets import Charset
from .registry import (
    CharsetRegistry,
    REGISTRY,
    CharsetNameError,
    UnknownCharsetError,
)
from .charset_name import (
    CharsetName,
    Registered,
    Unregistered,
    parse,
    format,
    equals,
)

__version__ = "0.1.0"

__all__ = [
    "Charset",
    "CharsetRegistry",
    "REGISTRY",
    "CharsetNameError",
    "UnknownCharsetError",
    "CharsetName",
    "Registered",
    "Unregistered",
    "parse",
    "format",
    "equals",
]
