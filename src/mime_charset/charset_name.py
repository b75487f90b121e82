"""Charset names as found in Media Type and HTTP header values

A charset name is either `Registered`, when it resolves to a charset in the
IANA registry, or `Unregistered`, holding the caller's text as given.
Parsing never fails: anything that is not a known alias becomes
`Unregistered`.
"""

import logging
import string
from functools import total_ordering
from typing import Tuple

from .charsets import Charset
from .registry import REGISTRY, UnknownCharsetError


logger = logging.getLogger(__name__)


@total_ordering
class CharsetName:
    """A charset name, registered or not

    Registered names sort before unregistered ones. Registered names sort
    by MIBenum, unregistered names by their case-folded text.
    """

    __slots__ = ()

    @classmethod
    def from_string(cls, s: str) -> 'CharsetName':
        """Create a charset name from a string; same as `parse`"""
        return parse(s)

    @staticmethod
    def canonical(s: str) -> str:
        """Get the canonical spelling of a charset name string"""
        return parse(s).to_string()

    @property
    def is_registered(self) -> bool:
        return False

    def to_string(self) -> str:
        raise NotImplementedError

    def _sort_key(self) -> Tuple[int, int, str]:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.to_string()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CharsetName):
            return NotImplemented
        return self._sort_key() < other._sort_key()


class Registered(CharsetName):
    """A charset name that resolved to a registered charset"""

    __slots__ = ('_charset',)

    def __init__(self, charset: Charset):
        if not isinstance(charset, Charset):
            raise TypeError(f"Registered needs a Charset member, got {charset!r}")
        self._charset = charset

    @classmethod
    def from_string(cls, s: str) -> 'Registered':
        """Resolve a string to a registered charset name

        Unlike `parse`, raises UnknownCharsetError for names that are not
        registered.
        """
        name = parse(s)
        if not isinstance(name, Registered):
            raise UnknownCharsetError(name.to_string())
        return name

    @property
    def charset(self) -> Charset:
        return self._charset

    @property
    def is_registered(self) -> bool:
        return True

    def to_string(self) -> str:
        return REGISTRY.canonical_name(self._charset)

    def _sort_key(self) -> Tuple[int, int, str]:
        return (0, self._charset.mib_enum, '')

    def __repr__(self) -> str:
        return f"Registered(Charset.{self._charset.name})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Registered):
            return False
        return self._charset is other._charset

    def __hash__(self) -> int:
        return hash((Registered, self._charset))


class Unregistered(CharsetName):
    """A charset name not found in the registry

    The raw text is kept exactly as given. Comparison is ASCII
    case-insensitive, as for any charset token.
    """

    __slots__ = ('_raw',)

    def __init__(self, raw: str):
        if not isinstance(raw, str):
            raise TypeError(f"Unregistered needs a str, got {raw!r}")
        self._raw = raw

    @property
    def raw(self) -> str:
        return self._raw

    def to_string(self) -> str:
        return self._raw

    def _folded(self) -> str:
        return REGISTRY.normalise(self._raw)

    def _sort_key(self) -> Tuple[int, int, str]:
        return (1, 0, self._folded())

    def __repr__(self) -> str:
        return f"Unregistered({self._raw!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Unregistered):
            return False
        return self._folded() == other._folded()

    def __hash__(self) -> int:
        return hash((Unregistered, self._folded()))


def parse(s: str) -> CharsetName:
    """Parse a charset name

    Leading and trailing ASCII whitespace is dropped. The rest is looked up
    case-insensitively among the registered aliases; if nothing matches,
    the trimmed text is kept as an unregistered name in its original case.
    """
    trimmed = s.strip(string.whitespace)
    charset = REGISTRY.lookup(REGISTRY.normalise(trimmed))
    if charset is None:
        logger.debug(f"Charset name '{trimmed}' is not registered")
        return Unregistered(trimmed)
    return Registered(charset)


def format(name: CharsetName) -> str:
    """Get the text form of a charset name

    Registered names give their canonical spelling; unregistered names give
    back the text they were parsed from.
    """
    if isinstance(name, Registered):
        return REGISTRY.canonical_name(name.charset)
    elif isinstance(name, Unregistered):
        return name.raw
    raise TypeError(f"Not a charset name: {name!r}")


def equals(a: CharsetName, b: CharsetName) -> bool:
    """Check if two charset names denote the same charset

    Registered names are equal when they resolve to the same charset,
    unregistered names when their text matches ignoring ASCII case. A
    registered name never equals an unregistered one.
    """
    if isinstance(a, Registered) and isinstance(b, Registered):
        return a.charset is b.charset
    elif isinstance(a, Unregistered) and isinstance(b, Unregistered):
        return REGISTRY.normalise(a.raw) == REGISTRY.normalise(b.raw)
    return False
