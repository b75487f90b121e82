"""Charset registry

Indexes every spelling of every registered charset so that a name can be
resolved to its `Charset` member with a single dict lookup.
"""

import logging
import string
from typing import Dict, Iterable, Iterator, Optional, Tuple

from .charsets import Charset


logger = logging.getLogger(__name__)

# only ASCII letters take part in case folding
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


class CharsetNameError(Exception):
    """Base exception for charset name errors"""
    pass


class UnknownCharsetError(CharsetNameError, KeyError):
    """Name does not resolve to a registered charset"""
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No registered charset matches '{name}'")

    def __str__(self) -> str:
        return self.args[0]


class CharsetRegistry:
    """Read-only index from charset aliases to registered charsets"""

    def __init__(self, charsets: Iterable[Charset] = Charset):
        self._index: Dict[str, Charset] = {}
        self._mib_index: Dict[int, Charset] = {}
        self._charsets: Tuple[Charset, ...] = tuple(charsets)
        for charset in self._charsets:
            self._register(charset)
        logger.debug(
            f"Indexed {len(self._index)} aliases for {len(self._charsets)} charsets"
        )

    def _register(self, charset: Charset) -> None:
        """Index all spellings of a charset; the first claim on an alias wins."""
        self._mib_index[charset.mib_enum] = charset
        for alias in (charset.canonical_name,) + charset.aliases:
            normname = self.normalise(alias)
            claimed = self._index.setdefault(normname, charset)
            if claimed is not charset:
                logger.warning(
                    f"Alias '{alias}' of {charset.name} already claimed by {claimed.name}"
                )

    @staticmethod
    def normalise(name: str) -> str:
        """Fold ASCII letters to lowercase; all other characters are kept."""
        return name.translate(_ASCII_LOWER)

    def lookup(self, normalised_alias: str) -> Optional[Charset]:
        """Get the charset claiming an already normalised alias, or None."""
        return self._index.get(normalised_alias)

    def get(self, name: str) -> Optional[Charset]:
        """Get the charset for a name in any case, or None."""
        return self.lookup(self.normalise(name))

    def __getitem__(self, name: str) -> Charset:
        """Get the charset for a name; raise UnknownCharsetError if not found."""
        charset = self.get(name)
        if charset is None:
            raise UnknownCharsetError(name)
        return charset

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None

    @staticmethod
    def canonical_name(charset: Charset) -> str:
        """Get the preferred display name of a charset"""
        return charset.canonical_name

    @staticmethod
    def aliases(charset: Charset) -> Tuple[str, ...]:
        """Get all spellings of a charset, canonical name first"""
        return (charset.canonical_name,) + charset.aliases

    def by_mib_enum(self, mib_enum: int) -> Optional[Charset]:
        """Get the charset with the given IANA MIBenum, or None."""
        return self._mib_index.get(mib_enum)

    def __iter__(self) -> Iterator[Charset]:
        """Iterate over registered charsets in registration order."""
        return iter(self._charsets)

    def __len__(self) -> int:
        return len(self._charsets)

    def __repr__(self) -> str:
        return f"CharsetRegistry({len(self._charsets)} charsets)"


REGISTRY = CharsetRegistry()
