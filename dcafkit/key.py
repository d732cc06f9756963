"""Key material and a store that maps peers to keys."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Hashable, Iterator, List, Optional, Tuple

from dcafkit.prng import prng

MAX_KID_SIZE = 32
"""Maximum length of a key identifier in bytes."""

MAX_KEY_SIZE = 32
"""Maximum length of key data in bytes."""

KEY_STATIC = 0x0001
KEY_HAS_DATA = 0x0002


class KeyType(IntEnum):
    """Kinds of keys."""

    NONE = 0
    AES_128 = 1
    AES_256 = 2
    HS256 = 3
    KID = 4


_RANDOM_LENGTHS = {
    KeyType.AES_128: 16,
    KeyType.AES_256: 32,
    KeyType.HS256: 32,
    KeyType.KID: MAX_KID_SIZE,
}


class KeyDataError(ValueError):
    """Raised when key data or a key identifier cannot be stored."""


@dataclass
class Key:
    """Key data together with the identifier known by the authorization manager."""

    type: KeyType = KeyType.NONE
    kid: bytes = b""
    flags: int = 0
    data: bytes = b""

    def __post_init__(self) -> None:
        self.type = KeyType(self.type)
        self.set_kid(self.kid)
        self.set_data(self.data)

    @property
    def length(self) -> int:
        """Length of the key data in bytes."""
        return len(self.data)

    def randomize(self) -> None:
        """Fill the key with random data of the length its type requires."""
        length = _RANDOM_LENGTHS.get(self.type, 0)
        if not length:
            self.data = b""
            raise KeyDataError(f"cannot create random data for key type {self.type.name}")
        self.data = prng(length)

    def set_data(self, data: bytes) -> None:
        """Replace the key data."""
        data = bytes(data)
        if len(data) > MAX_KEY_SIZE:
            raise KeyDataError(
                f"key too long ({len(data)} bytes, maximum is {MAX_KEY_SIZE})"
            )
        self.data = data

    def set_kid(self, kid: bytes) -> None:
        """Replace the key identifier."""
        kid = bytes(kid)
        if len(kid) > MAX_KID_SIZE:
            raise KeyDataError(
                f"kid too long ({len(kid)} bytes, maximum is {MAX_KID_SIZE})"
            )
        self.kid = kid

    def kid_matches(self, kid: Optional[bytes]) -> bool:
        """Return True if ``kid`` is None or equals this key's identifier."""
        return kid is None or self.kid == bytes(kid)


@dataclass
class KeyStore:
    """Keys indexed by peer address; newer entries take precedence."""

    _entries: List[Tuple[Any, Key]] = field(default_factory=list)

    def add(self, peer: Optional[Hashable], key: Key) -> None:
        """Store ``key`` for ``peer``; a peer of None matches by kid only."""
        self._entries.insert(0, (peer, key))

    def find(self, peer: Optional[Hashable] = None,
             kid: Optional[bytes] = None) -> Optional[Key]:
        """Return the first key that matches ``peer`` and ``kid``, or None."""
        for stored_peer, key in self._entries:
            if peer is None:
                if key.kid_matches(kid):
                    return key
            elif stored_peer is not None and stored_peer == peer:
                if key.kid_matches(kid):
                    return key
        return None

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Key]:
        return (key for _, key in self._entries)