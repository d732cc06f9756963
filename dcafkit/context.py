"""DCAF context holding configuration, transactions and keys."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable, List, Optional

from dcafkit.key import KeyStore

DEFAULT_TIMEOUT_MS = 90000
"""Default time in milliseconds until a transaction is considered failed."""


class ContextOption(Enum):
    """Options that can be changed on a context."""

    TIMEOUT = auto()


@dataclass
class Context:
    """State shared by all DCAF operations of one endpoint."""

    am_address: Any = None
    am_uri: Optional[str] = None
    app: Any = None
    flags: int = 0
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    """Transaction timeout in milliseconds; 0 means no timeout."""
    transactions: List[Any] = field(default_factory=list)
    keystore: KeyStore = field(default_factory=KeyStore)
    get_ticket: Optional[Callable[..., Any]] = None

    def set_option(self, option: ContextOption, value: Any) -> None:
        """Set ``option`` to ``value``; unknown options raise ValueError."""
        if not isinstance(option, ContextOption):
            raise ValueError(f"unknown context option {option!r}")
        if value is None:
            raise ValueError(f"option {option.name} requires a value")
        if option is ContextOption.TIMEOUT:
            timeout = int(value)
            if timeout < 0:
                raise ValueError("timeout must not be negative")
            self.timeout_ms = timeout