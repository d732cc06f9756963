"""Store of outstanding DCAF requests, keyed by their CoAP token."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum, auto
from typing import Any, Callable, List, Optional, Tuple, Union
from urllib.parse import unquote_to_bytes

from dcafkit.constants import DEFAULT_TOKEN_SIZE
from dcafkit.context import Context
from dcafkit.debug import LogLevel, log

MAX_URI_PATH_SIZE = 64
"""Maximum number of bytes of URI path or query that can be split."""

TRANSACTION_NONBLOCK = 0x00
"""Return immediately after initiating a transaction."""

TRANSACTION_BLOCK = 0x01
"""Wait until the transaction has finished."""

OPTION_URI_PATH = 11
OPTION_URI_QUERY = 15

AUDIENCE_PREFIX = "coaps://"


class TransactionResult(IntEnum):
    """Outcome of starting a transaction."""

    OK = 0
    ERROR = 1
    NOT_SENT = 2


class TransactionState(Enum):
    """Progress of a transaction."""

    IDLE = auto()
    AUTHORIZED = auto()


class Protocol(IntEnum):
    """Transport protocols; the secure variant follows its plain one."""

    NONE = 0
    UDP = 1
    DTLS = 2
    TCP = 3
    TLS = 4


SCHEME_SECURE_MASK = 0x01


class UriScheme(IntEnum):
    """URI schemes; the lowest bit marks a secure transport."""

    COAP = 0
    COAPS = 1
    COAP_TCP = 2
    COAPS_TCP = 3
    HTTP = 4
    HTTPS = 5

    @property
    def is_secure(self) -> bool:
        """True if the scheme denotes a secure transport."""
        return bool(self & SCHEME_SECURE_MASK)


ResponseHandler = Callable[[Context, "Transaction", Any], TransactionResult]
ErrorHandler = Callable[[Context, "Transaction", int], None]
ApplicationHandler = Callable[[Context, "Transaction", Any], None]


def _transaction_id(token: Optional[bytes]) -> bytes:
    raw = bytes(token or b"")[:DEFAULT_TOKEN_SIZE]
    return raw.ljust(DEFAULT_TOKEN_SIZE, b"\x00")


@dataclass(eq=False)
class Transaction:
    """An outstanding request and the handlers for its outcome."""

    token: bytes = b""
    tid: bytes = field(default=bytes(DEFAULT_TOKEN_SIZE))
    aud: Optional[str] = None
    remote: Any = None
    proto: Protocol = Protocol.NONE
    flags: int = 0
    state: TransactionState = TransactionState.IDLE
    response_handler: Optional[ResponseHandler] = None
    error_handler: Optional[ErrorHandler] = None
    application_handler: Optional[ApplicationHandler] = None

    def update(self, token: bytes) -> None:
        """Rebind the transaction to the request carrying ``token``."""
        log(LogLevel.DEBUG, f"update transaction {self.tid.hex()}\n")
        self.token = bytes(token)
        self.tid = _transaction_id(self.token)
        log(LogLevel.DEBUG, f"to {self.tid.hex()}\n")


def proto_from_scheme(scheme: Optional[Union[UriScheme, int]]) -> Protocol:
    """Return the transport protocol used for a URI ``scheme``."""
    if scheme is None:
        return Protocol.NONE
    value = int(scheme)
    base = value & ~SCHEME_SECURE_MASK
    if base in (UriScheme.COAP_TCP, UriScheme.HTTP):
        proto = Protocol.TCP
    else:
        # Unknown schemes are mapped to UDP as well.
        proto = Protocol.UDP
    if value & SCHEME_SECURE_MASK:
        proto = Protocol(proto + 1)
    return proto


def audience_for_host(host: Union[str, bytes]) -> str:
    """Return the audience value that names ``host``."""
    if isinstance(host, (bytes, bytearray)):
        host = bytes(host).decode("utf-8")
    return AUDIENCE_PREFIX + host


def _segments(text: str, separator: str, kind: str) -> List[bytes]:
    parts = [unquote_to_bytes(part) for part in text.split(separator)]
    if sum(len(part) for part in parts) > MAX_URI_PATH_SIZE:
        log(LogLevel.WARNING, f"invalid URI-{kind} encountered\n")
        raise ValueError(f"URI {kind.lower()} exceeds {MAX_URI_PATH_SIZE} bytes")
    return parts


def uri_options(path: str = "", query: str = "") -> List[Tuple[int, bytes]]:
    """Split ``path`` and ``query`` into Uri-Path and Uri-Query options."""
    options: List[Tuple[int, bytes]] = []
    path = path or ""
    if path.startswith("/"):
        path = path[1:]
    if path:
        options.extend((OPTION_URI_PATH, seg) for seg in _segments(path, "/", "Path"))
    if query:
        options.extend((OPTION_URI_QUERY, seg) for seg in _segments(query, "&", "Query"))
    return options


def create_transaction(context: Context, token: Optional[bytes] = None) -> Transaction:
    """Create a transaction for ``token`` and register it with ``context``."""
    transaction = Transaction()
    if token is not None:
        transaction.token = bytes(token)
        transaction.tid = _transaction_id(token)
    transaction.state = TransactionState.IDLE
    context.transactions.insert(0, transaction)
    return transaction


def delete_transaction(context: Context, transaction: Optional[Transaction]) -> None:
    """Remove ``transaction`` from ``context``; unknown ones are ignored."""
    if transaction is None:
        return
    context.transactions[:] = [t for t in context.transactions if t is not transaction]


def find_transaction(context: Context, token: bytes) -> Optional[Transaction]:
    """Return the transaction whose identifier matches ``token``, or None."""
    tid = _transaction_id(token)
    for transaction in context.transactions:
        if transaction.tid == tid:
            log(LogLevel.DEBUG, f"found transaction {tid.hex()}\n")
            return transaction
    log(LogLevel.DEBUG, f"transaction {tid.hex()} not found\n")
    return None


def check_transaction(context: Context, transaction: Optional[Transaction]) -> bool:
    """Return True if ``transaction`` is registered with ``context``."""
    if transaction is None:
        return False
    return any(t is transaction for t in context.transactions)


def start_transaction(context: Context, transaction: Transaction) -> TransactionResult:
    """Start ``transaction``; sending is not supported, so it is never sent."""
    return TransactionResult.NOT_SENT