"""Protocol constants for CWT claims, COSE objects and DCAF messages."""

from __future__ import annotations

from enum import IntEnum

DEFAULT_AM_PATH = "authorize"
"""Default URI path of the authorization manager."""

DEFAULT_COAP_PORT = 7743
"""Default port for unencrypted DCAF traffic."""

DEFAULT_COAPS_PORT = 7744
"""Default port for encrypted DCAF traffic."""

DEFAULT_LIFETIME = 3600
"""Default lifetime of an access ticket in seconds."""

DEFAULT_TOKEN_SIZE = 4
"""Size of the random token used in outgoing requests."""

CWT_CBOR_TAG = 61
"""CBOR tag that marks a CWT structure."""

MEDIATYPE_DCAF_CBOR_STRING = "75"
MEDIATYPE_ACE_CBOR_STRING = "60"


class CwtClaim(IntEnum):
    """CBOR keys of CWT claims (RFC 8392 and RFC 9200)."""

    ISS = 1
    SUB = 2
    AUD = 3
    EXP = 4
    NBF = 5
    IAT = 6
    CTI = 7
    CNF = 8
    SCOPE = 9
    ACE_PROFILE = 38
    CNONCE = 39
    EXI = 40
    RS_CNF = 41


class CwtCnf(IntEnum):
    """Members of the confirmation claim."""

    COSE_KEY = 1
    ENCRYPTED_COSE_KEY = 2
    KID = 3


class CoseTag(IntEnum):
    """CBOR tags of COSE message types (RFC 8152, Table 1)."""

    ENCRYPT0 = 16
    MAC0 = 17
    SIGN1 = 18
    ENCRYPT = 96
    MAC = 97
    SIGN = 98

    @classmethod
    def from_value(cls, value: int) -> "CoseTag":
        """Return the tag for a CBOR tag number, or raise ValueError."""
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"unknown COSE tag {value!r}") from None


class CoseResult(IntEnum):
    """Outcomes of COSE operations."""

    OK = 0
    OUT_OF_MEMORY_ERROR = 1
    PARSE_ERROR = 2
    TYPE_ERROR = 3
    DECRYPT_ERROR = 4
    NOT_SUPPORTED_ERROR = 5
    ENCRYPT_ERROR = 6
    SERIALIZE_ERROR = 7


class CoseMode(IntEnum):
    """Purpose for which key material is requested."""

    ENCRYPT = 0
    DECRYPT = 1
    MAC = 2


class DcafResult(IntEnum):
    """Result codes of DCAF operations."""

    OK = 0
    ERROR_OUT_OF_MEMORY = 1
    ERROR_BUFFER_TOO_SMALL = 2
    ERROR_INTERNAL_ERROR = 3
    ERROR_UNAUTHORIZED_THRESHOLD = 4
    ERROR_BAD_REQUEST = 0x10
    ERROR_UNAUTHORIZED = 0x13
    ERROR_INVALID_TICKET = 0x15
    ERROR_UNSUPPORTED_KEY_TYPE = 0x16


class TicketField(IntEnum):
    """Fields of a DCAF access ticket."""

    ISS = CwtClaim.ISS
    SUB = CwtClaim.SUB
    AUD = CwtClaim.AUD
    IAT = CwtClaim.IAT
    CNF = CwtClaim.CNF
    SCOPE = CwtClaim.SCOPE
    EXPIRES_IN = 17
    SNC = CwtClaim.CNONCE
    SEQ = CwtClaim.CTI
    DSEQ = 19
    CSCOPE = 21
    RS_CNF = CwtClaim.RS_CNF


class RequestField(IntEnum):
    """Fields of the unauthorized response and the ticket request."""

    SAM = 1
    AUD = 5
    SCOPE = 9
    SNC = 39