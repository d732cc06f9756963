"""AES-CCM authenticated encryption and HMAC-SHA256 for DCAF keys."""

from __future__ import annotations

import hashlib
import hmac
from dataclasses import dataclass
from typing import Optional, Union

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESCCM

from dcafkit.debug import LogLevel, log
from dcafkit.key import MAX_KEY_SIZE, Key, KeyType

_KEY_LENGTHS = {
    KeyType.AES_128: 16,
    KeyType.AES_256: 32,
}

SHA256_DIGEST_LENGTH = 32


class CryptoError(Exception):
    """Raised when an encryption, decryption or MAC operation fails."""


@dataclass(frozen=True)
class CcmParams:
    """Parameters for AES-CCM: key, nonce, tag length and length field size.

    The nonce must be exactly ``15 - l`` bytes long.
    """

    key: Union[Key, bytes]
    nonce: bytes
    tag_len: int = 8
    l: int = 2


def _key_bytes(key: Union[Key, bytes]) -> bytes:
    return key.data if isinstance(key, Key) else bytes(key)


def _cipher(alg: Union[KeyType, int], params: CcmParams) -> AESCCM:
    try:
        key_type = KeyType(alg)
    except ValueError:
        key_type = None
    key_len = _KEY_LENGTHS.get(key_type) if key_type is not None else None
    if key_len is None:
        log(LogLevel.DEBUG, "cipher not found\n")
        raise CryptoError(f"algorithm {alg!r} not supported")

    raw = _key_bytes(params.key)
    if len(raw) > MAX_KEY_SIZE:
        log(LogLevel.CRIT, "dcaf_crypto: cannot set key\n")
        raise CryptoError("key data too long")
    # Normalize the key to the length the cipher expects.
    key = (raw + bytes(MAX_KEY_SIZE))[:key_len]

    nonce = bytes(params.nonce)
    if len(nonce) != 15 - params.l:
        raise CryptoError(
            f"nonce must be {15 - params.l} bytes for l={params.l}, got {len(nonce)}"
        )
    try:
        return AESCCM(key, tag_length=params.tag_len)
    except ValueError as exc:
        raise CryptoError(str(exc)) from exc


def encrypt(alg: Union[KeyType, int], params: CcmParams, data: bytes,
            aad: Optional[bytes] = None) -> bytes:
    """Encrypt ``data`` and return the ciphertext followed by the tag."""
    cipher = _cipher(alg, params)
    try:
        return cipher.encrypt(bytes(params.nonce), bytes(data), bytes(aad) if aad else None)
    except (ValueError, OverflowError) as exc:
        log(LogLevel.ERR, f"dcaf_encrypt: {exc}\n")
        raise CryptoError(str(exc)) from exc


def decrypt(alg: Union[KeyType, int], params: CcmParams, data: bytes,
            aad: Optional[bytes] = None) -> bytes:
    """Verify and decrypt ciphertext-plus-tag ``data``; return the plaintext."""
    cipher = _cipher(alg, params)
    data = bytes(data)
    if len(data) < params.tag_len:
        log(LogLevel.ERR, "dcaf_decrypt: invalid tag length\n")
        raise CryptoError("data shorter than authentication tag")
    try:
        return cipher.decrypt(bytes(params.nonce), data, bytes(aad) if aad else None)
    except InvalidTag as exc:
        raise CryptoError("authentication failed") from exc
    except (ValueError, OverflowError) as exc:
        raise CryptoError(str(exc)) from exc


def hmac_sha256(key: Union[Key, bytes], data: bytes) -> bytes:
    """Return the HMAC-SHA256 of ``data`` under ``key``."""
    return hmac.new(_key_bytes(key), bytes(data), hashlib.sha256).digest()