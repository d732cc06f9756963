# dcafkit

Building blocks for DCAF (Delegated CoAP Authentication and Authorization
Framework) and ACE-style authorization in Python: key handling, AES-CCM and
HMAC-SHA256, protocol constants, and bookkeeping of outstanding requests.

## Modules

- `dcafkit.constants` – CWT claim keys (`CwtClaim`, `CwtCnf`), COSE message
  tags (`CoseTag`, with `CoseTag.from_value()` raising `ValueError` for
  unknown numbers), `CoseResult`, `CoseMode`, `DcafResult`, and the field
  numbers of tickets and ticket requests (`TicketField`, `RequestField`).
  Also default ports (7743 / 7744), the default ticket lifetime and the
  default token size.
- `dcafkit.prng` – a pluggable random source. Install a function that takes
  a length and returns that many bytes with `set_prng()`, then draw bytes with
  `prng()`. With no generator installed, `PrngUnavailableError` is raised.
- `dcafkit.utf8` – the octet-to-UTF-8 encoding for binary values where every
  character fits in eight bits: `utf8_length()`, `bytes_to_utf8()` and
  `utf8_to_bytes()`. Both conversions accept an optional `max_len`; output
  stops once that many bytes are produced. Invalid or truncated sequences,
  characters wider than eight bits, and a two-byte sequence that would be cut
  by `max_len` raise `Utf8Error`.
- `dcafkit.debug` – levelled logging with `LogLevel`, `log()`,
  `get_log_level()`, `set_log_level()` (default `WARNING`) and
  `set_log_handler()`. Without a handler, messages go to stderr for `CRIT`
  and more severe, stdout otherwise, prefixed with a short level tag; a
  handler receives the level and the message cut to 127 characters.
  `hexdump()` prints bytes as hex, eight per line, at `DEBUG` level only.
  `show_cbor()` pipes data to the external `cbor2pretty.rb` program when not
  running as root, and does nothing if that program cannot be started.
- `dcafkit.key` – `Key` (type, key id, flags, data; at most 32 bytes each for
  id and data, otherwise `KeyDataError`), with `randomize()`, `set_data()`,
  `set_kid()` and `kid_matches()`. `randomize()` draws 16 bytes for
  `AES_128`, 32 for `AES_256`, `HS256` and `KID`, and raises `KeyDataError`
  for `KeyType.NONE`. `KeyStore` keeps keys per peer; `add()` puts the newest
  entry first and `find(peer, kid)` returns the first match or `None`.
- `dcafkit.crypto` – `encrypt()` and `decrypt()` with AES-CCM for
  `KeyType.AES_128` and `KeyType.AES_256`, configured by `CcmParams` (key,
  nonce of exactly `15 - l` bytes, tag length, length field size). The
  ciphertext carries the tag at its end. `hmac_sha256()` returns the 32-byte
  HMAC of data under a `Key` or raw bytes. Failures raise `CryptoError`.
- `dcafkit.context` – `Context` holds the key store, the list of open
  transactions, application data and the transaction timeout (90000 ms by
  default). `set_option(ContextOption.TIMEOUT, value)` changes the timeout.
- `dcafkit.transaction` – `Transaction` records identified by the first four
  bytes of their CoAP token; `create_transaction()`, `find_transaction()`,
  `check_transaction()`, `delete_transaction()` and `Transaction.update()`.
  Helpers: `proto_from_scheme()` maps a `UriScheme` to a `Protocol`,
  `audience_for_host()` builds a `coaps://` audience, and `uri_options()`
  splits a path and query into Uri-Path (11) and Uri-Query (15) options,
  raising `ValueError` when either exceeds 64 bytes.

## What it does not do

dcafkit does not talk to the network. It has no CoAP stack:
`start_transaction()` always returns `TransactionResult.NOT_SENT`, and there
is no client, server or authorization manager. COSE and CWT are covered only
by their constants; there is no COSE or CBOR encoding or parsing, and no
ticket handling.

## Installation

```
pip install dcafkit
```

## Example

```python
import os

from dcafkit import prng
from dcafkit.crypto import CcmParams, decrypt, encrypt, hmac_sha256
from dcafkit.key import Key, KeyType

prng.set_prng(os.urandom)

key = Key(KeyType.AES_128)
key.randomize()

params = CcmParams(key=key, nonce=bytes(13), tag_len=8, l=2)
ciphertext = encrypt(KeyType.AES_128, params, b"hello", b"")
assert decrypt(KeyType.AES_128, params, ciphertext, b"") == b"hello"

mac = hmac_sha256(key, b"hello")
assert len(mac) == 32
```

## Running the tests

```
pip install -e .[test]
pytest
```