"""Keys, AES-CCM and HMAC crypto, protocol constants and transaction tracking for DCAF/ACE authorization."""

__version__ = "0.2.0"