"""Public-key sealing of outbound request payloads.

Payloads are serialized to compact JSON and encrypted in a single shot with
RSA PKCS#1 v1.5. There is no hybrid or chunked scheme, so the plaintext is
bounded by the key size minus 11 bytes of padding (245 bytes for a 2048-bit
key). Oversized payloads are rejected, never truncated.
"""

import base64
import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

logger = logging.getLogger(__name__)

# PKCS#1 v1.5 encryption padding overhead in bytes
PKCS1_V15_OVERHEAD = 11


class EncryptionFailureReason(str, Enum):
    """Why a payload could not be encrypted."""

    INVALID_KEY = "invalid_key"
    PAYLOAD_TOO_LARGE = "payload_too_large"
    NOT_SERIALIZABLE = "not_serializable"


class EncryptionFailure(Exception):
    """Raised when a payload cannot be encrypted."""

    def __init__(self, reason: EncryptionFailureReason, message: str):
        self.reason = reason
        super().__init__(message)


@dataclass
class EncryptionResult:
    """Result of an encryption attempt."""
    success: bool
    ciphertext: Optional[str] = None    # base64
    reason: Optional[EncryptionFailureReason] = None
    error: Optional[str] = None

    def unwrap(self) -> str:
        """Return the ciphertext or raise EncryptionFailure."""
        if not self.success or self.ciphertext is None:
            raise EncryptionFailure(
                self.reason or EncryptionFailureReason.INVALID_KEY,
                self.error or "Failed to encrypt data",
            )
        return self.ciphertext


def serialize_payload(data: Any) -> bytes:
    """Serialize data to compact JSON, as a browser's JSON.stringify would."""
    return json.dumps(
        data, separators=(",", ":"), ensure_ascii=False, allow_nan=False
    ).encode("utf-8")


def _failure(reason: EncryptionFailureReason, error: str) -> EncryptionResult:
    logger.warning("Payload encryption failed (%s): %s", reason.value, error)
    return EncryptionResult(success=False, reason=reason, error=error)


class PayloadEncryptor:
    """Encrypts payloads with a fixed RSA public key.

    Usage:
        encryptor = PayloadEncryptor(public_key_pem)
        result = encryptor.encrypt({"accountIdentifier": "0123456789"})
        if result.success:
            send(result.ciphertext)
    """

    def __init__(self, public_key_pem: str):
        """Load the public key.

        Args:
            public_key_pem: PEM-encoded RSA public key

        Raises:
            EncryptionFailure: If the key is malformed or not an RSA key
        """
        try:
            key = serialization.load_pem_public_key(public_key_pem.encode())
        except (ValueError, TypeError, UnsupportedAlgorithm) as e:
            raise EncryptionFailure(
                EncryptionFailureReason.INVALID_KEY, f"Invalid public key: {e}"
            ) from e

        if not isinstance(key, rsa.RSAPublicKey):
            raise EncryptionFailure(
                EncryptionFailureReason.INVALID_KEY, "Public key is not an RSA key"
            )
        self._key = key

    @property
    def max_plaintext_bytes(self) -> int:
        """Largest serialized payload this key can encrypt."""
        return (self._key.key_size + 7) // 8 - PKCS1_V15_OVERHEAD

    def encrypt(self, data: Any) -> EncryptionResult:
        """Encrypt a JSON-serializable value.

        Returns:
            EncryptionResult with base64 ciphertext, or the failure reason
        """
        try:
            plaintext = serialize_payload(data)
        except (TypeError, ValueError) as e:
            return _failure(EncryptionFailureReason.NOT_SERIALIZABLE, str(e))

        if len(plaintext) > self.max_plaintext_bytes:
            return _failure(
                EncryptionFailureReason.PAYLOAD_TOO_LARGE,
                f"Payload is {len(plaintext)} bytes; key allows at most "
                f"{self.max_plaintext_bytes}",
            )

        try:
            ciphertext = self._key.encrypt(plaintext, padding.PKCS1v15())
        except ValueError as e:
            return _failure(EncryptionFailureReason.PAYLOAD_TOO_LARGE, str(e))

        return EncryptionResult(
            success=True,
            ciphertext=base64.b64encode(ciphertext).decode("ascii"),
        )


def encrypt_payload(data: Any, public_key_pem: str) -> EncryptionResult:
    """Encrypt data with a PEM public key, returning an explicit result."""
    try:
        encryptor = PayloadEncryptor(public_key_pem)
    except EncryptionFailure as e:
        return _failure(e.reason, str(e))
    return encryptor.encrypt(data)


def public_key_encrypt(data: Any, public_key_pem: str) -> str:
    """Encrypt data with a PEM public key.

    Returns:
        Base64-encoded ciphertext

    Raises:
        EncryptionFailure: If the key is invalid or the payload too large
    """
    return encrypt_payload(data, public_key_pem).unwrap()


def get_payload_encryptor() -> Optional[PayloadEncryptor]:
    """Get encryptor using AGGREGATOR_PUBLIC_KEY_PEM from settings.

    Returns:
        PayloadEncryptor if the key is set, None otherwise
    """
    from noblocks.config import get_settings

    public_key_pem = get_settings().aggregator_public_key_pem
    if not public_key_pem:
        return None

    return PayloadEncryptor(public_key_pem)
