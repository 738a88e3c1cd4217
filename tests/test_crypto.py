"""Tests for payload sealing."""

import base64
import json

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, padding

from noblocks.crypto import (
    EncryptionFailure,
    EncryptionFailureReason,
    PayloadEncryptor,
    encrypt_payload,
    get_payload_encryptor,
    public_key_encrypt,
    serialize_payload,
)


def _decrypt(private_key, ciphertext: str) -> str:
    return private_key.decrypt(base64.b64decode(ciphertext), padding.PKCS1v15()).decode()


class TestPublicKeyEncrypt:
    """Tests for the raising encryption entry point."""

    def test_round_trip(self, rsa_private_key, public_key_pem):
        data = {
            "accountIdentifier": "0123456789",
            "accountName": "Ada Obi",
            "institution": "GTBINGLA",
            "memo": "rent",
        }

        ciphertext = public_key_encrypt(data, public_key_pem)

        assert _decrypt(rsa_private_key, ciphertext) == serialize_payload(data).decode()
        assert json.loads(_decrypt(rsa_private_key, ciphertext)) == data

    def test_ciphertext_is_randomized(self, public_key_pem):
        data = {"amount": 10}
        assert public_key_encrypt(data, public_key_pem) != public_key_encrypt(data, public_key_pem)

    def test_payload_too_large(self, public_key_pem):
        with pytest.raises(EncryptionFailure) as exc_info:
            public_key_encrypt({"blob": "x" * 300}, public_key_pem)

        assert exc_info.value.reason == EncryptionFailureReason.PAYLOAD_TOO_LARGE

    def test_malformed_key(self):
        with pytest.raises(EncryptionFailure) as exc_info:
            public_key_encrypt({"a": 1}, "-----BEGIN PUBLIC KEY-----\nnope\n-----END PUBLIC KEY-----")

        assert exc_info.value.reason == EncryptionFailureReason.INVALID_KEY

    def test_non_rsa_key(self):
        ec_pem = ec.generate_private_key(ec.SECP256R1()).public_key().public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        ).decode()

        with pytest.raises(EncryptionFailure) as exc_info:
            public_key_encrypt({"a": 1}, ec_pem)

        assert exc_info.value.reason == EncryptionFailureReason.INVALID_KEY


class TestEncryptionResult:
    """Tests for the explicit result API."""

    def test_success(self, rsa_private_key, public_key_pem):
        result = encrypt_payload(["a", 1, None], public_key_pem)

        assert result.success is True
        assert result.reason is None
        assert _decrypt(rsa_private_key, result.ciphertext) == '["a",1,null]'

    def test_not_serializable(self, public_key_pem):
        result = encrypt_payload({"when": object()}, public_key_pem)

        assert result.success is False
        assert result.ciphertext is None
        assert result.reason == EncryptionFailureReason.NOT_SERIALIZABLE

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_numbers_rejected(self, public_key_pem, value):
        result = encrypt_payload({"amount": value}, public_key_pem)

        assert result.success is False
        assert result.ciphertext is None
        assert result.reason == EncryptionFailureReason.NOT_SERIALIZABLE

    def test_unwrap_failure_raises(self, public_key_pem):
        result = encrypt_payload("y" * 500, public_key_pem)

        with pytest.raises(EncryptionFailure):
            result.unwrap()


class TestPayloadEncryptor:
    """Tests for the reusable encryptor."""

    def test_capacity_for_2048_bit_key(self, public_key_pem):
        assert PayloadEncryptor(public_key_pem).max_plaintext_bytes == 245

    def test_exact_capacity_boundary(self, rsa_private_key, public_key_pem):
        encryptor = PayloadEncryptor(public_key_pem)
        # JSON string quotes add two bytes
        fits = "z" * (encryptor.max_plaintext_bytes - 2)

        assert _decrypt(rsa_private_key, encryptor.encrypt(fits).unwrap()) == f'"{fits}"'
        assert encryptor.encrypt(fits + "z").success is False

    def test_multibyte_characters_count_as_bytes(self, public_key_pem):
        encryptor = PayloadEncryptor(public_key_pem)
        # 130 two-byte characters exceed 245 bytes despite being 132 characters of JSON
        result = encryptor.encrypt("é" * 130)

        assert result.reason == EncryptionFailureReason.PAYLOAD_TOO_LARGE


class TestGetPayloadEncryptor:
    """Tests for building an encryptor from settings."""

    def test_none_without_key(self, monkeypatch):
        from noblocks.config import get_settings

        monkeypatch.delenv("AGGREGATOR_PUBLIC_KEY_PEM", raising=False)
        get_settings.cache_clear()
        try:
            assert get_payload_encryptor() is None
        finally:
            get_settings.cache_clear()

    def test_from_settings(self, monkeypatch, public_key_pem):
        from noblocks.config import get_settings

        monkeypatch.setenv("AGGREGATOR_PUBLIC_KEY_PEM", public_key_pem)
        get_settings.cache_clear()
        try:
            encryptor = get_payload_encryptor()
            assert encryptor is not None
            assert encryptor.encrypt({"ok": True}).success
        finally:
            get_settings.cache_clear()
