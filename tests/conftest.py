"""Pytest configuration and fixtures."""

import os
from unittest.mock import AsyncMock

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

# Set test environment
os.environ["ENVIRONMENT"] = "test"
os.environ["DEBUG"] = "true"


@pytest.fixture(scope="session")
def rsa_private_key() -> rsa.RSAPrivateKey:
    """2048-bit RSA key pair shared by the encryption tests."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def public_key_pem(rsa_private_key) -> str:
    """PEM-encoded public half of the test key pair."""
    return rsa_private_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode()


@pytest.fixture
def mock_reader():
    """Chain reader whose balanceOf result is set per test."""
    reader = AsyncMock()
    reader.call_contract_method = AsyncMock(return_value=0)
    return reader
