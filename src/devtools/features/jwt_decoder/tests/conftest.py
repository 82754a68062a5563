"""Pytest fixtures for JWT tool tests."""

import json
import time

import pytest
from jose import jwt
from jose.utils import base64url_encode


def encode_segment(value: dict) -> str:
    """Base64URL-encode a JSON object without padding."""
    return base64url_encode(json.dumps(value).encode("utf-8")).decode("ascii")


@pytest.fixture
def segment():
    """Provide the segment encoder to tests that build tokens by hand."""
    return encode_segment


@pytest.fixture
def claims() -> dict:
    """Claim set used to build test tokens."""
    return {"sub": "1234567890", "name": "Jane Doe", "admin": True, "iat": 1516239022}


@pytest.fixture
def hs256_token(claims) -> str:
    """Token signed with HS256 and secret 's3cret'."""
    return jwt.encode(claims, "s3cret", algorithm="HS256")


@pytest.fixture
def expired_token() -> str:
    """HS384 token whose exp lies in the past."""
    return jwt.encode(
        {"sub": "expired", "exp": 1_000_000_000, "nbf": 999_999_000}, "s3cret", algorithm="HS384"
    )


@pytest.fixture
def fresh_token() -> str:
    """HS512 token expiring an hour from now."""
    return jwt.encode({"sub": "fresh", "exp": int(time.time()) + 3600}, "s3cret", algorithm="HS512")


@pytest.fixture
def unsigned_token(claims) -> str:
    """Two-segment token without a signature."""
    return f"{encode_segment({'alg': 'none', 'typ': 'JWT'})}.{encode_segment(claims)}"


@pytest.fixture
def rs256_token(claims) -> str:
    """Token declaring RS256 with a placeholder signature."""
    header = encode_segment({"alg": "RS256", "typ": "JWT"})
    return f"{header}.{encode_segment(claims)}.c2lnbmF0dXJl"
