"""Local JWT decoding and HMAC signature verification (RFC 7519 / RFC 7515)."""

import hashlib
import hmac
import json
import logging
import re
from datetime import datetime, timezone, tzinfo
from typing import Any
from zoneinfo import ZoneInfo

from jose.constants import ALGORITHMS
from jose.utils import base64url_decode, base64url_encode

from src.devtools.config import settings
from src.devtools.features.common import DecodeError, FormatError, UnsupportedAlgorithmError
from src.devtools.features.jwt_decoder.schemas import DecodeResult, VerifyResult

logger = logging.getLogger(__name__)

VALID_MESSAGE = "Signature is valid!"
INVALID_MESSAGE = "Signature verification failed. The secret key may be incorrect."

TIMESTAMP_CLAIMS = ("exp", "iat", "nbf")

BASE64URL_SEGMENT = re.compile(r"^[A-Za-z0-9_-]*={0,2}$")

HMAC_HASHES = {
    ALGORITHMS.HS256: hashlib.sha256,
    ALGORITHMS.HS384: hashlib.sha384,
    ALGORITHMS.HS512: hashlib.sha512,
}


def _split_token(token: str) -> list[str]:
    """Split a compact JWT on '.', dropping trailing empty segments."""
    parts = token.strip().split(".")
    while parts and not parts[-1]:
        parts.pop()
    return parts


def _decode_segment(segment: str) -> tuple[str, dict[str, Any]]:
    """
    Decode one Base64URL segment holding a JSON object.

    Returns:
        Tuple of (decoded text, parsed object)

    Raises:
        DecodeError: On malformed Base64URL, invalid UTF-8 or JSON, or a
            JSON value that is not an object
    """
    if not BASE64URL_SEGMENT.fullmatch(segment):
        raise DecodeError(
            "Failed to decode JWT: segment contains characters outside the Base64URL alphabet"
        )
    try:
        text = base64url_decode(segment.encode("ascii")).decode("utf-8")
        value = json.loads(text)
    except (ValueError, UnicodeError) as e:
        raise DecodeError(f"Failed to decode JWT: {e}") from e
    if not isinstance(value, dict):
        raise DecodeError("Failed to decode JWT: segment is not a JSON object")
    return text, value


def _display_zone() -> tzinfo:
    if settings.display_timezone.upper() == "UTC":
        return timezone.utc
    return ZoneInfo(settings.display_timezone)


def _claim_seconds(payload: dict[str, Any], claim: str) -> float:
    value = payload[claim]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DecodeError(f"Failed to decode JWT: claim '{claim}' must be a numeric date")
    return value


def format_timestamp(epoch_seconds: float) -> str:
    """Format Unix seconds as 'YYYY-MM-DD HH:MM:SS <zone>' in the display timezone."""
    moment = datetime.fromtimestamp(epoch_seconds, tz=_display_zone())
    return moment.strftime("%Y-%m-%d %H:%M:%S %Z")


def decode(token: str) -> DecodeResult:
    """
    Decode a JWT without verifying its signature.

    Args:
        token: Compact JWT with 2 (unsigned) or 3 segments

    Returns:
        DecodeResult with formatted header/payload and claim annotations

    Raises:
        FormatError: If the token does not have 2 or 3 segments
        DecodeError: If a segment is not Base64URL-encoded JSON
    """
    parts = _split_token(token)
    if len(parts) not in (2, 3):
        raise FormatError("Invalid JWT format. Expected 2 or 3 parts separated by dots.")

    header_raw, header = _decode_segment(parts[0])
    payload_raw, payload = _decode_segment(parts[1])

    formatted: dict[str, str] = {}
    is_expired = None
    for claim in TIMESTAMP_CLAIMS:
        if claim in payload:
            seconds = _claim_seconds(payload, claim)
            try:
                formatted[claim] = format_timestamp(seconds)
            except (OverflowError, OSError, ValueError) as e:
                raise DecodeError(f"Failed to decode JWT: claim '{claim}' is out of range") from e
            if claim == "exp":
                is_expired = datetime.now(timezone.utc).timestamp() > seconds

    has_signature = len(parts) == 3
    return DecodeResult(
        header=json.dumps(header, indent=2, ensure_ascii=False),
        header_raw=header_raw,
        payload=json.dumps(payload, indent=2, ensure_ascii=False),
        payload_raw=payload_raw,
        has_signature=has_signature,
        signature=parts[2] if has_signature else None,
        is_expired=is_expired,
        exp_formatted=formatted.get("exp"),
        iat_formatted=formatted.get("iat"),
        nbf_formatted=formatted.get("nbf"),
    )


def compute_signature(signing_input: str, secret: str, algorithm: str) -> str:
    """
    Compute the Base64URL (unpadded) HMAC signature of a JWS signing input.

    Args:
        signing_input: "<header segment>.<payload segment>"
        secret: Shared secret, encoded as UTF-8
        algorithm: One of HS256, HS384, HS512

    Returns:
        Signature segment as it would appear in the token
    """
    digest = hmac.new(
        secret.encode("utf-8"), signing_input.encode("utf-8"), HMAC_HASHES[algorithm]
    ).digest()
    return base64url_encode(digest).decode("ascii")


def verify(token: str, secret: str) -> VerifyResult:
    """
    Verify the HMAC signature of a JWT.

    The algorithm is taken from the token header only, never from the
    caller. Registered claims (exp, nbf) are not validated.

    Args:
        token: Compact JWT with 3 segments
        secret: Shared HMAC secret

    Returns:
        VerifyResult with the validity flag and header algorithm

    Raises:
        FormatError: If the token does not have exactly 3 segments
        DecodeError: If the header is not Base64URL-encoded JSON
        UnsupportedAlgorithmError: If the header algorithm is missing or not HMAC
    """
    parts = _split_token(token)
    if len(parts) != 3:
        raise FormatError("JWT must have 3 parts for signature verification")

    _, header = _decode_segment(parts[0])
    algorithm = header.get("alg")
    if not algorithm or not isinstance(algorithm, str):
        raise UnsupportedAlgorithmError("No algorithm specified in header")
    if algorithm.upper() not in ALGORITHMS.HMAC:
        raise UnsupportedAlgorithmError(
            f"Unsupported algorithm: {algorithm}. "
            "Only HS256, HS384, HS512 are supported for verification."
        )

    expected = compute_signature(f"{parts[0]}.{parts[1]}", secret, algorithm.upper())
    valid = hmac.compare_digest(expected.encode("ascii"), parts[2].encode("utf-8"))

    logger.info(
        "JWT signature checked",
        extra={"algorithm": algorithm, "valid": valid},
    )
    return VerifyResult(
        valid=valid,
        algorithm=algorithm,
        message=VALID_MESSAGE if valid else INVALID_MESSAGE,
    )
