"""UUID generation and parsing."""

import logging
import re
import uuid
from datetime import datetime, timedelta, timezone

from src.devtools.config import settings
from src.devtools.features.common import FormatError, ValidationError
from src.devtools.features.uuid_generator.generator import uuid7_generator
from src.devtools.features.uuid_generator.schemas import GenerateResult, ParseResult

logger = logging.getLogger(__name__)

CANONICAL_UUID = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE
)

# Numeric variant values as reported by the RFC 4122 variant field
VARIANT_NUMBERS = {
    uuid.RESERVED_NCS: 0,
    uuid.RFC_4122: 2,
    uuid.RESERVED_MICROSOFT: 6,
    uuid.RESERVED_FUTURE: 7,
}

TYPE_LABELS = {
    1: "Time-based UUID (version 1)",
    4: "Random UUID (version 4)",
    7: "Time-ordered UUID (version 7)",
}

GREGORIAN_EPOCH = datetime(1582, 10, 15, tzinfo=timezone.utc)


def _check_count(count: int) -> None:
    max_count = settings.uuid_max_count
    if count < 1 or count > max_count:
        raise ValidationError(f"Count must be between 1 and {max_count}")


def generate_random(count: int = 1) -> GenerateResult:
    """
    Generate random (version 4) UUIDs.

    Args:
        count: Number of UUIDs, 1 to settings.uuid_max_count

    Returns:
        GenerateResult with version "4"

    Raises:
        ValidationError: If count is out of range
    """
    _check_count(count)
    uuids = [str(uuid.uuid4()) for _ in range(count)]
    logger.debug("Generated UUID v4 batch", extra={"count": count})
    return GenerateResult(
        uuids=uuids,
        count=count,
        version="4",
        description="Random UUID (version 4)",
    )


def generate_time_ordered(count: int = 1) -> GenerateResult:
    """
    Generate time-ordered (version 7) UUIDs from the shared generator.

    Identifiers within the batch are in ascending order, and later calls
    continue the sequence.

    Args:
        count: Number of UUIDs, 1 to settings.uuid_max_count

    Returns:
        GenerateResult with version "7" and the generation instant

    Raises:
        ValidationError: If count is out of range
    """
    _check_count(count)
    uuids = [str(value) for value in uuid7_generator.generate_many(count)]
    logger.debug("Generated UUID v7 batch", extra={"count": count})
    return GenerateResult(
        uuids=uuids,
        count=count,
        version="7",
        description="Time-ordered UUID (version 7) - sortable by timestamp",
        timestamp=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
    )


def parse(identifier: str) -> ParseResult:
    """
    Parse a UUID in canonical 8-4-4-4-12 form.

    Surrounding whitespace is ignored and hex digits may be any case.
    The version is read straight from the version nibble, so it is
    reported even for non-RFC variants.

    Args:
        identifier: UUID string

    Returns:
        ParseResult; timestamp fields are only set for version 1

    Raises:
        FormatError: If the string is not a canonical UUID
    """
    text = identifier.strip()
    if not CANONICAL_UUID.match(text):
        raise FormatError(f"Invalid UUID format: {text!r}")

    value = uuid.UUID(text)
    version = (value.int >> 76) & 0xF

    timestamp = None
    timestamp_formatted = None
    if version == 1:
        timestamp = value.time
        moment = GREGORIAN_EPOCH + timedelta(microseconds=timestamp // 10)
        timestamp_formatted = moment.strftime("%Y-%m-%d %H:%M:%S.%f UTC")

    return ParseResult(
        uuid=str(value),
        version=version,
        variant=VARIANT_NUMBERS[value.variant],
        type=TYPE_LABELS.get(version, f"UUID version {version}"),
        most_sig_bits=f"0x{value.int >> 64:016X}",
        least_sig_bits=f"0x{value.int & 0xFFFFFFFFFFFFFFFF:016X}",
        timestamp=timestamp,
        timestamp_formatted=timestamp_formatted,
    )
