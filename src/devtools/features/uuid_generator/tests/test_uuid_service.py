"""Tests for UUID generation and parsing."""

import re
import uuid

import pytest

from src.devtools.features.common import FormatError, ValidationError
from src.devtools.features.uuid_generator import service

CANONICAL = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$")


class TestGenerateRandom:
    """Tests for version 4 generation."""

    @pytest.mark.parametrize("count", [1, 7, 100])
    def test_returns_requested_number_of_unique_uuids(self, count):
        """Test batch size, format and uniqueness."""
        result = service.generate_random(count)

        assert result.success is True
        assert result.count == count
        assert result.version == "4"
        assert result.description == "Random UUID (version 4)"
        assert result.timestamp is None
        assert len(result.uuids) == count
        assert len(set(result.uuids)) == count
        for value in result.uuids:
            assert CANONICAL.match(value)
            assert uuid.UUID(value).version == 4

    @pytest.mark.parametrize("count", [0, -1, 101])
    def test_rejects_out_of_range_count(self, count):
        """Test count bound of [1, 100]."""
        with pytest.raises(ValidationError, match="Count must be between 1 and 100"):
            service.generate_random(count)


class TestGenerateTimeOrdered:
    """Tests for version 7 generation."""

    @pytest.mark.parametrize("count", [1, 25, 100])
    def test_returns_sorted_unique_uuids(self, count):
        """Test batch size, version bits and ascending order."""
        result = service.generate_time_ordered(count)

        assert result.version == "7"
        assert result.count == count
        assert len(set(result.uuids)) == count
        assert result.uuids == sorted(result.uuids)
        for value in result.uuids:
            assert CANONICAL.match(value)
            assert uuid.UUID(value).version == 7

    def test_reports_generation_timestamp(self):
        """Test that v7 results carry an ISO-8601 UTC instant."""
        result = service.generate_time_ordered(1)

        assert result.timestamp is not None
        assert result.timestamp.endswith("Z")
        assert "sortable by timestamp" in result.description

    def test_order_continues_across_calls(self):
        """Test that a later batch sorts after an earlier one."""
        first = service.generate_time_ordered(5).uuids
        second = service.generate_time_ordered(5).uuids

        assert max(first) < min(second)

    @pytest.mark.parametrize("count", [0, 101])
    def test_rejects_out_of_range_count(self, count):
        """Test same bound as version 4."""
        with pytest.raises(ValidationError):
            service.generate_time_ordered(count)


class TestParse:
    """Tests for UUID parsing."""

    def test_parse_generated_v4(self):
        """Test round trip with the v4 generator."""
        value = service.generate_random(1).uuids[0]

        result = service.parse(value)

        assert result.version == 4
        assert result.variant == 2
        assert result.type == "Random UUID (version 4)"
        assert result.timestamp is None

    def test_parse_generated_v7(self):
        """Test round trip with the v7 generator."""
        value = service.generate_time_ordered(1).uuids[0]

        result = service.parse(value)

        assert result.version == 7
        assert result.type == "Time-ordered UUID (version 7)"
        assert result.timestamp is None

    def test_parse_v1_reports_timestamp(self):
        """Test that version 1 exposes its 60-bit timestamp."""
        result = service.parse("C232AB00-9414-11EC-B3C8-9F6BDECED846")

        assert result.uuid == "c232ab00-9414-11ec-b3c8-9f6bdeced846"
        assert result.version == 1
        assert result.variant == 2
        assert result.type == "Time-based UUID (version 1)"
        assert result.timestamp == 0x1EC9414C232AB00
        assert result.timestamp_formatted.startswith("2022-02-22 19:22:22")

    def test_parse_bit_halves(self):
        """Test hexadecimal rendering of both 64-bit halves."""
        result = service.parse("c232ab00-9414-11ec-b3c8-9f6bdeced846")

        assert result.most_sig_bits == "0xC232AB00941411EC"
        assert result.least_sig_bits == "0xB3C89F6BDECED846"

    def test_parse_trims_and_accepts_upper_case(self):
        """Test whitespace trimming and case-insensitive hex."""
        result = service.parse("  919108F7-52D1-4320-9BAC-F847DB4148A8 \n")

        assert result.uuid == "919108f7-52d1-4320-9bac-f847db4148a8"
        assert result.version == 4

    def test_parse_nil_uuid_reports_ncs_variant(self):
        """Test version and variant for non-RFC layouts."""
        result = service.parse("00000000-0000-0000-0000-000000000000")

        assert result.version == 0
        assert result.variant == 0
        assert result.type == "UUID version 0"

    @pytest.mark.parametrize(
        "value",
        [
            "not-a-uuid",
            "",
            "919108f752d143209bacf847db4148a8",
            "{919108f7-52d1-4320-9bac-f847db4148a8}",
            "urn:uuid:919108f7-52d1-4320-9bac-f847db4148a8",
            "919108f7-52d1-4320-9bac-f847db4148a",
            "g19108f7-52d1-4320-9bac-f847db4148a8",
        ],
    )
    def test_parse_rejects_non_canonical_text(self, value):
        """Test that only the 8-4-4-4-12 form is accepted."""
        with pytest.raises(FormatError, match="Invalid UUID format"):
            service.parse(value)
