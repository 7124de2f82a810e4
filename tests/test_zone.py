"""Tests for ZoneOffset and ZoneId."""

import pytest

from dtudf.core import Instant, LocalDateTime, ZoneId, ZoneOffset
from dtudf.errors import InvalidFieldError, ParseError


class TestZoneOffset:
    """Tests for ZoneOffset."""

    @pytest.mark.parametrize(
        "total_seconds,text",
        [(0, "Z"), (3600, "+01:00"), (-19_800, "-05:30"), (-12_615, "-03:30:15")],
    )
    def test_id(self, total_seconds: int, text: str) -> None:
        """Seconds are shown only when present."""
        assert ZoneOffset(total_seconds).id == text
        assert ZoneOffset.parse(text) == ZoneOffset(total_seconds)

    def test_range(self) -> None:
        """Offsets are limited to +/-18 hours."""
        assert ZoneOffset(18 * 3600).id == "+18:00"
        with pytest.raises(InvalidFieldError):
            ZoneOffset(18 * 3600 + 1)

    def test_of_components(self) -> None:
        """Components are combined into total seconds."""
        assert ZoneOffset.of_hours_minutes_seconds(5, 30, 0) == ZoneOffset(19_800)
        assert ZoneOffset.of_hours_minutes_seconds(-5, -30, 0) == ZoneOffset(-19_800)

    def test_of_components_mixed_signs(self) -> None:
        """All components must share one sign."""
        with pytest.raises(InvalidFieldError, match="must be positive"):
            ZoneOffset.of_hours_minutes_seconds(1, -30, 0)
        with pytest.raises(InvalidFieldError, match="must be negative"):
            ZoneOffset.of_hours_minutes_seconds(-1, 30, 0)

    def test_of_components_beyond_eighteen_hours(self) -> None:
        """+18:01 is out of range even though each field is valid."""
        with pytest.raises(InvalidFieldError, match="between -18:00 and \\+18:00"):
            ZoneOffset.of_hours_minutes_seconds(18, 1, 0)

    @pytest.mark.parametrize(
        "text,total_seconds",
        [("+5", 18_000), ("-05", -18_000), ("+0530", 19_800), ("+053015", 19_815)],
    )
    def test_parse_compact_forms(self, text: str, total_seconds: int) -> None:
        """Short and compact forms are accepted."""
        assert ZoneOffset.parse(text).total_seconds == total_seconds

    def test_parse_invalid(self) -> None:
        """Malformed and out-of-range text raise ParseError."""
        with pytest.raises(ParseError, match="Invalid offset format"):
            ZoneOffset.parse("5")
        with pytest.raises(ParseError, match="Invalid offset"):
            ZoneOffset.parse("+19:00")


class TestZoneId:
    """Tests for ZoneId."""

    def test_region(self) -> None:
        """IANA regions are accepted."""
        zone = ZoneId.of("Europe/Berlin")
        assert zone.id == "Europe/Berlin"
        assert zone == ZoneId("Europe/Berlin")
        assert str(zone) == "Europe/Berlin"

    @pytest.mark.parametrize("text", ["+02:00", "-05:00", "Z"])
    def test_offset_ids_are_rejected(self, text: str) -> None:
        """Offset-shaped ids are not regions."""
        with pytest.raises(InvalidFieldError, match="must name a region"):
            ZoneId(text)

    def test_unknown_region(self) -> None:
        """Ids missing from the tz database are rejected."""
        with pytest.raises(InvalidFieldError, match="unknown zone id"):
            ZoneId("Mars/Olympus_Mons")

    def test_empty(self) -> None:
        """An empty id is rejected."""
        with pytest.raises(InvalidFieldError, match="non-empty"):
            ZoneId("")

    def test_offset_at(self) -> None:
        """Vienna is +02:00 in summer and +01:00 in winter."""
        vienna = ZoneId("Europe/Vienna")
        assert vienna.offset_at(Instant(1_592_217_000)) == ZoneOffset(7200)
        assert vienna.offset_at(Instant(0)) == ZoneOffset(3600)

    def test_offset_at_far_future(self) -> None:
        """Years beyond 9999 reuse the repeating 400-year rules."""
        vienna = ZoneId("Europe/Vienna")
        # 12020-06-15T00:00:00Z
        epoch_second = (18428 + 10_000 * 146_097 // 400) * 86_400
        assert vienna.offset_at(Instant(epoch_second)) == ZoneOffset(7200)

    def test_valid_offsets(self) -> None:
        """Gaps have no valid offset and overlaps have two."""
        vienna = ZoneId("Europe/Vienna")
        assert vienna.valid_offsets(LocalDateTime.of(2021, 6, 1, 12, 0)) == [
            ZoneOffset(7200)
        ]
        assert vienna.valid_offsets(LocalDateTime.of(2021, 3, 28, 2, 30)) == []
        assert vienna.valid_offsets(LocalDateTime.of(2021, 10, 31, 2, 30)) == [
            ZoneOffset(7200),
            ZoneOffset(3600),
        ]

    def test_gap_transition(self) -> None:
        """The spring gap in Vienna is one hour long."""
        vienna = ZoneId("Europe/Vienna")
        assert vienna.gap_transition(LocalDateTime.of(2021, 3, 28, 2, 30)) == (
            3600,
            ZoneOffset(7200),
        )
        assert vienna.gap_transition(LocalDateTime.of(2021, 3, 28, 4, 0)) is None
