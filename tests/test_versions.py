"""Tests for changes_utils.versions."""

from __future__ import annotations

import pytest
from packaging.version import Version

from changes_utils.exceptions import VersionFormatError
from changes_utils.versions import increment_version


class TestIncrementVersion:
    """Tests for increment_version()."""

    def test_integer(self) -> None:
        """A bare integer goes up by one."""
        assert increment_version("1") == "2"

    def test_integer_grows_a_digit(self) -> None:
        """Integers are not zero-padded or width-limited."""
        assert increment_version("9") == "10"

    def test_one_decimal(self) -> None:
        """One fractional digit bumps by 0.1."""
        assert increment_version("1.2") == "1.3"

    def test_two_decimals(self) -> None:
        """Two fractional digits bump by 0.01."""
        assert increment_version("1.23") == "1.24"

    def test_three_decimals(self) -> None:
        """Three fractional digits bump by 0.001."""
        assert increment_version("0.001") == "0.002"

    def test_decimal_carries_and_keeps_width(self) -> None:
        """Overflow carries into the integer part, width is kept."""
        assert increment_version("1.99") == "2.00"

    def test_decimal_carry_within_fraction(self) -> None:
        """Carry inside the fraction keeps leading zeros."""
        assert increment_version("0.009") == "0.010"

    def test_many_decimals_stay_fixed_point(self) -> None:
        """Tiny steps never come out in scientific notation."""
        assert increment_version("0.0000001") == "0.0000002"

    def test_dotted(self) -> None:
        """Three segments bump the last one."""
        assert increment_version("1.2.3") == "1.2.4"

    def test_dotted_keeps_padding(self) -> None:
        """A zero-padded last segment stays padded."""
        assert increment_version("1.2.09") == "1.2.10"

    def test_dotted_patch_overflows_width(self) -> None:
        """The last segment grows instead of carrying into the minor."""
        assert increment_version("1.2.99") == "1.2.100"

    @pytest.mark.parametrize(
        "version",
        ["0", "41", "0.1", "1.23", "2.999", "0.01", "1.2.3", "0.0.9", "10.20.030"],
    )
    def test_strictly_greater_same_shape(self, version: str) -> None:
        """Every result is greater and has as many segments as the input."""
        new = increment_version(version)
        assert Version(new) > Version(version)
        assert new.count(".") == version.count(".")

    @pytest.mark.parametrize(
        "version", ["v1.2", "1.2.3.4", "1.2-rc1", "", "1.", ".5", "1.2.3-TRIAL", "١"]
    )
    def test_unrecognized_format(self, version: str) -> None:
        """Other shapes raise VersionFormatError naming the version."""
        with pytest.raises(VersionFormatError) as excinfo:
            increment_version(version)
        assert f"'{version}'" in str(excinfo.value)
