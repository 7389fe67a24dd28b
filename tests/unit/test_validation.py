"""Tests for OS identifier and version validation."""

from decimal import Decimal
from unittest.mock import Mock

import pytest

from osfont.core.exceptions import (
    EmptyOSVersionError,
    InvalidArgumentError,
    InvalidOSTypeError,
    InvalidOSVersionValueError,
    ValidationError,
)
from osfont.core.validation import normalize_os_name, normalize_os_version, parse_version


class TestNormalizeOSName:
    """Test OS identifier normalization."""

    def test_lowercases(self):
        """Test OS tags are lowercased."""
        assert normalize_os_name("Ubuntu") == "ubuntu"

    def test_empty_string_kept(self):
        """Test the empty OS tag is preserved."""
        assert normalize_os_name("") == ""

    def test_rejects_none(self):
        """Test None is rejected as an OS tag."""
        with pytest.raises(InvalidOSTypeError) as exc_info:
            normalize_os_name(None)

        assert "NoneType" in str(exc_info.value)
        assert exc_info.value.details is None


class TestNormalizeOSVersion:
    """Test version vector normalization."""

    def test_returns_int_tuple(self):
        """Test a list of ints becomes a tuple."""
        assert normalize_os_version([6, 1, 7601]) == (6, 1, 7601)

    def test_converts_integral_floats(self):
        """Test integral floats are converted to ints."""
        version = normalize_os_version([10.0, 4.0])

        assert version == (10, 4)
        assert all(isinstance(v, int) for v in version)

    def test_scalar(self):
        """Test a bare number becomes a one-component vector."""
        assert normalize_os_version(7) == (7,)

    def test_zero_allowed(self):
        """Test zero components are valid."""
        assert normalize_os_version([0, 0]) == (0, 0)

    def test_empty_rejected(self):
        """Test an empty vector is rejected."""
        with pytest.raises(EmptyOSVersionError):
            normalize_os_version([])

    def test_large_integers_kept_exact(self):
        """Test integers beyond float range are accepted unchanged."""
        assert normalize_os_version([10, 10**400]) == (10, 10**400)

    def test_array_like_converted(self):
        """Test objects exposing tolist(), such as numpy arrays, are accepted."""
        array = Mock(spec=["tolist"])
        array.tolist.return_value = [10.0, 11.0]

        assert normalize_os_version(array) == (10, 11)

    def test_decimal_scalar(self):
        """Test an integral Decimal is accepted as a major version."""
        assert normalize_os_version(Decimal("7")) == (7,)

    def test_error_carries_offending_value(self):
        """Test the error details hold the rejected component."""
        with pytest.raises(InvalidOSVersionValueError) as exc_info:
            normalize_os_version([10, -2])

        assert exc_info.value.details == -2


class TestParseVersion:
    """Test dotted version text parsing."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [("10.11.6", [10, 11, 6]), ("7", [7]), (" 22.04 ", [22, 4]), ("6.1.7601", [6, 1, 7601])],
    )
    def test_parses(self, text, expected):
        """Test dotted version text is split into integers."""
        assert parse_version(text) == expected

    @pytest.mark.parametrize("text", ["", "10.x", "-1", "10..4", "1.2.", "v10"])
    def test_rejects_malformed_text(self, text):
        """Test malformed version text is rejected."""
        with pytest.raises(InvalidOSVersionValueError):
            parse_version(text)


class TestExceptionHierarchy:
    """Test that argument errors share one catchable base."""

    def test_argument_errors_are_validation_errors(self):
        """Test argument errors derive from ValidationError."""
        assert issubclass(InvalidOSTypeError, InvalidArgumentError)
        assert issubclass(EmptyOSVersionError, InvalidArgumentError)
        assert issubclass(InvalidArgumentError, ValidationError)
