"""Input validation for OS identifiers and version vectors."""

import math
import numbers
import re
from collections.abc import Sequence
from decimal import Decimal
from typing import Any

from .exceptions import (
    EmptyOSVersionError,
    InvalidOSTypeError,
    InvalidOSVersionTypeError,
    InvalidOSVersionValueError,
)

_VERSION_TEXT = re.compile(r"^\s*\d+(\.\d+)*\s*$")


def normalize_os_name(os_name: Any) -> str:
    """
    Validate and normalize an OS identifier.

    Args:
        os_name: OS tag such as ``"macos"``; any letter case is accepted

    Returns:
        The lowercase tag, or ``""`` for an unknown OS

    Raises:
        InvalidOSTypeError: If ``os_name`` is not a string
    """
    if not isinstance(os_name, str):
        raise InvalidOSTypeError(os_name)
    return os_name.lower()


def normalize_os_version(os_version: Any) -> tuple[int, ...]:
    """
    Validate a version vector and convert it to a tuple of ints.

    A single number is treated as a one-component vector. Array-likes that
    expose ``tolist()`` (numpy arrays and scalars) are converted first, and
    ``Decimal`` and ``Fraction`` components are accepted when integral.

    Raises:
        EmptyOSVersionError: If the vector is missing or empty
        InvalidOSVersionTypeError: If a component is not a real number
        InvalidOSVersionValueError: If a component is negative, non-finite or fractional
    """
    if os_version is None:
        raise EmptyOSVersionError()

    if isinstance(os_version, (str, bytes)):
        raise InvalidOSVersionTypeError(os_version)

    if hasattr(os_version, "tolist"):
        os_version = os_version.tolist()

    if isinstance(os_version, numbers.Number):
        components = [os_version]
    elif isinstance(os_version, Sequence):
        components = list(os_version)
    else:
        raise InvalidOSVersionTypeError(os_version)

    if not components:
        raise EmptyOSVersionError()

    return tuple(_validate_component(c) for c in components)


def _validate_component(value: Any) -> int:
    # bool is a numbers.Real subclass but never a version number
    if isinstance(value, bool) or not isinstance(value, (numbers.Real, Decimal)):
        raise InvalidOSVersionTypeError(value)

    # integers of any size stay exact; float conversion would overflow
    if isinstance(value, numbers.Integral):
        integral = True
    elif isinstance(value, numbers.Rational):
        integral = value.denominator == 1
    elif isinstance(value, Decimal):
        integral = value.is_finite() and value == value.to_integral_value()
    else:
        integral = math.isfinite(value) and value == round(value)

    if not integral or value < 0:
        raise InvalidOSVersionValueError(value)
    return int(value)


def parse_version(text: str) -> list[int]:
    """Parse dotted version text such as ``"10.11.6"`` into ``[10, 11, 6]``."""
    if not _VERSION_TEXT.match(text):
        raise InvalidOSVersionValueError(text)
    return [int(part) for part in text.strip().split(".")]
