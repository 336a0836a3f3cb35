# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations


def validate_url(url: str) -> bool:
    """Check that a string is an http(s) URL with something after the scheme."""
    scheme, sep, rest = url.partition("://")
    return bool(sep) and scheme in ("http", "https") and bool(rest)


def validate_numeric_range(value: str, min_value: float, max_value: float) -> tuple[bool, float | None]:
    """Parse a number and check it lies in ``[min_value, max_value]``.

    Returns:
        ``(True, number)`` when valid, ``(False, None)`` otherwise.
    """
    try:
        number = float(value)
    except ValueError:
        return False, None
    if not min_value <= number <= max_value:
        return False, None
    return True, number


def validate_roll_number(value: str) -> tuple[bool, str | None]:
    """Check that a roll number is a single non-empty token."""
    token = value.strip()
    if not token:
        return False, "Roll number is required"
    if any(ch.isspace() for ch in token):
        return False, "Roll number must not contain spaces"
    return True, None
