# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections.abc import Callable

from dynamic_forms.config.schema import FieldDefinition
from dynamic_forms.config.utils.constants import MAX_LENGTH_MESSAGE, MIN_LENGTH_MESSAGE, REQUIRED_FIELD_MESSAGE
from dynamic_forms.config.values import MultiValue, ScalarValue, Value

FieldRule = Callable[[FieldDefinition, "Value | None"], "str | None"]


def check_required(field: FieldDefinition, value: Value | None) -> str | None:
    if not field.required:
        return None

    if field.kind.is_multi_choice:
        match value:
            case MultiValue(items=items) if items:
                return None
            case _:
                return REQUIRED_FIELD_MESSAGE

    match value:
        case ScalarValue(text=text) if text:
            return None
        case _:
            return REQUIRED_FIELD_MESSAGE


def check_min_length(field: FieldDefinition, value: Value | None) -> str | None:
    match value:
        case ScalarValue(text=text) if field.min_length and len(text) < field.min_length:
            return MIN_LENGTH_MESSAGE.format(min_length=field.min_length)
        case _:
            return None


def check_max_length(field: FieldDefinition, value: Value | None) -> str | None:
    match value:
        case ScalarValue(text=text) if field.max_length and len(text) > field.max_length:
            return MAX_LENGTH_MESSAGE.format(max_length=field.max_length)
        case _:
            return None


# Evaluation order is significant: only the first failing rule is reported.
FIELD_RULES: tuple[FieldRule, ...] = (check_required, check_min_length, check_max_length)


def validate_field(field: FieldDefinition, value: Value | None) -> str | None:
    """Validate the current answer of a field.

    Rules are evaluated as required, then minimum length, then maximum length,
    stopping at the first one that fails. Length rules only apply to text answers.

    Args:
        field: The field definition.
        value: The field's current answer, or None if absent.

    Returns:
        The violation message, or None if the answer is valid. A custom
        message on the field replaces whichever generated message fired.
    """
    for rule in FIELD_RULES:
        message = rule(field, value)
        if message is not None:
            return field.custom_error_message or message
    return None
