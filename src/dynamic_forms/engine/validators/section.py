# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from dynamic_forms.config.schema import Section
from dynamic_forms.config.values import ValueStore
from dynamic_forms.engine.validators.field import validate_field


def validate_section(section: Section, values: ValueStore) -> dict[str, str]:
    """Validate every field of a section against the live answers.

    Only the given section is checked. The result is meant to replace the
    session's violation map, not to be merged into it.

    Returns:
        Mapping of field id to violation message. Empty when the section is valid.
    """
    violations: dict[str, str] = {}
    for field in section.fields:
        message = validate_field(field, values.get(field.field_id))
        if message is not None:
            violations[field.field_id] = message
    return violations
