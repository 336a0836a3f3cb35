# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from dynamic_forms.cli.forms.field import Field, MultiSelectField, SelectField, TextField
from dynamic_forms.cli.forms.form import Form
from dynamic_forms.config.schema import FieldDefinition, FieldKind, WidgetCategory
from dynamic_forms.config.values import PlainValue
from dynamic_forms.engine.session import SessionView

EMPTY_CHOICE_LABEL = "Select..."

_FORMAT_HINTS = {
    FieldKind.DATE: "YYYY-MM-DD",
    FieldKind.EMAIL: "name@example.com",
    FieldKind.PHONE: "phone number",
}


def create_widget(field: FieldDefinition, current: PlainValue | None = None) -> Field:
    """Create the terminal widget for a field definition, pre-filled with its current answer."""
    options = {option.value: option.label for option in field.options or ()}

    match field.kind.widget:
        case WidgetCategory.FREE_TEXT:
            return TextField(
                field.field_id,
                _markup_label(field),
                current=current if isinstance(current, str) else None,
                placeholder=field.placeholder or _FORMAT_HINTS.get(field.kind),
            )
        case WidgetCategory.LONG_TEXT:
            return TextField(
                field.field_id,
                _markup_label(field),
                current=current if isinstance(current, str) else None,
                placeholder=field.placeholder,
                multiline=True,
            )
        case WidgetCategory.SINGLE_SELECT_LIST:
            return SelectField(
                field.field_id,
                _plain_label(field),
                options={"": EMPTY_CHOICE_LABEL, **options},
                current=current if isinstance(current, str) else None,
            )
        case WidgetCategory.SINGLE_SELECT_BUTTONS:
            return SelectField(
                field.field_id,
                _plain_label(field),
                options=options,
                current=current if isinstance(current, str) else None,
                radio=True,
            )
        case WidgetCategory.MULTI_SELECT_TOGGLES:
            return MultiSelectField(
                field.field_id,
                _plain_label(field),
                options=options,
                current=list(current) if isinstance(current, list) else None,
            )
    raise ValueError(f"No widget for field kind {field.kind!r}")


def create_section_form(view: SessionView, on_change: Callable[[str, Any], None]) -> Form:
    """Build a form for the active section of a session.

    Every answer is passed to ``on_change`` as soon as it is entered. Empty text
    input is passed as None so a skipped field stays unanswered.
    """

    def report(field_id: str, value: Any) -> None:
        on_change(field_id, None if value == "" else value)

    widgets = [create_widget(field, view.value_of(field.field_id)) for field in view.fields]
    return Form(view.section.title, widgets, on_change=report)


def _plain_label(field: FieldDefinition) -> str:
    return f"{field.label} *" if field.required else field.label


def _markup_label(field: FieldDefinition) -> str:
    label = field.label.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
    return f"{label} <required>*</required>" if field.required else label
