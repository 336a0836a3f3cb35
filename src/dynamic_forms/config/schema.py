# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum
from typing import Any

from pydantic import Field, ValidationError, field_validator, model_validator
from typing_extensions import Self

from dynamic_forms.config.base import ExportableMixin, WireModelBase
from dynamic_forms.config.errors import SchemaParseError


class WidgetCategory(str, Enum):
    FREE_TEXT = "free_text"
    LONG_TEXT = "long_text"
    SINGLE_SELECT_LIST = "single_select_list"
    SINGLE_SELECT_BUTTONS = "single_select_buttons"
    MULTI_SELECT_TOGGLES = "multi_select_toggles"


class FieldKind(str, Enum):
    """Semantic input type of a field. Values are the form service's wire names."""

    SHORT_TEXT = "text"
    PHONE = "tel"
    EMAIL = "email"
    LONG_TEXT = "textarea"
    DATE = "date"
    SINGLE_CHOICE_DROPDOWN = "dropdown"
    SINGLE_CHOICE_RADIO = "radio"
    MULTI_CHOICE_CHECKBOX = "checkbox"

    @property
    def is_choice(self) -> bool:
        return self in _CHOICE_KINDS

    @property
    def is_multi_choice(self) -> bool:
        return self is FieldKind.MULTI_CHOICE_CHECKBOX

    @property
    def widget(self) -> WidgetCategory:
        return _WIDGETS[self]


_CHOICE_KINDS = frozenset(
    {FieldKind.SINGLE_CHOICE_DROPDOWN, FieldKind.SINGLE_CHOICE_RADIO, FieldKind.MULTI_CHOICE_CHECKBOX}
)

_WIDGETS = {
    FieldKind.SHORT_TEXT: WidgetCategory.FREE_TEXT,
    FieldKind.PHONE: WidgetCategory.FREE_TEXT,
    FieldKind.EMAIL: WidgetCategory.FREE_TEXT,
    FieldKind.DATE: WidgetCategory.FREE_TEXT,
    FieldKind.LONG_TEXT: WidgetCategory.LONG_TEXT,
    FieldKind.SINGLE_CHOICE_DROPDOWN: WidgetCategory.SINGLE_SELECT_LIST,
    FieldKind.SINGLE_CHOICE_RADIO: WidgetCategory.SINGLE_SELECT_BUTTONS,
    FieldKind.MULTI_CHOICE_CHECKBOX: WidgetCategory.MULTI_SELECT_TOGGLES,
}


class Option(WireModelBase):
    """One selectable answer of a choice field.

    Attributes:
        value (str): Canonical identifier stored in the value store.
        label (str): Display text.
        data_test_id (str | None): Optional rendering hint from the service.
    """

    value: str
    label: str
    data_test_id: str | None = Field(default=None, alias="dataTestId")


class FieldValidation(WireModelBase):
    message: str | None = None


class FieldDefinition(WireModelBase):
    """A single input of a form.

    Attributes:
        field_id (str): Identifier unique across the whole form, used as the value store key.
        kind (FieldKind): Input type, serialized as ``type``.
        label (str): Display label.
        placeholder (str | None): Hint shown while the field is empty.
        required (bool): Whether an answer must be given before leaving the section.
        options (tuple[Option, ...] | None): Answers of a choice field. Ignored for other kinds.
        min_length (int | None): Minimum number of characters of a text answer.
        max_length (int | None): Maximum number of characters of a text answer.
        validation (FieldValidation | None): Holds the custom message that replaces every
            generated violation message of this field.
    """

    field_id: str = Field(alias="fieldId")
    kind: FieldKind = Field(alias="type")
    label: str
    placeholder: str | None = None
    required: bool = False
    data_test_id: str | None = Field(default=None, alias="dataTestId")
    validation: FieldValidation | None = None
    options: tuple[Option, ...] | None = None
    min_length: int | None = Field(default=None, alias="minLength")
    max_length: int | None = Field(default=None, alias="maxLength")

    @property
    def custom_error_message(self) -> str | None:
        return self.validation.message if self.validation else None

    @field_validator("required", mode="before")
    @classmethod
    def _coerce_required(cls, value: Any) -> Any:
        return False if value is None else value

    @model_validator(mode="after")
    def _validate_choice_options(self) -> Self:
        if self.kind.is_choice and not self.options:
            raise ValueError(f"Choice field {self.field_id!r} of type {self.kind.value!r} has no options")
        return self


class Section(WireModelBase):
    id: int = Field(alias="sectionId")
    title: str
    description: str = ""
    fields: tuple[FieldDefinition, ...] = ()


class FormSchema(ExportableMixin, WireModelBase):
    """Server-supplied description of a multi-section form.

    The schema is immutable once parsed and is owned by the session that loaded it.
    """

    title: str = Field(alias="formTitle")
    form_id: str = Field(alias="formId")
    version: str = ""
    sections: tuple[Section, ...]

    @field_validator("version", mode="before")
    @classmethod
    def _coerce_version(cls, value: Any) -> Any:
        if isinstance(value, (int, float)):
            return str(value)
        return value

    @model_validator(mode="after")
    def _validate_structure(self) -> Self:
        if not self.sections:
            raise ValueError("Form must contain at least one section")
        seen: set[str] = set()
        for field in self.iter_fields():
            if field.field_id in seen:
                raise ValueError(f"Duplicate fieldId {field.field_id!r}")
            seen.add(field.field_id)
        return self

    def iter_fields(self) -> Iterator[FieldDefinition]:
        for section in self.sections:
            yield from section.fields

    def get_field(self, field_id: str) -> FieldDefinition | None:
        return next((f for f in self.iter_fields() if f.field_id == field_id), None)


def parse_form_schema(payload: dict[str, Any]) -> FormSchema:
    """Parse a form schema from the form service payload.

    Args:
        payload: Either the service envelope ``{"message": ..., "form": {...}}``
            or the bare form object.

    Returns:
        The parsed FormSchema.

    Raises:
        SchemaParseError: If the payload is not a well-formed form description.
    """
    if not isinstance(payload, dict):
        raise SchemaParseError(f"Expected a form object, got {type(payload).__name__}")

    form = payload.get("form", payload)
    if not isinstance(form, dict):
        raise SchemaParseError(f"Expected a form object, got {type(form).__name__}")

    try:
        return FormSchema.model_validate(form)
    except ValidationError as e:
        raise SchemaParseError(f"Invalid form schema: {e}") from e
