# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections.abc import Iterator
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import TypeAlias


class _ValueBase(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class ScalarValue(_ValueBase):
    """Answer of a text, date or single-choice field."""

    value_type: Literal["scalar"] = "scalar"
    text: str

    def to_plain(self) -> str:
        return self.text


class MultiValue(_ValueBase):
    """Answer of a multi-choice field: the selected option values, in selection order."""

    value_type: Literal["multi"] = "multi"
    items: tuple[str, ...] = ()

    def to_plain(self) -> list[str]:
        return list(self.items)


Value: TypeAlias = Annotated[Union[ScalarValue, MultiValue], Field(discriminator="value_type")]

PlainValue: TypeAlias = Union[str, list[str]]


def as_value(raw: Value | str | list[str] | tuple[str, ...] | None) -> Value | None:
    """Coerce plain Python input into the value union.

    ``None`` stays absent, strings become ScalarValue and lists or tuples become MultiValue.
    """
    if raw is None or isinstance(raw, (ScalarValue, MultiValue)):
        return raw
    if isinstance(raw, str):
        return ScalarValue(text=raw)
    if isinstance(raw, (list, tuple)):
        return MultiValue(items=tuple(str(item) for item in raw))
    raise TypeError(f"Unsupported field value type: {type(raw).__name__}")


class ValueStore:
    """Mapping from field id to the field's current answer."""

    def __init__(self, values: dict[str, Value] | None = None):
        self._values: dict[str, Value] = dict(values) if values else {}

    def get(self, field_id: str) -> Value | None:
        """Get the current answer of a field, or None if it was never set."""
        return self._values.get(field_id)

    def set(self, field_id: str, value: Value | None) -> None:
        """Replace the answer of a field. Setting None makes the field absent again."""
        if value is None:
            self._values.pop(field_id, None)
        else:
            self._values[field_id] = value

    def copy(self) -> ValueStore:
        return ValueStore(self._values)

    def to_dict(self) -> dict[str, PlainValue]:
        """Export answers as plain strings and lists, in the order they were first set."""
        return {field_id: value.to_plain() for field_id, value in self._values.items()}

    def __contains__(self, field_id: object) -> bool:
        return field_id in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValueStore):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"ValueStore({self.to_dict()!r})"
