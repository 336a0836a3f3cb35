# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace

from pydantic import BaseModel, ConfigDict

from dynamic_forms.config.schema import FieldDefinition, FormSchema, Section
from dynamic_forms.config.values import MultiValue, PlainValue, Value, ValueStore, as_value
from dynamic_forms.engine.navigation import SectionNavigator
from dynamic_forms.engine.validators.section import validate_section

logger = logging.getLogger(__name__)

Submitter = Callable[[dict[str, PlainValue]], None]


class SessionView(BaseModel):
    """Immutable snapshot of a session, used by renderers."""

    model_config = ConfigDict(frozen=True)

    form_title: str
    section: Section
    section_index: int
    section_count: int
    values: dict[str, PlainValue]
    violations: dict[str, str]

    @property
    def is_first(self) -> bool:
        return self.section_index == 0

    @property
    def is_last(self) -> bool:
        return self.section_index == self.section_count - 1

    @property
    def fields(self) -> tuple[FieldDefinition, ...]:
        return self.section.fields

    def value_of(self, field_id: str) -> PlainValue | None:
        return self.values.get(field_id)

    def violation_for(self, field_id: str) -> str | None:
        return self.violations.get(field_id)


@dataclass(frozen=True)
class SessionState:
    schema: FormSchema
    section_index: int = 0
    values: ValueStore = field(default_factory=ValueStore)
    violations: dict[str, str] = field(default_factory=dict)

    @property
    def section(self) -> Section:
        return self.schema.sections[self.section_index]

    def navigator(self) -> SectionNavigator:
        return SectionNavigator(len(self.schema.sections), self.section_index)


class FormSession:
    """Walks a user through the sections of a loaded form.

    Every intent builds the next state in full and commits it in one assignment,
    so the read model never exposes a half-applied intent. Validation failures
    are reported through the violation map and the intent's return value; no
    intent raises on invalid input.

    Args:
        submitter: Receives the collected answers, keyed by field id, when a
            submit passes validation on the last section.
    """

    def __init__(self, submitter: Submitter | None = None):
        self._submitter = submitter
        self._state: SessionState | None = None

    @property
    def is_loaded(self) -> bool:
        return self._state is not None

    @property
    def schema(self) -> FormSchema | None:
        return self._state.schema if self._state else None

    @property
    def section_index(self) -> int | None:
        return self._state.section_index if self._state else None

    @property
    def values(self) -> dict[str, PlainValue]:
        return self._state.values.to_dict() if self._state else {}

    @property
    def violations(self) -> dict[str, str]:
        return dict(self._state.violations) if self._state else {}

    @property
    def view(self) -> SessionView | None:
        """Snapshot of the active section, answers and violations. None before a form is loaded."""
        state = self._state
        if state is None:
            return None
        return SessionView(
            form_title=state.schema.title,
            section=state.section,
            section_index=state.section_index,
            section_count=len(state.schema.sections),
            values=state.values.to_dict(),
            violations=dict(state.violations),
        )

    def get_value(self, field_id: str) -> Value | None:
        return self._state.values.get(field_id) if self._state else None

    def load_form(self, schema: FormSchema) -> SessionView:
        """Start a new session on the first section with no answers."""
        if self._state is not None:
            logger.info(f"Replacing loaded form {self._state.schema.form_id!r} with {schema.form_id!r}")
        self._state = SessionState(schema=schema)
        logger.debug(f"Loaded form {schema.form_id!r} with {len(schema.sections)} section(s)")
        return self.view

    def change_value(self, field_id: str, value: Value | PlainValue | None) -> bool:
        """Replace a field's answer and clear that field's violation.

        Multi-choice fields take a list of option values and every other field
        takes a string. None removes the answer.

        Returns:
            True once the answer is stored. False is a guard against caller
            errors: no form loaded, an id that is not in the schema, or a value
            whose type or shape does not fit the field. Such calls are logged and
            leave the session untouched.
        """
        state = self._state
        if state is None:
            logger.warning("Ignoring value change: no form loaded")
            return False
        definition = state.schema.get_field(field_id)
        if definition is None:
            logger.warning(f"Ignoring value change for unknown field {field_id!r}")
            return False
        try:
            typed_value = as_value(value)
        except TypeError as e:
            logger.warning(f"Ignoring value change for field {field_id!r}: {e}")
            return False
        if not _fits_field(definition, typed_value):
            expected = "a list of option values" if definition.kind.is_multi_choice else "a string"
            logger.warning(f"Ignoring value change for {definition.kind.value} field {field_id!r}: expected {expected}")
            return False

        values = state.values.copy()
        values.set(field_id, typed_value)
        violations = {k: v for k, v in state.violations.items() if k != field_id}
        self._state = replace(state, values=values, violations=violations)
        return True

    def go_next(self) -> bool:
        """Advance to the next section if the active one is valid.

        On failure the section index is unchanged and the violation map holds
        the active section's violations.
        """
        state = self._state
        if state is None:
            logger.warning("Ignoring next: no form loaded")
            return False
        navigator = state.navigator()
        if not navigator.can_advance():
            logger.info("Ignoring next: already at the last section")
            return False

        violations = validate_section(state.section, state.values)
        if violations:
            logger.debug(f"Section {state.section.id} has {len(violations)} violation(s)")
            self._state = replace(state, violations=violations)
            return False

        self._state = replace(state, section_index=navigator.advance(), violations=violations)
        return True

    def go_prev(self) -> bool:
        """Return to the previous section. No validation takes place."""
        state = self._state
        if state is None:
            logger.warning("Ignoring prev: no form loaded")
            return False
        navigator = state.navigator()
        if not navigator.can_retreat():
            logger.info("Ignoring prev: already at the first section")
            return False

        self._state = replace(state, section_index=navigator.retreat())
        return True

    def submit(self) -> bool:
        """Validate the last section and hand all answers to the submitter.

        Submitting again after a success hands the answers over again.
        """
        state = self._state
        if state is None:
            logger.warning("Ignoring submit: no form loaded")
            return False
        if not state.navigator().is_last:
            logger.info("Ignoring submit: not at the last section")
            return False

        violations = validate_section(state.section, state.values)
        self._state = replace(state, violations=violations)
        if violations:
            logger.debug(f"Submit blocked by {len(violations)} violation(s)")
            return False

        collected = state.values.to_dict()
        logger.info(f"Submitting {len(collected)} answer(s) for form {state.schema.form_id!r}")
        if self._submitter is not None:
            self._submitter(collected)
        return True


def _fits_field(definition: FieldDefinition, value: Value | None) -> bool:
    match value:
        case None:
            return True
        case MultiValue():
            return definition.kind.is_multi_choice
        case _:
            return not definition.kind.is_multi_choice
