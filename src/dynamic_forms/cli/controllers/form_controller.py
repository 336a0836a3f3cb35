# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from dynamic_forms.cli.forms.section_form import create_section_form
from dynamic_forms.cli.repositories.service_repository import ServiceSettingsRepository
from dynamic_forms.cli.repositories.submission_repository import SubmissionRepository
from dynamic_forms.cli.services.submission_service import SubmissionService
from dynamic_forms.cli.ui import (
    BACK,
    confirm_action,
    console,
    print_error,
    print_header,
    print_info,
    print_navigation_tip,
    print_success,
    print_text,
    prompt_text_input,
)
from dynamic_forms.cli.utils import validate_roll_number
from dynamic_forms.client.form_service import FormServiceClient
from dynamic_forms.config import load_form_schema_file
from dynamic_forms.config.errors import FetchError, RegistrationError, SchemaParseError
from dynamic_forms.config.schema import FormSchema
from dynamic_forms.config.values import PlainValue
from dynamic_forms.engine.session import FormSession, SessionView
from dynamic_forms.errors import DynamicFormsError


class FormController:
    """Controller for the fill-in-a-form workflow: login, load, walk the sections, submit."""

    def __init__(self, config_dir: Path, schema_source: str | None = None, save: bool = True):
        self.config_dir = config_dir
        self.schema_source = schema_source
        self.save = save
        self.settings_repository = ServiceSettingsRepository(config_dir)
        self.submission_repository = SubmissionRepository(config_dir)
        self.client = FormServiceClient(self.settings_repository.load_or_default())
        self.roll_number: str | None = None

    def run(self, roll_number: str | None = None, name: str | None = None) -> dict[str, PlainValue] | None:
        """Main entry point. Returns the submitted answers, or None if the user quit."""
        print_header("Dynamic Form")

        schema = self._load_schema(roll_number, name)
        if schema is None:
            print_info("No form loaded")
            return None

        submitter = SubmissionService(self.submission_repository, schema, self.roll_number, save=self.save)
        session = FormSession(submitter=submitter)
        session.load_form(schema)

        print_header(schema.title)
        print_navigation_tip()
        return self._walk_sections(session)

    def _load_schema(self, roll_number: str | None, name: str | None) -> FormSchema | None:
        self.roll_number = roll_number
        if self.schema_source:
            try:
                return load_form_schema_file(self.schema_source)
            except DynamicFormsError as e:
                print_error(f"Failed to load form: {e}")
                return None

        roll_number = roll_number or self._prompt_required("Roll number", validate_roll_number)
        if not roll_number:
            return None
        name = name or self._prompt_required("Name")
        if not name:
            return None
        self.roll_number = roll_number

        while True:
            try:
                with console.status("Loading form..."):
                    schema = self.client.load_form(roll_number, name)
                print_success(f"Loaded form '{schema.title}'")
                return schema
            except RegistrationError as e:
                print_error(f"Registration failed: {e}")
            except (FetchError, SchemaParseError) as e:
                print_error(f"Could not load the form: {e}")

            if not confirm_action("Try again?", default=True):
                return None

    def _prompt_required(
        self, label: str, validator: Callable[[str], tuple[bool, str | None]] | None = None
    ) -> str | None:
        while True:
            value = prompt_text_input(label, validator=validator)
            if value is None:
                return None
            if value:
                return value
            print_error(f"{label} is required")

    def _walk_sections(self, session: FormSession) -> dict[str, PlainValue] | None:
        while True:
            view = session.view
            self._render_section(view)

            form = create_section_form(view, on_change=session.change_value)
            result = form.prompt_all(back_from_start=not view.is_first)

            if result is None:
                if confirm_action("Discard your answers and quit?", default=False):
                    return None
                continue

            if result is BACK:
                session.go_prev()
                continue

            if view.is_last:
                if session.submit():
                    print_success("Form submitted")
                    return session.values
            elif session.go_next():
                continue

            print_error("Please fix the highlighted fields before continuing")

    def _render_section(self, view: SessionView) -> None:
        print_header(f"Section {view.section_index + 1} of {view.section_count}: {view.section.title}")
        if view.section.description:
            print_text(view.section.description)
            console.print()

        for field in view.fields:
            message = view.violation_for(field.field_id)
            if message:
                print_error(f"{field.label}: {message}")
        if view.violations:
            console.print()
