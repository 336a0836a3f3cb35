# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import typer
from rich.table import Table

from dynamic_forms.cli.repositories.service_repository import ServiceSettingsRepository
from dynamic_forms.cli.ui import console, display_table, print_error, print_header, print_text
from dynamic_forms.client.form_service import FormServiceClient
from dynamic_forms.config import load_form_schema_file
from dynamic_forms.config.schema import FieldDefinition, FormSchema, Section
from dynamic_forms.config.utils.constants import DYNAMIC_FORMS_HOME, NordColor
from dynamic_forms.errors import DynamicFormsError


def inspect_command(
    source: str | None = typer.Argument(None, help="YAML/JSON file or URL holding a form schema"),
    roll_number: str | None = typer.Option(
        None, "--roll-number", "-r", help="Fetch the form assigned to this roll number from the form service"
    ),
) -> None:
    """Validate a form schema and show its sections and fields."""
    if (source is None) == (roll_number is None):
        print_error("Provide either a schema SOURCE or --roll-number")
        raise typer.Exit(code=2)

    try:
        if source is not None:
            schema = load_form_schema_file(source)
        else:
            params = ServiceSettingsRepository(DYNAMIC_FORMS_HOME).load_or_default()
            schema = FormServiceClient(params).fetch_schema(roll_number)
    except DynamicFormsError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    display_schema(schema)


def display_schema(schema: FormSchema) -> None:
    print_header(schema.title)
    print_text(f"Form ID: {schema.form_id}    Version: {schema.version or '-'}    Sections: {len(schema.sections)}")
    console.print()
    for index, section in enumerate(schema.sections, start=1):
        display_table(build_section_table(section, index))
        console.print()


def build_section_table(section: Section, index: int) -> Table:
    table = Table(
        title=f"{index}. {section.title}",
        caption=section.description or None,
        border_style=NordColor.NORD8.value,
        title_justify="left",
    )
    table.add_column("Field ID", style=NordColor.NORD14.value)
    table.add_column("Type")
    table.add_column("Label")
    table.add_column("Required", justify="center")
    table.add_column("Constraints")
    table.add_column("Options")

    for field in section.fields:
        table.add_row(
            field.field_id,
            field.kind.value,
            field.label,
            "✓" if field.required else "",
            _describe_constraints(field),
            ", ".join(option.value for option in field.options or ()) if field.kind.is_choice else "",
        )
    return table


def _describe_constraints(field: FieldDefinition) -> str:
    parts = []
    if field.min_length:
        parts.append(f"min {field.min_length}")
    if field.max_length:
        parts.append(f"max {field.max_length}")
    if field.custom_error_message:
        parts.append(f"message: {field.custom_error_message!r}")
    return ", ".join(parts)
