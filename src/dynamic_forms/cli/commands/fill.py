# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import typer

from dynamic_forms.cli.controllers.form_controller import FormController
from dynamic_forms.config.utils.constants import DYNAMIC_FORMS_HOME


def fill_command(
    roll_number: str | None = typer.Option(None, "--roll-number", "-r", help="Roll number used to register"),
    name: str | None = typer.Option(None, "--name", "-n", help="Name used to register"),
    schema: str | None = typer.Option(
        None, "--schema", "-s", help="Load the form from a YAML/JSON file or URL instead of the form service"
    ),
    no_save: bool = typer.Option(False, "--no-save", help="Do not save the submitted answers"),
) -> None:
    """Fill in a form interactively, section by section."""
    controller = FormController(DYNAMIC_FORMS_HOME, schema_source=schema, save=not no_save)
    if controller.run(roll_number=roll_number, name=name) is None:
        raise typer.Exit(code=1)
