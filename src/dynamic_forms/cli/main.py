# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import typer

from dynamic_forms.cli.commands import fill, service
from dynamic_forms.cli.commands import inspect as inspect_cmd
from dynamic_forms.logging import LoggingConfig, configure_logging

app = typer.Typer(
    name="dynamic-forms",
    help="Dynamic Forms CLI - Fill in multi-section forms fetched from a form service",
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback()
def _main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs"),
) -> None:
    configure_logging(LoggingConfig.debug() if verbose else LoggingConfig.default())


app.command(name="fill", help="Fill in a form interactively")(fill.fill_command)
app.command(name="inspect", help="Validate and display a form schema")(inspect_cmd.inspect_command)

config_app = typer.Typer(
    name="config",
    help="Manage configuration files",
    no_args_is_help=True,
)
config_app.command(name="service", help="Configure the form service connection")(service.service_command)

app.add_typer(config_app, name="config")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
