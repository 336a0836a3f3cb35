# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pathlib import Path

from dynamic_forms.cli.forms.service_builder import ServiceFormBuilder
from dynamic_forms.cli.repositories.service_repository import ServiceSettingsRepository
from dynamic_forms.cli.ui import (
    confirm_action,
    console,
    display_config_preview,
    print_header,
    print_info,
    print_success,
)


class ServiceController:
    """Controller for the form service settings workflow."""

    def __init__(self, config_dir: Path):
        self.config_dir = config_dir
        self.repository = ServiceSettingsRepository(config_dir)

    def run(self) -> None:
        """Main entry point for service configuration."""
        print_header("Configure Form Service")
        print_info(f"Configuration directory: {self.config_dir}")
        console.print()

        current = self.repository.load()
        if current is not None:
            display_config_preview(current.model_dump(mode="json"), "Current Configuration")
            console.print()
        else:
            print_info("No service settings saved yet, showing defaults")
            console.print()

        initial = self.repository.load_or_default()
        builder = ServiceFormBuilder()
        settings = builder.run(initial.model_dump(mode="json"))

        if settings is None:
            print_info("No changes made")
            return

        display_config_preview(settings.model_dump(mode="json"), "New Configuration")
        if not confirm_action("Save these settings?", default=True):
            print_info("No changes made")
            return

        self.repository.save(settings)
        print_success(f"Service settings saved to {self.repository.config_file}")
