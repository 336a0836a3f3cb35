# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Any

from dynamic_forms.cli.forms.builder import FormBuilder
from dynamic_forms.cli.forms.field import TextField
from dynamic_forms.cli.forms.form import Form
from dynamic_forms.cli.utils import validate_numeric_range, validate_url
from dynamic_forms.config.settings import FormServiceParams
from dynamic_forms.config.utils.constants import DEFAULT_SERVICE_URL, DEFAULT_TIMEOUT

MIN_TIMEOUT = 1.0
MAX_TIMEOUT = 600.0


class ServiceFormBuilder(FormBuilder[FormServiceParams]):
    """Builds the interactive form for the form service connection settings."""

    config_type = FormServiceParams

    def __init__(self):
        super().__init__("Form Service Configuration")

    def create_form(self, initial_data: dict[str, Any] | None = None) -> Form:
        initial_data = initial_data or {}
        fields = [
            TextField(
                "base_url",
                "Form service URL",
                current=initial_data.get("base_url", DEFAULT_SERVICE_URL),
                validator=self._validate_base_url,
            ),
            # The answer stays text; FormServiceParams parses it as a float.
            TextField(
                "timeout",
                "Request timeout in seconds",
                current=str(initial_data.get("timeout", DEFAULT_TIMEOUT)),
                validator=self._validate_timeout,
            ),
        ]
        return Form(self.title, fields)

    def _validate_base_url(self, base_url: str) -> tuple[bool, str | None]:
        if not base_url:
            return False, "Service URL is required"
        if not validate_url(base_url):
            return False, "Invalid URL format (must start with http:// or https://)"
        return True, None

    def _validate_timeout(self, timeout: str) -> tuple[bool, str | None]:
        is_valid, _ = validate_numeric_range(timeout, MIN_TIMEOUT, MAX_TIMEOUT)
        if not is_valid:
            return False, f"Timeout must be a number between {MIN_TIMEOUT:g} and {MAX_TIMEOUT:g} seconds"
        return True, None
