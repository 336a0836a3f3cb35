# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from dynamic_forms.cli.repositories.base import ConfigRepository
from dynamic_forms.config.settings import FormServiceParams
from dynamic_forms.config.utils.constants import SERVICE_SETTINGS_FILE_NAME


class ServiceSettingsRepository(ConfigRepository[FormServiceParams]):
    """Repository for the form service connection settings."""

    model_type = FormServiceParams

    @property
    def file_name(self) -> str:
        return SERVICE_SETTINGS_FILE_NAME

    def load_or_default(self) -> FormServiceParams:
        """Load saved settings, falling back to the environment defaults."""
        return self.load() or FormServiceParams()
