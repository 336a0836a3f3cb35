# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import Field, field_validator

from dynamic_forms.config.base import ConfigBase
from dynamic_forms.config.utils.constants import DEFAULT_SERVICE_URL, DEFAULT_TIMEOUT


class FormServiceParams(ConfigBase):
    """Connection settings for the remote form service.

    Attributes:
        base_url (str): Root URL of the service. Defaults to ``DYNAMIC_FORMS_SERVICE_URL``
            or the public form generator.
        timeout (float): Request timeout in seconds. Defaults to 30.
    """

    base_url: str = Field(default=DEFAULT_SERVICE_URL, validate_default=True)
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)

    @field_validator("base_url")
    @classmethod
    def _validate_base_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return value.rstrip("/")
