# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict


class ConfigBase(BaseModel):
    model_config = ConfigDict(
        protected_namespaces=(),
        use_enum_values=False,
        extra="forbid",
    )


class WireModelBase(BaseModel):
    """Base for immutable models parsed from the form service payload.

    Unknown keys are ignored and every field can be populated either by its
    Python name or by its camelCase wire alias.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )


class ExportableMixin:
    def to_dict(self) -> dict[str, Any]:
        """Convert the model to a JSON-compatible dictionary using wire aliases."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_yaml(self, path: str | Path | None = None, *, indent: int | None = 2, **kwargs) -> str | None:
        """Convert the model to a YAML string or file.

        Args:
            path: Optional file path to write the YAML to. If None, returns the
                YAML string instead of writing to file.
            indent: Number of spaces for YAML indentation. Defaults to 2.
            **kwargs: Additional keyword arguments passed to yaml.safe_dump().

        Returns:
            The YAML string if path is None, otherwise None (file is written).
        """
        yaml_str = yaml.safe_dump(self.to_dict(), indent=indent, sort_keys=False, **kwargs)
        if path is None:
            return yaml_str
        with open(path, "w") as f:
            f.write(yaml_str)

    def to_json(self, path: str | Path | None = None, *, indent: int | None = 2, **kwargs) -> str | None:
        """Convert the model to a JSON string or file.

        Args:
            path: Optional file path to write the JSON to. If None, returns the
                JSON string instead of writing to file.
            indent: Number of spaces for JSON indentation. Defaults to 2.
            **kwargs: Additional keyword arguments passed to json.dumps().

        Returns:
            The JSON string if path is None, otherwise None (file is written).
        """
        json_str = json.dumps(self.to_dict(), indent=indent, **kwargs)
        if path is None:
            return json_str
        with open(path, "w") as f:
            f.write(json_str)
