# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import ClassVar, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from dynamic_forms.config.utils.io_helpers import load_config_file, save_config_file
from dynamic_forms.errors import DynamicFormsError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class ConfigRepository(ABC, Generic[T]):
    """Persists a single settings model as a YAML file in the config directory.

    Subclasses name the model class and the file it lives in.
    """

    model_type: ClassVar[type[BaseModel]]

    def __init__(self, config_dir: Path):
        self.config_dir = config_dir

    @property
    @abstractmethod
    def file_name(self) -> str:
        """Name of the settings file inside the config directory."""

    @property
    def config_file(self) -> Path:
        return self.config_dir / self.file_name

    def load(self) -> T | None:
        """Load the settings. Returns None if the file is missing or unreadable."""
        if not self.exists():
            return None

        try:
            return self.model_type.model_validate(load_config_file(self.config_file))
        except (DynamicFormsError, ValidationError) as e:
            logger.warning(f"Ignoring unreadable settings in {self.config_file}: {e}")
            return None

    def save(self, config: T) -> None:
        save_config_file(self.config_file, config.model_dump(mode="json", exclude_none=True))

    def exists(self) -> bool:
        return self.config_file.exists()

    def delete(self) -> None:
        if self.exists():
            self.config_file.unlink()
