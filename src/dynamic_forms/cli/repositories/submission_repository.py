# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from pathlib import Path

from pydantic import BaseModel, Field

from dynamic_forms.config.utils.constants import SUBMISSIONS_DIR_NAME
from dynamic_forms.config.utils.io_helpers import load_config_file, save_config_file
from dynamic_forms.config.values import PlainValue

logger = logging.getLogger(__name__)

_UNSAFE_FILE_CHARS = re.compile(r"[^A-Za-z0-9_.-]+")


class SubmissionRecord(BaseModel):
    """A completed set of answers for one form."""

    form_id: str
    version: str = ""
    roll_number: str | None = None
    submitted_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    values: dict[str, PlainValue]


class SubmissionRepository:
    """Stores submitted answers as one YAML file per submission."""

    def __init__(self, config_dir: Path):
        self.config_dir = config_dir

    @property
    def submissions_dir(self) -> Path:
        return self.config_dir / SUBMISSIONS_DIR_NAME

    def save(self, record: SubmissionRecord) -> Path:
        """Save a submission and return the file it was written to."""
        stamp = record.submitted_at.strftime("%Y%m%dT%H%M%S")
        parts = [record.form_id, record.roll_number, stamp]
        file_name = "-".join(_UNSAFE_FILE_CHARS.sub("_", part) for part in parts if part) + ".yaml"
        file_path = self.submissions_dir / file_name
        save_config_file(file_path, record.model_dump(mode="json"))
        logger.info(f"Saved submission for form {record.form_id!r} to {file_path}")
        return file_path

    def load(self, file_path: Path) -> SubmissionRecord:
        return SubmissionRecord.model_validate(load_config_file(file_path))

    def list_all(self) -> list[Path]:
        """List saved submission files sorted by file name."""
        if not self.submissions_dir.exists():
            return []
        return sorted(self.submissions_dir.glob("*.yaml"))
