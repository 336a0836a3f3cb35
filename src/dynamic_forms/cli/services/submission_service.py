# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from pathlib import Path

from dynamic_forms.cli.repositories.submission_repository import SubmissionRecord, SubmissionRepository
from dynamic_forms.cli.ui import display_config_preview, print_error, print_success
from dynamic_forms.config.schema import FormSchema
from dynamic_forms.config.values import PlainValue

logger = logging.getLogger(__name__)


class SubmissionService:
    """Receives the answers of a completed form: shows them and optionally saves them.

    Instances are callables so they can be passed to FormSession as its submitter.
    """

    def __init__(
        self,
        repository: SubmissionRepository,
        schema: FormSchema,
        roll_number: str | None = None,
        save: bool = True,
    ):
        self.repository = repository
        self.schema = schema
        self.roll_number = roll_number
        self.save = save
        self.last_saved_path: Path | None = None

    def __call__(self, values: dict[str, PlainValue]) -> None:
        display_config_preview(values, f"{self.schema.title}: Submitted Answers")

        if not self.save:
            return

        record = SubmissionRecord(
            form_id=self.schema.form_id,
            version=self.schema.version,
            roll_number=self.roll_number,
            values=values,
        )
        try:
            self.last_saved_path = self.repository.save(record)
        except OSError as e:
            logger.error(f"Failed to save submission: {e}")
            print_error(f"Failed to save submission: {e}")
            return
        print_success(f"Submission saved to {self.last_saved_path}")
