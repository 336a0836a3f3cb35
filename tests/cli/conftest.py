# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import pytest

from dynamic_forms.cli.repositories.service_repository import ServiceSettingsRepository
from dynamic_forms.cli.repositories.submission_repository import SubmissionRecord, SubmissionRepository
from dynamic_forms.config.settings import FormServiceParams


@pytest.fixture
def stub_service_params() -> FormServiceParams:
    return FormServiceParams(base_url="https://forms.example.com", timeout=15.0)


@pytest.fixture
def stub_service_repository(tmp_path: Path, stub_service_params: FormServiceParams) -> ServiceSettingsRepository:
    repository = ServiceSettingsRepository(tmp_path)
    repository.save(stub_service_params)
    return repository


@pytest.fixture
def stub_submission_repository(tmp_path: Path) -> SubmissionRepository:
    return SubmissionRepository(tmp_path)


@pytest.fixture
def stub_submission_record() -> SubmissionRecord:
    return SubmissionRecord(
        form_id="student-reg-01",
        version="1.0",
        roll_number="R-42",
        submitted_at=datetime(2026, 3, 1, 9, 30, 15, tzinfo=timezone.utc),
        values={"fullName": "Jane Doe", "langs": ["en", "fr"]},
    )
