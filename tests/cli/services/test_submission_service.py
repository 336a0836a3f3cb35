# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from unittest.mock import Mock, patch

from dynamic_forms.cli.repositories.submission_repository import SubmissionRepository
from dynamic_forms.cli.services.submission_service import SubmissionService
from dynamic_forms.config.schema import FormSchema

ANSWERS = {"fullName": "Jane Doe", "langs": ["en"]}


@patch("dynamic_forms.cli.services.submission_service.print_success")
@patch("dynamic_forms.cli.services.submission_service.display_config_preview")
def test_submission_is_displayed_and_saved(
    mock_preview: Mock,
    mock_print_success: Mock,
    stub_submission_repository: SubmissionRepository,
    stub_form_schema: FormSchema,
) -> None:
    service = SubmissionService(stub_submission_repository, stub_form_schema, roll_number="R-42")

    service(ANSWERS)

    mock_preview.assert_called_once_with(ANSWERS, "Student Registration: Submitted Answers")
    assert stub_submission_repository.list_all() == [service.last_saved_path]
    record = stub_submission_repository.load(service.last_saved_path)
    assert record.form_id == "student-reg-01"
    assert record.version == "1.0"
    assert record.roll_number == "R-42"
    assert record.values == ANSWERS
    mock_print_success.assert_called_once_with(f"Submission saved to {service.last_saved_path}")


@patch("dynamic_forms.cli.services.submission_service.display_config_preview")
def test_submission_without_saving(
    mock_preview: Mock, stub_submission_repository: SubmissionRepository, stub_form_schema: FormSchema
) -> None:
    service = SubmissionService(stub_submission_repository, stub_form_schema, save=False)

    service(ANSWERS)

    mock_preview.assert_called_once()
    assert service.last_saved_path is None
    assert stub_submission_repository.list_all() == []


@patch("dynamic_forms.cli.services.submission_service.print_error")
@patch("dynamic_forms.cli.services.submission_service.display_config_preview")
def test_submission_save_failure_is_reported(
    mock_preview: Mock, mock_print_error: Mock, stub_form_schema: FormSchema
) -> None:
    repository = Mock()
    repository.save.side_effect = PermissionError("read-only file system")
    service = SubmissionService(repository, stub_form_schema)

    service(ANSWERS)

    mock_print_error.assert_called_once_with("Failed to save submission: read-only file system")
    assert service.last_saved_path is None
