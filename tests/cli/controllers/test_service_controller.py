# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, Mock, patch

import pytest

from dynamic_forms.cli.controllers.service_controller import ServiceController
from dynamic_forms.cli.repositories.service_repository import ServiceSettingsRepository
from dynamic_forms.config.settings import FormServiceParams

CONTROLLER = "dynamic_forms.cli.controllers.service_controller"


@pytest.fixture
def controller(tmp_path: Path) -> ServiceController:
    return ServiceController(tmp_path)


def test_init(tmp_path: Path) -> None:
    controller = ServiceController(tmp_path)

    assert controller.config_dir == tmp_path
    assert controller.repository.config_dir == tmp_path


@patch(f"{CONTROLLER}.confirm_action", return_value=True)
def test_run_saves_new_settings(
    mock_confirm: Mock, controller: ServiceController, stub_service_params: FormServiceParams
) -> None:
    """Test confirmed settings are written to the repository."""
    mock_builder = MagicMock()
    mock_builder.run.return_value = stub_service_params

    with patch(f"{CONTROLLER}.ServiceFormBuilder", return_value=mock_builder):
        controller.run()

    assert controller.repository.load() == stub_service_params
    mock_builder.run.assert_called_once_with(FormServiceParams().model_dump(mode="json"))


def test_run_prefills_saved_settings(
    stub_service_repository: ServiceSettingsRepository, stub_service_params: FormServiceParams
) -> None:
    controller = ServiceController(stub_service_repository.config_dir)
    mock_builder = MagicMock()
    mock_builder.run.return_value = None

    with patch(f"{CONTROLLER}.ServiceFormBuilder", return_value=mock_builder):
        controller.run()

    mock_builder.run.assert_called_once_with(stub_service_params.model_dump(mode="json"))


@patch(f"{CONTROLLER}.print_info")
def test_run_cancelled_leaves_settings_unchanged(mock_print_info: Mock, controller: ServiceController) -> None:
    mock_builder = MagicMock()
    mock_builder.run.return_value = None

    with patch(f"{CONTROLLER}.ServiceFormBuilder", return_value=mock_builder):
        controller.run()

    assert not controller.repository.exists()
    mock_print_info.assert_called_with("No changes made")


@patch(f"{CONTROLLER}.confirm_action", return_value=False)
def test_run_not_confirmed(
    mock_confirm: Mock, controller: ServiceController, stub_service_params: FormServiceParams
) -> None:
    mock_builder = MagicMock()
    mock_builder.run.return_value = stub_service_params

    with patch(f"{CONTROLLER}.ServiceFormBuilder", return_value=mock_builder):
        controller.run()

    assert not controller.repository.exists()
