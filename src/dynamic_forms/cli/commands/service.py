# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from dynamic_forms.cli.controllers.service_controller import ServiceController
from dynamic_forms.config.utils.constants import DYNAMIC_FORMS_HOME


def service_command() -> None:
    """Configure the form service connection interactively."""
    controller = ServiceController(DYNAMIC_FORMS_HOME)
    controller.run()
