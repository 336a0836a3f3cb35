# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from dynamic_forms.cli.controllers.form_controller import FormController
from dynamic_forms.cli.controllers.service_controller import ServiceController

__all__ = ["FormController", "ServiceController"]
