# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from dynamic_forms.engine.errors import NavigationError
from dynamic_forms.engine.navigation import SectionNavigator
from dynamic_forms.engine.session import FormSession, SessionView, Submitter
from dynamic_forms.engine.validators import validate_field, validate_section

__all__ = [
    "FormSession",
    "NavigationError",
    "SectionNavigator",
    "SessionView",
    "Submitter",
    "validate_field",
    "validate_section",
]
