# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from dynamic_forms.engine.validators.field import FIELD_RULES, validate_field
from dynamic_forms.engine.validators.section import validate_section

__all__ = ["FIELD_RULES", "validate_field", "validate_section"]
