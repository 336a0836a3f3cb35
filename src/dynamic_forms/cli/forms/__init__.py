# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from dynamic_forms.cli.forms.builder import FormBuilder
from dynamic_forms.cli.forms.field import Field, MultiSelectField, SelectField, TextField
from dynamic_forms.cli.forms.form import Form
from dynamic_forms.cli.forms.section_form import create_section_form, create_widget
from dynamic_forms.cli.forms.service_builder import ServiceFormBuilder

__all__ = [
    "Field",
    "Form",
    "FormBuilder",
    "MultiSelectField",
    "SelectField",
    "ServiceFormBuilder",
    "TextField",
    "create_section_form",
    "create_widget",
]
