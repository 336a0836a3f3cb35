# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from dynamic_forms.errors import DynamicFormsError


class SchemaParseError(DynamicFormsError): ...


class RegistrationError(DynamicFormsError): ...


class FetchError(DynamicFormsError): ...


class InvalidConfigError(DynamicFormsError): ...


class InvalidFilePathError(DynamicFormsError): ...


class InvalidFileFormatError(DynamicFormsError): ...
