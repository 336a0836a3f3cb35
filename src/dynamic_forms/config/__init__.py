# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pathlib import Path

from dynamic_forms.config.errors import (
    FetchError,
    InvalidConfigError,
    InvalidFileFormatError,
    InvalidFilePathError,
    RegistrationError,
    SchemaParseError,
)
from dynamic_forms.config.schema import (
    FieldDefinition,
    FieldKind,
    FieldValidation,
    FormSchema,
    Option,
    Section,
    WidgetCategory,
    parse_form_schema,
)
from dynamic_forms.config.settings import FormServiceParams
from dynamic_forms.config.utils.io_helpers import load_document
from dynamic_forms.config.values import MultiValue, PlainValue, ScalarValue, Value, ValueStore, as_value


def load_form_schema_file(source: str | Path) -> FormSchema:
    """Load a form schema from a local YAML/JSON file or an HTTP(S) URL.

    Raises:
        InvalidFilePathError: If the source cannot be read.
        InvalidFileFormatError: If the document is malformed.
        SchemaParseError: If the document is not a valid form schema.
    """
    return parse_form_schema(load_document(source))


__all__ = [
    "FetchError",
    "FieldDefinition",
    "FieldKind",
    "FieldValidation",
    "FormSchema",
    "FormServiceParams",
    "InvalidConfigError",
    "InvalidFileFormatError",
    "InvalidFilePathError",
    "MultiValue",
    "Option",
    "PlainValue",
    "RegistrationError",
    "ScalarValue",
    "SchemaParseError",
    "Section",
    "Value",
    "ValueStore",
    "WidgetCategory",
    "as_value",
    "load_form_schema_file",
    "parse_form_schema",
]
