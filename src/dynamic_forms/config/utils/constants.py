# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path

from rich.theme import Theme

DYNAMIC_FORMS_HOME = Path(os.getenv("DYNAMIC_FORMS_HOME", str(Path.home() / ".dynamic-forms")))

DEFAULT_SERVICE_URL = os.getenv("DYNAMIC_FORMS_SERVICE_URL", "https://dynamic-form-generator-9rl7.onrender.com")
DEFAULT_TIMEOUT = 30.0

CREATE_USER_PATH = "/create-user"
GET_FORM_PATH = "/get-form"

SERVICE_SETTINGS_FILE_NAME = "service.yaml"
SUBMISSIONS_DIR_NAME = "submissions"

REQUIRED_FIELD_MESSAGE = "This field is required"
MIN_LENGTH_MESSAGE = "Minimum {min_length} characters"
MAX_LENGTH_MESSAGE = "Maximum {max_length} characters"


class NordColor(Enum):
    NORD0 = "#2E3440"
    NORD3 = "#4C566A"
    NORD4 = "#D8DEE9"
    NORD8 = "#88C0D0"
    NORD11 = "#BF616A"
    NORD13 = "#EBCB8B"
    NORD14 = "#A3BE8C"


RICH_CONSOLE_THEME = Theme(
    {
        "repr.number": NordColor.NORD8.value,
        "repr.str": NordColor.NORD14.value,
        "dim": NordColor.NORD3.value,
        "error": NordColor.NORD11.value,
        "warning": NordColor.NORD13.value,
    }
)
