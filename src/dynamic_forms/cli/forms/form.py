# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from dynamic_forms.cli.forms.field import Field
from dynamic_forms.cli.ui import BACK


class Form:
    """Questions asked one after another. Answering 'back' revisits the previous question.

    Args:
        title: Shown by the caller above the questions.
        fields: Questions in the order they are asked.
        on_change: Receives ``(name, answer)`` as soon as a question is answered.
    """

    def __init__(self, title: str, fields: list[Field], on_change: Callable[[str, Any], None] | None = None):
        self.title = title
        self.fields = fields
        self.on_change = on_change

    def get_field(self, name: str) -> Field | None:
        return next((field for field in self.fields if field.name == name), None)

    def answers(self) -> dict[str, Any]:
        """Current answers by field name. Unanswered fields are left out."""
        return {field.name: field.current for field in self.fields if field.current is not None}

    def prompt_all(self, back_from_start: bool = False) -> dict[str, Any] | None | Any:
        """Ask every question in order.

        Args:
            back_from_start: Offer 'back' on the first question too. Taking it
                returns BACK so the caller can leave the form.

        Returns:
            The answers, None if the user cancelled, or BACK.
        """
        position = 0
        while position < len(self.fields):
            field = self.fields[position]
            answer = field.ask(allow_back=position > 0 or back_from_start)

            if answer is None:
                return None
            if answer is BACK:
                if position == 0:
                    return BACK
                position -= 1
                continue

            field.current = answer
            if self.on_change is not None:
                self.on_change(field.name, answer)
            position += 1

        return self.answers()
