# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from dynamic_forms.cli.ui import prompt_text_input, select_multiple_with_arrows, select_with_arrows

AnswerT = TypeVar("AnswerT")

TextValidator = Callable[[str], tuple[bool, str | None]]


class Field(ABC, Generic[AnswerT]):
    """One question of a terminal form.

    Args:
        name: Key of the answer in the form's result.
        prompt: Question shown to the user.
        current: Answer shown as the current one. Empty input keeps it.
    """

    def __init__(self, name: str, prompt: str, current: AnswerT | None = None):
        self.name = name
        self.prompt = prompt
        self.current = current

    @abstractmethod
    def ask(self, allow_back: bool = False) -> AnswerT | None | Any:
        """Ask once. Returns the answer, None if the user cancelled, or BACK."""


class TextField(Field[str]):
    """Free text answer. Multi-line fields finish with Esc then Enter.

    ``prompt`` may carry prompt_toolkit HTML markup. A failing ``validator``
    makes the prompt ask again.
    """

    def __init__(
        self,
        name: str,
        prompt: str,
        current: str | None = None,
        placeholder: str | None = None,
        multiline: bool = False,
        validator: TextValidator | None = None,
    ):
        super().__init__(name, prompt, current)
        self.placeholder = placeholder
        self.multiline = multiline
        self.validator = validator

    def ask(self, allow_back: bool = False) -> str | None | Any:
        return prompt_text_input(
            self.prompt,
            default=self.current or None,
            validator=self.validator,
            allow_back=allow_back,
            multiline=self.multiline,
            placeholder=self.placeholder,
        )


class SelectField(Field[str]):
    """Exactly one option key, picked from an arrow-key list or a radio group."""

    def __init__(
        self,
        name: str,
        prompt: str,
        options: dict[str, str],
        current: str | None = None,
        radio: bool = False,
    ):
        super().__init__(name, prompt, current)
        self.options = options
        self.radio = radio

    def ask(self, allow_back: bool = False) -> str | None | Any:
        return select_with_arrows(
            self.options,
            self.prompt,
            default_key=self.current,
            allow_back=allow_back,
            radio=self.radio,
        )


class MultiSelectField(Field[list[str]]):
    """Any number of option keys, toggled with the space bar. An empty selection is an answer."""

    def __init__(self, name: str, prompt: str, options: dict[str, str], current: list[str] | None = None):
        super().__init__(name, prompt, current)
        self.options = options

    def ask(self, allow_back: bool = False) -> list[str] | None | Any:
        return select_multiple_with_arrows(
            self.options,
            self.prompt,
            default_keys=self.current,
            allow_empty=True,
            allow_back=allow_back,
        )
