# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from dynamic_forms.cli.forms.form import Form
from dynamic_forms.cli.ui import confirm_action, print_error

ConfigT = TypeVar("ConfigT", bound=BaseModel)


class FormBuilder(ABC, Generic[ConfigT]):
    """Asks a settings form until its answers make a valid ``config_type``.

    Subclasses set ``config_type`` and lay out the questions in ``create_form``.
    """

    config_type: ClassVar[type[BaseModel]]

    def __init__(self, title: str):
        self.title = title

    @abstractmethod
    def create_form(self, initial_data: dict[str, Any] | None = None) -> Form:
        """Lay out the questions, showing ``initial_data`` as the current answers."""

    def build_config(self, form_data: dict[str, Any]) -> ConfigT:
        return self.config_type.model_validate(form_data)

    def run(self, initial_data: dict[str, Any] | None = None) -> ConfigT | None:
        """Returns the validated settings, or None if the user gives up."""
        form = self.create_form(initial_data)

        while True:
            answers = form.prompt_all()
            if answers is None:
                if confirm_action("Cancel configuration?", default=False):
                    return None
                continue

            config, problems = self._try_build(answers)
            if config is not None:
                return config
            for problem in problems:
                print_error(problem)
            if not confirm_action("Try again?", default=True):
                return None

    def _try_build(self, answers: dict[str, Any]) -> tuple[ConfigT | None, list[str]]:
        try:
            return self.build_config(answers), []
        except ValidationError as e:
            fallback = self.config_type.__name__
            return None, [f"{_error_location(error) or fallback}: {error['msg']}" for error in e.errors()]


def _error_location(error: Any) -> str:
    return ".".join(str(part) for part in error["loc"])
