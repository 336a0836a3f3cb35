# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from unittest.mock import Mock

from dynamic_forms.cli.forms.field import TextField
from dynamic_forms.cli.forms.form import Form
from dynamic_forms.cli.ui import BACK


def create_field(name: str, *answers: object, current: str | None = None) -> TextField:
    """Create a TextField that answers ``answers`` in order."""
    field = TextField(name=name, prompt=name.title(), current=current)
    field.ask = Mock(side_effect=list(answers))
    return field


def test_get_field_returns_existing_field() -> None:
    name = create_field("name")
    form = Form(title="test_form", fields=[name])

    assert form.get_field("name") is name
    assert form.get_field("missing") is None


def test_answers_leave_out_unanswered_fields() -> None:
    form = Form(title="test_form", fields=[create_field("name", current="Jane"), create_field("email")])

    assert form.answers() == {"name": "Jane"}


def test_prompt_all_collects_answers_in_order() -> None:
    """Test every field is asked once and back is only offered after the first one."""
    name = create_field("name", "Jane")
    email = create_field("email", "jane@example.com")
    form = Form(title="test_form", fields=[name, email])

    assert form.prompt_all() == {"name": "Jane", "email": "jane@example.com"}
    name.ask.assert_called_once_with(allow_back=False)
    email.ask.assert_called_once_with(allow_back=True)


def test_prompt_all_back_returns_to_previous_field() -> None:
    name = create_field("name", "Jane", "Janet")
    email = create_field("email", BACK, "janet@example.com")
    form = Form(title="test_form", fields=[name, email])

    assert form.prompt_all() == {"name": "Janet", "email": "janet@example.com"}
    assert name.ask.call_count == 2


def test_prompt_all_keeps_answers_for_revisited_fields() -> None:
    """Test a field revisited through back shows the answer given before."""
    name = create_field("name", "Jane", "Jane")
    email = create_field("email", BACK, "jane@example.com")
    form = Form(title="test_form", fields=[name, email])

    form.prompt_all()

    assert name.current == "Jane"


def test_prompt_all_back_from_start_returns_back() -> None:
    name = create_field("name", BACK)
    form = Form(title="test_form", fields=[name])

    assert form.prompt_all(back_from_start=True) is BACK
    name.ask.assert_called_once_with(allow_back=True)


def test_prompt_all_cancel_returns_none() -> None:
    form = Form(title="test_form", fields=[create_field("name", None)])

    assert form.prompt_all() is None


def test_prompt_all_reports_each_answer_to_on_change() -> None:
    """Test on_change receives each answer right after it is given."""
    on_change = Mock()
    form = Form(
        title="test_form",
        fields=[create_field("name", "Jane"), create_field("email", "jane@example.com")],
        on_change=on_change,
    )

    form.prompt_all()

    assert [c.args for c in on_change.call_args_list] == [("name", "Jane"), ("email", "jane@example.com")]


def test_prompt_all_does_not_report_back_or_cancel() -> None:
    on_change = Mock()
    form = Form(title="test_form", fields=[create_field("name", None)], on_change=on_change)

    form.prompt_all()

    on_change.assert_not_called()
