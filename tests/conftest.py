# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Any
from unittest.mock import Mock

import pytest

from dynamic_forms.config.schema import FormSchema, parse_form_schema
from dynamic_forms.engine.session import FormSession


@pytest.fixture
def stub_form_payload() -> dict[str, Any]:
    """Form service response with two sections covering every field kind."""
    return {
        "message": "Form fetched",
        "form": {
            "formTitle": "Student Registration",
            "formId": "student-reg-01",
            "version": "1.0",
            "sections": [
                {
                    "sectionId": 1,
                    "title": "Personal Details",
                    "description": "Tell us about yourself",
                    "fields": [
                        {
                            "fieldId": "fullName",
                            "type": "text",
                            "label": "Full Name",
                            "placeholder": "Jane Doe",
                            "required": True,
                            "dataTestId": "full-name",
                            "minLength": 3,
                            "maxLength": 50,
                        },
                        {
                            "fieldId": "email",
                            "type": "email",
                            "label": "Email",
                            "required": True,
                            "dataTestId": "email",
                        },
                        {
                            "fieldId": "phone",
                            "type": "tel",
                            "label": "Phone",
                            "required": False,
                            "dataTestId": "phone",
                            "maxLength": 10,
                            "validation": {"message": "Enter a 10 digit phone number"},
                        },
                        {
                            "fieldId": "dob",
                            "type": "date",
                            "label": "Date of Birth",
                            "required": True,
                            "dataTestId": "dob",
                        },
                    ],
                },
                {
                    "sectionId": 2,
                    "title": "Preferences",
                    "description": "Choose what suits you",
                    "fields": [
                        {
                            "fieldId": "country",
                            "type": "dropdown",
                            "label": "Country",
                            "required": True,
                            "dataTestId": "country",
                            "options": [
                                {"value": "in", "label": "India", "dataTestId": "country-in"},
                                {"value": "us", "label": "United States", "dataTestId": "country-us"},
                            ],
                        },
                        {
                            "fieldId": "gender",
                            "type": "radio",
                            "label": "Gender",
                            "required": False,
                            "dataTestId": "gender",
                            "options": [
                                {"value": "f", "label": "Female"},
                                {"value": "m", "label": "Male"},
                                {"value": "x", "label": "Other"},
                            ],
                        },
                        {
                            "fieldId": "langs",
                            "type": "checkbox",
                            "label": "Languages",
                            "required": True,
                            "dataTestId": "langs",
                            "options": [{"value": "en", "label": "English"}, {"value": "fr", "label": "French"}],
                        },
                        {
                            "fieldId": "bio",
                            "type": "textarea",
                            "label": "About You",
                            "required": False,
                            "dataTestId": "bio",
                            "minLength": 10,
                        },
                    ],
                },
            ],
        },
    }


@pytest.fixture
def stub_form_schema(stub_form_payload: dict[str, Any]) -> FormSchema:
    return parse_form_schema(stub_form_payload)


@pytest.fixture
def stub_submitter() -> Mock:
    return Mock()


@pytest.fixture
def stub_session(stub_form_schema: FormSchema, stub_submitter: Mock) -> FormSession:
    session = FormSession(submitter=stub_submitter)
    session.load_form(stub_form_schema)
    return session


@pytest.fixture
def stub_first_section_answers() -> dict[str, str]:
    return {"fullName": "Jane Doe", "email": "jane@example.com", "dob": "2001-04-12"}


@pytest.fixture
def stub_second_section_answers() -> dict[str, Any]:
    return {"country": "in", "langs": ["en"]}
