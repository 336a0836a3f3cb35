# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging

import httpx

from dynamic_forms.config.errors import FetchError, RegistrationError
from dynamic_forms.config.schema import FormSchema, parse_form_schema
from dynamic_forms.config.settings import FormServiceParams
from dynamic_forms.config.utils.constants import CREATE_USER_PATH, GET_FORM_PATH

logger = logging.getLogger(__name__)


class FormServiceClient:
    """Client for the remote form service: registers a user and fetches their form.

    Each call opens a short-lived httpx client. No retries are attempted; a
    failed call surfaces as RegistrationError or FetchError and the caller
    decides whether to try again.
    """

    def __init__(self, params: FormServiceParams | None = None):
        """
        Initialize the form service client.

        Args:
            params: Connection settings. Defaults to FormServiceParams().
        """
        self.params = params or FormServiceParams()

    def register_user(self, roll_number: str, name: str) -> None:
        """Register a user with the form service.

        Raises:
            RegistrationError: If the request fails or the service rejects it.
        """
        logger.info(f"Registering user with roll number {roll_number!r}")
        try:
            with self._client() as client:
                response = client.post(CREATE_USER_PATH, json={"rollNumber": roll_number, "name": name})
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise RegistrationError(
                f"Registration failed with HTTP {e.response.status_code}: {_response_detail(e.response)}"
            ) from e
        except httpx.HTTPError as e:
            raise RegistrationError(f"Registration failed: {e}") from e

    def fetch_schema(self, roll_number: str) -> FormSchema:
        """Fetch and parse the form assigned to a roll number.

        Raises:
            FetchError: If the request fails or the body is not JSON.
            SchemaParseError: If the body is not a valid form description.
        """
        logger.info(f"Fetching form for roll number {roll_number!r}")
        try:
            with self._client() as client:
                response = client.get(GET_FORM_PATH, params={"rollNumber": roll_number})
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as e:
            raise FetchError(
                f"Fetching the form failed with HTTP {e.response.status_code}: {_response_detail(e.response)}"
            ) from e
        except httpx.HTTPError as e:
            raise FetchError(f"Fetching the form failed: {e}") from e
        except ValueError as e:
            raise FetchError(f"Form service returned a non-JSON response: {e}") from e

        schema = parse_form_schema(payload)
        logger.debug(f"Fetched form {schema.form_id!r} version {schema.version!r}")
        return schema

    def load_form(self, roll_number: str, name: str) -> FormSchema:
        """Register the user, then fetch their form."""
        self.register_user(roll_number, name)
        return self.fetch_schema(roll_number)

    def _client(self) -> httpx.Client:
        return httpx.Client(
            base_url=self.params.base_url,
            timeout=httpx.Timeout(self.params.timeout),
        )


def _response_detail(response: httpx.Response) -> str:
    text = response.text.strip()
    return text[:200] if text else response.reason_phrase
