# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from pathlib import Path
from urllib.parse import urlparse

import requests
import yaml

from dynamic_forms.config.errors import InvalidConfigError, InvalidFileFormatError, InvalidFilePathError

logger = logging.getLogger(__name__)

MAX_SCHEMA_URL_SIZE_BYTES = 1 * 1024 * 1024  # 1 MB
VALID_CONFIG_FILE_EXTENSIONS = {".yaml", ".yml", ".json"}


def load_config_file(file_path: Path) -> dict:
    """Load a YAML (or JSON) configuration file.

    Args:
        file_path: Path to the file

    Returns:
        Parsed content as dictionary

    Raises:
        InvalidFilePathError: If file doesn't exist
        InvalidFileFormatError: If the content is malformed or not a mapping
        InvalidConfigError: If file is empty
    """
    if not file_path.exists():
        raise InvalidFilePathError(f"Configuration file not found: {file_path}")

    try:
        with open(file_path) as f:
            content = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise InvalidFileFormatError(f"Invalid YAML format in {file_path}: {e}") from e

    if content is None:
        raise InvalidConfigError(f"Configuration file is empty: {file_path}")
    if not isinstance(content, dict):
        raise InvalidFileFormatError(f"Expected a mapping in {file_path}, got {type(content).__name__}")

    return content


def save_config_file(file_path: Path, config: dict) -> None:
    """Save configuration to a YAML file.

    Args:
        file_path: Path where to save the file
        config: Configuration dictionary to save

    Raises:
        IOError: If file cannot be written
    """
    file_path.parent.mkdir(parents=True, exist_ok=True)

    with open(file_path, "w") as f:
        yaml.safe_dump(
            config,
            f,
            default_flow_style=False,
            sort_keys=False,
            indent=2,
            allow_unicode=True,
        )


def is_http_url(value: str) -> bool:
    """Check whether a string is an HTTP or HTTPS URL."""
    parsed_url = urlparse(value)
    return parsed_url.scheme in {"http", "https"} and bool(parsed_url.netloc)


def load_document(source: str | Path) -> dict:
    """Load a YAML/JSON document from a local path or an HTTP(S) URL.

    JSON is a subset of YAML, so both formats go through the YAML loader.

    Raises:
        InvalidFilePathError: If a local file doesn't exist or the URL cannot be fetched.
        InvalidFileFormatError: If the extension is unsupported or the content is malformed.
    """
    if isinstance(source, str) and is_http_url(source):
        return _load_document_from_url(source)

    file_path = Path(source)
    if file_path.suffix.lower() not in VALID_CONFIG_FILE_EXTENSIONS:
        supported = ", ".join(sorted(VALID_CONFIG_FILE_EXTENSIONS))
        raise InvalidFileFormatError(f"Unsupported file extension '{file_path.suffix}'. Supported: {supported}")
    return load_config_file(file_path)


def _load_document_from_url(url: str) -> dict:
    logger.info("Fetching document from %s", _safe_url_for_log(url))
    try:
        response = requests.get(url, timeout=10)
        response.raise_for_status()
    except requests.RequestException as e:
        raise InvalidFilePathError(f"Failed to fetch '{_safe_url_for_log(url)}': {e}") from e

    if len(response.content) > MAX_SCHEMA_URL_SIZE_BYTES:
        raise InvalidFileFormatError(f"Document at '{url}' exceeds maximum size of {MAX_SCHEMA_URL_SIZE_BYTES} bytes")

    try:
        content = yaml.safe_load(response.content.decode("utf-8"))
    except (UnicodeDecodeError, yaml.YAMLError) as e:
        raise InvalidFileFormatError(f"Failed to parse document from '{url}': {e}") from e

    if not isinstance(content, dict):
        raise InvalidFileFormatError(f"Document at '{url}' must be a mapping, got {type(content).__name__}")
    return content


def _safe_url_for_log(url: str) -> str:
    """Return URL without query/fragment for safe logging."""
    parsed = urlparse(url)
    hostname = parsed.hostname or ""
    return f"{parsed.scheme}://{hostname}{parsed.path}"
