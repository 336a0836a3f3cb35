# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Literal, TextIO

from pydantic import BaseModel, Field, field_validator
from typing_extensions import Self

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DEFAULT_NOISY_LOGGERS = ["httpx", "httpcore", "urllib3"]

_PLAIN_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"
_DATE_FORMAT = "%H:%M:%S"


class LoggerConfig(BaseModel):
    name: str
    level: LogLevel = "INFO"


class OutputConfig(BaseModel):
    """A log destination: a text stream such as sys.stderr, or a file path."""

    destination: Any
    structured: bool = False

    @field_validator("destination")
    @classmethod
    def _validate_destination(cls, value: Any) -> TextIO | Path:
        if isinstance(value, str):
            return Path(value)
        if isinstance(value, Path) or hasattr(value, "write"):
            return value
        raise ValueError(f"Log destination must be a path or a writable stream, got {type(value).__name__}")


class LoggingConfig(BaseModel):
    logger_configs: list[LoggerConfig]
    output_configs: list[OutputConfig]
    root_level: LogLevel = "INFO"
    to_silence: list[str] = Field(default_factory=lambda: list(DEFAULT_NOISY_LOGGERS))

    @classmethod
    def default(cls) -> Self:
        return cls(
            logger_configs=[LoggerConfig(name="dynamic_forms", level="WARNING")],
            output_configs=[OutputConfig(destination=sys.stderr)],
            root_level="WARNING",
        )

    @classmethod
    def debug(cls) -> Self:
        return cls(
            logger_configs=[LoggerConfig(name="dynamic_forms", level="DEBUG")],
            output_configs=[OutputConfig(destination=sys.stderr)],
            root_level="INFO",
        )


class JSONLinesFormatter(logging.Formatter):
    """Format each record as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def configure_logging(config: LoggingConfig) -> None:
    """Install handlers on the root logger according to the config.

    Existing root handlers are removed first, so calling this twice does not
    duplicate output.
    """
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    for output_config in config.output_configs:
        root_logger.addHandler(_create_handler(output_config))
    root_logger.setLevel(config.root_level)

    for logger_config in config.logger_configs:
        logging.getLogger(logger_config.name).setLevel(logger_config.level)

    for name in config.to_silence:
        quiet_noisy_logger(name)


def quiet_noisy_logger(name: str) -> None:
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.WARNING)


def _create_handler(output_config: OutputConfig) -> logging.Handler:
    if isinstance(output_config.destination, Path):
        handler: logging.Handler = logging.FileHandler(output_config.destination)
    else:
        handler = logging.StreamHandler(output_config.destination)

    if output_config.structured:
        handler.setFormatter(JSONLinesFormatter())
    else:
        handler.setFormatter(logging.Formatter(_PLAIN_FORMAT, datefmt=_DATE_FORMAT))
    return handler
