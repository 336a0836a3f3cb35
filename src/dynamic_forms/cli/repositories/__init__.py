# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from dynamic_forms.cli.repositories.service_repository import ServiceSettingsRepository
from dynamic_forms.cli.repositories.submission_repository import SubmissionRecord, SubmissionRepository

__all__ = ["ServiceSettingsRepository", "SubmissionRecord", "SubmissionRepository"]
