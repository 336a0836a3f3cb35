# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from dynamic_forms.engine.errors import NavigationError


class SectionNavigator:
    """Tracks the active section of a form.

    The navigator only knows about indices. Whether a forward move is allowed
    by validation is decided by the session before calling ``advance``.
    """

    def __init__(self, section_count: int, index: int = 0):
        if section_count < 1:
            raise NavigationError("A form must have at least one section")
        if not 0 <= index < section_count:
            raise NavigationError(f"Section index {index} out of range [0, {section_count})")
        self.section_count = section_count
        self._index = index

    @property
    def index(self) -> int:
        return self._index

    @property
    def is_first(self) -> bool:
        return self._index == 0

    @property
    def is_last(self) -> bool:
        return self._index == self.section_count - 1

    def can_advance(self) -> bool:
        return not self.is_last

    def can_retreat(self) -> bool:
        return not self.is_first

    def advance(self) -> int:
        """Move to the next section and return the new index."""
        if not self.can_advance():
            raise NavigationError("Already at the last section")
        self._index += 1
        return self._index

    def retreat(self) -> int:
        """Move to the previous section and return the new index."""
        if not self.can_retreat():
            raise NavigationError("Already at the first section")
        self._index -= 1
        return self._index

    def __repr__(self) -> str:
        return f"SectionNavigator(index={self._index}, section_count={self.section_count})"
