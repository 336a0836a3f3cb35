# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest

from dynamic_forms.engine.errors import NavigationError
from dynamic_forms.engine.navigation import SectionNavigator


def test_navigator_starts_at_first_section() -> None:
    navigator = SectionNavigator(3)

    assert navigator.index == 0
    assert navigator.is_first
    assert not navigator.is_last
    assert navigator.can_advance()
    assert not navigator.can_retreat()


def test_navigator_advance_and_retreat_move_by_one() -> None:
    navigator = SectionNavigator(3)

    assert navigator.advance() == 1
    assert navigator.advance() == 2
    assert navigator.is_last
    assert navigator.retreat() == 1
    assert navigator.index == 1


def test_navigator_single_section_is_first_and_last() -> None:
    navigator = SectionNavigator(1)

    assert navigator.is_first
    assert navigator.is_last
    assert not navigator.can_advance()
    assert not navigator.can_retreat()


def test_navigator_advance_past_last_raises() -> None:
    navigator = SectionNavigator(2, index=1)

    with pytest.raises(NavigationError, match="last section"):
        navigator.advance()
    assert navigator.index == 1


def test_navigator_retreat_before_first_raises() -> None:
    navigator = SectionNavigator(2)

    with pytest.raises(NavigationError, match="first section"):
        navigator.retreat()
    assert navigator.index == 0


@pytest.mark.parametrize("section_count,index", [(0, 0), (2, 2), (2, -1)])
def test_navigator_rejects_invalid_construction(section_count: int, index: int) -> None:
    with pytest.raises(NavigationError):
        SectionNavigator(section_count, index)
