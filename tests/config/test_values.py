# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest
from pydantic import TypeAdapter

from dynamic_forms.config.values import MultiValue, ScalarValue, Value, ValueStore, as_value


# as_value tests
def test_as_value_keeps_none_absent() -> None:
    assert as_value(None) is None


def test_as_value_wraps_string() -> None:
    assert as_value("hello") == ScalarValue(text="hello")


@pytest.mark.parametrize("raw", [["en", "fr"], ("en", "fr")])
def test_as_value_wraps_sequences(raw) -> None:
    assert as_value(raw) == MultiValue(items=("en", "fr"))


def test_as_value_returns_existing_value_unchanged() -> None:
    value = MultiValue(items=("en",))

    assert as_value(value) is value


def test_as_value_rejects_unsupported_types() -> None:
    with pytest.raises(TypeError, match="Unsupported field value type: int"):
        as_value(42)


def test_value_union_is_discriminated_by_value_type() -> None:
    """Test the tagged union round-trips through its discriminator."""
    adapter = TypeAdapter(Value)

    assert adapter.validate_python({"value_type": "multi", "items": ["en"]}) == MultiValue(items=("en",))
    assert adapter.validate_python({"value_type": "scalar", "text": "x"}) == ScalarValue(text="x")


def test_to_plain() -> None:
    assert ScalarValue(text="x").to_plain() == "x"
    assert MultiValue(items=("a", "b")).to_plain() == ["a", "b"]


# ValueStore tests
def test_value_store_get_returns_none_when_never_set() -> None:
    assert ValueStore().get("missing") is None


def test_value_store_set_replaces_previous_value() -> None:
    store = ValueStore()
    store.set("name", ScalarValue(text="a"))
    store.set("name", ScalarValue(text="b"))

    assert store.get("name") == ScalarValue(text="b")
    assert len(store) == 1


def test_value_store_set_does_not_touch_other_fields() -> None:
    store = ValueStore()
    store.set("a", ScalarValue(text="1"))
    store.set("b", MultiValue(items=("x",)))

    store.set("a", ScalarValue(text="2"))

    assert store.get("b") == MultiValue(items=("x",))


def test_value_store_set_none_removes_field() -> None:
    store = ValueStore()
    store.set("a", ScalarValue(text="1"))

    store.set("a", None)

    assert "a" not in store
    assert store.get("a") is None


def test_value_store_to_dict_exports_plain_values_in_insertion_order() -> None:
    store = ValueStore()
    store.set("langs", MultiValue(items=("en", "fr")))
    store.set("name", ScalarValue(text="Jane"))

    assert store.to_dict() == {"langs": ["en", "fr"], "name": "Jane"}
    assert list(store) == ["langs", "name"]


def test_value_store_copy_is_independent() -> None:
    store = ValueStore()
    store.set("a", ScalarValue(text="1"))

    clone = store.copy()
    clone.set("a", ScalarValue(text="2"))

    assert store.get("a") == ScalarValue(text="1")
    assert clone != store
