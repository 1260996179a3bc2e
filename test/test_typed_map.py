from __future__ import annotations

from collections import OrderedDict

import pytest

from fpcore import KeyNotFound, TypedMap, create_typed_map, err, none, ok, some


class TestConstruction:
    def test_empty(self) -> None:
        typed_map: TypedMap[str, str] = TypedMap()
        assert typed_map.size == 0
        assert len(typed_map) == 0

    def test_from_pairs(self) -> None:
        typed_map = create_typed_map([("key1", "value1"), ("key2", "value2")])
        assert typed_map.size == 2
        assert typed_map.get("key2") == some("value2")

    def test_from_mapping(self) -> None:
        typed_map = TypedMap(OrderedDict(a=1, b=2))
        assert typed_map.get("a") == some(1)

    def test_from_typed_map_copies(self) -> None:
        original = create_typed_map([("a", 1)])
        copy = TypedMap(original)
        original.set("b", 2)
        assert not copy.has("b")

    def test_repr(self) -> None:
        assert repr(create_typed_map([("a", 1)])) == "TypedMap({'a': 1})"


class TestGet:
    def test_present(self) -> None:
        result = create_typed_map([("key", "value")]).get("key")
        assert result.is_some()
        assert result.unwrap() == "value"

    def test_absent(self) -> None:
        typed_map: TypedMap[str, str] = create_typed_map()
        assert typed_map.get("key") is none()

    @pytest.mark.parametrize("stored", [None, "", 0, False])
    def test_present_falsy_values_are_some(self, stored: object) -> None:
        typed_map = create_typed_map([("key", stored)])
        assert typed_map.get("key") == some(stored)


class TestHas:
    def test_present(self) -> None:
        typed_map = create_typed_map([("key", "value")])
        assert typed_map.has("key")
        assert "key" in typed_map

    def test_absent(self) -> None:
        typed_map: TypedMap[str, str] = create_typed_map()
        assert not typed_map.has("key")
        assert "key" not in typed_map


class TestSet:
    def test_set(self) -> None:
        typed_map: TypedMap[str, str] = create_typed_map()
        typed_map.set("k", "v")
        assert typed_map.has("k")
        assert typed_map.get("k").unwrap() == "v"

    def test_overwrite(self) -> None:
        typed_map = create_typed_map([("k", "v")])
        typed_map.set("k", "w")
        assert typed_map.size == 1
        assert typed_map.get("k") == some("w")

    def test_returns_itself(self) -> None:
        typed_map: TypedMap[str, str] = create_typed_map()
        assert typed_map.set("key", "value") is typed_map

    def test_chaining(self) -> None:
        typed_map: TypedMap[str, int] = create_typed_map()
        typed_map.set("a", 1).set("b", 2).set("c", 3)
        assert typed_map.size == 3


class TestDelete:
    def test_existing_key(self) -> None:
        typed_map = create_typed_map([("key1", "value1"), ("key2", "value2")])

        result = typed_map.delete("key1")

        assert result.is_ok()
        assert result == ok()
        assert not typed_map.has("key1")
        assert typed_map.size == 1

    def test_missing_key(self) -> None:
        typed_map = create_typed_map([("key1", "value1")])

        result = typed_map.delete("non-existent")

        assert typed_map.size == 1
        assert result.is_err()
        assert result.unwrap_err() == KeyNotFound()
        assert result == err(KeyNotFound())
        assert result.unwrap_err().type == "KeyNotFound"


class TestClear:
    def test_clear(self) -> None:
        typed_map = create_typed_map([("key", "value")])
        typed_map.clear()
        assert typed_map.size == 0
        assert typed_map.get("key") is none()


class TestForEach:
    def test_called_for_each_entry(self) -> None:
        results: list[tuple[str, str, TypedMap[str, str]]] = []
        typed_map = create_typed_map([("key1", "value1"), ("key2", "value2")])

        typed_map.for_each(lambda v, k, m: results.append((v, k, m)))

        assert [(v, k) for v, k, _ in results] == [
            ("value1", "key1"),
            ("value2", "key2"),
        ]
        for _, _, view in results:
            assert isinstance(view, TypedMap)
            assert view.get("key1").unwrap() == "value1"
            assert view.get("key2").unwrap() == "value2"
            assert view.size == 2

    def test_view_shares_storage(self) -> None:
        typed_map = create_typed_map([("key1", "value1")])

        typed_map.for_each(lambda v, k, m: m.set("added", v))

        assert typed_map.get("added") == some("value1")

    def test_mutation_during_iteration_is_allowed(self) -> None:
        typed_map = create_typed_map([("a", 1), ("b", 2)])
        seen: list[str] = []

        def f(value: int, key: str, view: TypedMap[str, int]) -> None:
            seen.append(key)
            view.delete("b")

        typed_map.for_each(f)

        assert seen == ["a", "b"]
        assert typed_map.size == 1


class TestSize:
    def test_size(self) -> None:
        typed_map: TypedMap[str, str] = create_typed_map()
        assert typed_map.size == 0

        typed_map.set("key", "value")
        assert typed_map.size == 1

    def test_read_only(self) -> None:
        typed_map: TypedMap[str, str] = create_typed_map()
        with pytest.raises(AttributeError):
            typed_map.size = 3  # type: ignore[misc]


class TestFromMap:
    def test_copies_by_default(self) -> None:
        original = {"key1": "value1"}
        typed_map = TypedMap.from_map(original)

        del original["key1"]

        assert typed_map.get("key1").is_some()

    def test_copy_is_not_written_back(self) -> None:
        original = {"key1": "value1"}
        TypedMap.from_map(original).set("key2", "value2")
        assert "key2" not in original

    def test_shares_when_copy_disabled(self) -> None:
        original = {"key1": "value1"}
        typed_map = TypedMap.from_map(original, copy=False)

        del original["key1"]

        assert typed_map.get("key1").is_none()

    def test_shared_writes_are_visible_outside(self) -> None:
        original: dict[str, str] = {}
        TypedMap.from_map(original, False).set("key", "value")
        assert original == {"key": "value"}

    def test_shared_mode_logs(self, fpcore_debug_log: pytest.LogCaptureFixture) -> None:
        TypedMap.from_map({"a": 1}, copy=False)
        assert "Wrapping dict of 1 entries by reference" in fpcore_debug_log.text

    def test_copy_mode_does_not_log(
        self, fpcore_debug_log: pytest.LogCaptureFixture
    ) -> None:
        TypedMap.from_map({"a": 1})
        assert fpcore_debug_log.records == []
