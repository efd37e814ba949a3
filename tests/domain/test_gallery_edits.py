"""Tests for Stack and Gallery editing methods."""

from __future__ import annotations

import pytest

from mediaentity.domain.gallery import (
    DuplicateIDError,
    EmptyIDError,
    Gallery,
    GalleryError,
    Stack,
    StackImage,
    StackNotFoundError,
    VariantNotFoundError,
)
from mediaentity.domain.image import Image, hydrate_image
from tests.conftest import image_payload


def _image() -> Image:
    return hydrate_image(image_payload())


def _variant(variant_id: str, *, original: bool = False) -> StackImage:
    return StackImage(id=variant_id, original=original, image=_image())


def _gallery(*stack_ids: str) -> Gallery:
    gallery = Gallery()
    for stack_id in stack_ids:
        gallery = gallery.new_stack(stack_id, _variant(f"{stack_id}-orig"))
    return gallery


# ---------------------------------------------------------------------------
# Stack
# ---------------------------------------------------------------------------


class TestStack:
    def test_original(self) -> None:
        stack = Stack(id="s", variants=[_variant("a"), _variant("b", original=True)])
        original = stack.original()
        assert original is not None
        assert original.id == "b"
        assert stack.contains_original() is True

    def test_contains_original_false(self) -> None:
        assert Stack(id="s", variants=[_variant("a")]).contains_original() is False

    def test_last(self) -> None:
        stack = Stack(id="s", variants=[_variant("a"), _variant("b")])
        last = stack.last()
        assert last is not None
        assert last.id == "b"

    def test_last_empty(self) -> None:
        assert Stack(id="s").last() is None

    def test_variant_lookup(self) -> None:
        stack = Stack(id="s", variants=[_variant("a"), _variant("b")])
        found = stack.variant("b")
        assert found is not None
        assert found.id == "b"
        assert stack.variant("missing") is None

    def test_clear_keeps_original(self) -> None:
        stack = Stack(id="s", variants=[_variant("a", original=True), _variant("b")])
        cleared = stack.clear()
        assert [v.id for v in cleared.variants] == ["a"]
        assert len(stack.variants) == 2

    def test_tag_untag(self) -> None:
        stack = Stack(id="s").tag("foo", "bar", "baz")
        assert stack.tags == ["foo", "bar", "baz"]
        stack = stack.untag("bar", "baz")
        assert stack.tags == ["foo"]

    def test_tag_deduplicates(self) -> None:
        stack = Stack(id="s", tags=["foo"]).tag("foo", "bar", "bar")
        assert stack.tags == ["foo", "bar"]

    def test_new_variant(self) -> None:
        variant = Stack(id="s").new_variant("v", _image())
        assert variant.id == "v"
        assert variant.original is False
        assert variant.image == _image()

    def test_new_variant_empty_id(self) -> None:
        with pytest.raises(EmptyIDError):
            Stack(id="s").new_variant("", _image())


# ---------------------------------------------------------------------------
# Gallery
# ---------------------------------------------------------------------------


class TestNewStack:
    def test_adds_original_variant(self) -> None:
        gallery = Gallery().new_stack("s1", _variant("img"))
        stack = gallery.stack("s1")
        assert stack is not None
        assert stack.tags == []
        assert len(stack.variants) == 1
        assert stack.variants[0].original is True

    def test_leaves_receiver_untouched(self) -> None:
        empty = Gallery()
        empty.new_stack("s1", _variant("img"))
        assert empty.stacks == []

    def test_empty_stack_id(self) -> None:
        with pytest.raises(EmptyIDError):
            Gallery().new_stack("", _variant("img"))

    def test_empty_variant_id(self) -> None:
        with pytest.raises(EmptyIDError):
            Gallery().new_stack("s1", _variant(""))

    def test_duplicate_stack_id(self) -> None:
        gallery = _gallery("s1")
        with pytest.raises(DuplicateIDError):
            gallery.new_stack("s1", _variant("other"))

    def test_errors_share_base(self) -> None:
        with pytest.raises(GalleryError):
            Gallery().new_stack("", _variant("img"))


class TestRemoveStack:
    def test_removes(self) -> None:
        gallery = _gallery("s1", "s2").remove_stack("s1")
        assert [s.id for s in gallery.stacks] == ["s2"]

    def test_not_found(self) -> None:
        with pytest.raises(StackNotFoundError):
            _gallery("s1").remove_stack("missing")

    def test_not_found_is_lookup_error(self) -> None:
        with pytest.raises(LookupError):
            Gallery().remove_stack("missing")


class TestVariants:
    def test_new_variant(self) -> None:
        gallery = _gallery("s1").new_variant("s1", "small", _image())
        stack = gallery.stack("s1")
        assert stack is not None
        assert [v.id for v in stack.variants] == ["s1-orig", "small"]
        assert stack.variants[1].original is False

    def test_new_variant_duplicate(self) -> None:
        with pytest.raises(DuplicateIDError):
            _gallery("s1").new_variant("s1", "s1-orig", _image())

    def test_new_variant_unknown_stack(self) -> None:
        with pytest.raises(StackNotFoundError):
            _gallery("s1").new_variant("missing", "small", _image())

    def test_remove_variant(self) -> None:
        gallery = _gallery("s1").new_variant("s1", "small", _image())
        gallery = gallery.remove_variant("s1", "s1-orig")
        stack = gallery.stack("s1")
        assert stack is not None
        assert [v.id for v in stack.variants] == ["small"]

    def test_remove_variant_not_found(self) -> None:
        with pytest.raises(VariantNotFoundError):
            _gallery("s1").remove_variant("s1", "missing")

    def test_replace_variant(self) -> None:
        replacement = StackImage(
            id="s1-orig",
            original=True,
            image=hydrate_image(image_payload(filename="new.jpg")),
        )
        gallery = _gallery("s1").replace_variant("s1", replacement)
        stack = gallery.stack("s1")
        assert stack is not None
        assert stack.variants == [replacement]

    def test_replace_variant_not_found(self) -> None:
        with pytest.raises(VariantNotFoundError):
            _gallery("s1").replace_variant("s1", _variant("missing"))

    def test_replace_variant_unknown_stack(self) -> None:
        with pytest.raises(StackNotFoundError):
            _gallery("s1").replace_variant("missing", _variant("s1-orig"))


class TestTagStack:
    def test_tag_untag(self) -> None:
        gallery = _gallery("s1", "s2").tag_stack("s1", "foo", "bar", "baz")
        stack = gallery.stack("s1")
        assert stack is not None
        assert stack.tags == ["foo", "bar", "baz"]

        gallery = gallery.untag_stack("s1", "bar", "baz")
        stack = gallery.stack("s1")
        assert stack is not None
        assert stack.tags == ["foo"]

    def test_other_stacks_untouched(self) -> None:
        gallery = _gallery("s1", "s2").tag_stack("s1", "foo")
        other = gallery.stack("s2")
        assert other is not None
        assert other.tags == []

    def test_unknown_stack(self) -> None:
        with pytest.raises(StackNotFoundError):
            Gallery().tag_stack("missing", "foo")
        with pytest.raises(StackNotFoundError):
            Gallery().untag_stack("missing", "foo")


class TestSort:
    def test_sort_sequence(self) -> None:
        ids = ["a", "b", "c", "d"]
        gallery = _gallery(*ids)

        gallery = gallery.sort(["d", "b"])
        assert [s.id for s in gallery.stacks] == ["d", "b", "a", "c"]

        gallery = gallery.sort(["c", "d"])
        assert [s.id for s in gallery.stacks] == ["c", "d", "b", "a"]

        gallery = gallery.sort(["a", "c"])
        assert [s.id for s in gallery.stacks] == ["a", "c", "d", "b"]

    def test_unknown_ids_ignored(self) -> None:
        gallery = _gallery("a", "b", "c").sort(["x", "c", "y"])
        assert [s.id for s in gallery.stacks] == ["c", "a", "b"]

    def test_only_unknown_ids_is_noop(self) -> None:
        gallery = _gallery("a", "b")
        assert gallery.sort(["x"]) is gallery

    def test_clear(self) -> None:
        assert _gallery("a", "b").clear().stacks == []
