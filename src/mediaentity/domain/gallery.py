"""Gallery, Stack, and stack-variant models with hydration.

A :class:`Gallery` is an ordered list of :class:`Stack` objects.  Each
stack groups variants of the same logical image (for example different
sizes); exactly one of them is usually flagged as the original.

Hydration is a strict top-down map::

    hydrate_gallery -> hydrate_stack -> hydrate_stack_image -> hydrate_image

Missing collections (``stacks``, ``variants``, ``tags``) become empty
lists at each boundary, so hydrated values never need null checks.

All models are frozen.  Editing methods on :class:`Stack` and
:class:`Gallery` return new values and leave the receiver untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from pydantic import (
    BaseModel,
    Field,
    SerializerFunctionWrapHandler,
    model_serializer,
    model_validator,
)

from mediaentity.domain.image import (
    Image,
    ImageDimensions,
    ImageStorage,
    as_payload,
    hydrate_image,
)
from mediaentity.domain.tagging import has_tag, with_tags, without_tags

logger = logging.getLogger(__name__)

PROCESSED_TAG = "processed"

_IDENTITY_KEYS = ("id", "original")


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class GalleryError(ValueError):
    """Base class for gallery editing errors."""


class EmptyIDError(GalleryError):
    """A stack or variant was given an empty id."""


class DuplicateIDError(GalleryError):
    """A stack or variant id already exists."""


class StackNotFoundError(GalleryError, LookupError):
    """The gallery has no stack with the requested id."""


class VariantNotFoundError(GalleryError, LookupError):
    """The stack has no variant with the requested id."""


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class StackImage(BaseModel):
    """An image variant within a :class:`Stack`.

    Composes an :class:`Image` with the variant's identity.  The wire form
    is flat: image fields plus ``id`` and ``original`` side by side, which
    is what :meth:`model_dump` produces and what validation accepts.
    """

    model_config = {"frozen": True}

    id: str = ""
    original: bool = False
    image: Image = Field(default_factory=Image)

    @model_validator(mode="before")
    @classmethod
    def _nest_image(cls, data: Any) -> Any:
        if isinstance(data, Mapping) and "image" not in data:
            identity = {key: data[key] for key in _IDENTITY_KEYS if key in data}
            fields = {key: value for key, value in data.items() if key not in _IDENTITY_KEYS}
            return {**identity, "image": fields}
        return data

    @model_serializer(mode="wrap")
    def _flatten(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        image = data.pop("image", None) or {}
        return {**image, **data}

    @property
    def storage(self) -> ImageStorage:
        return self.image.storage

    @property
    def filename(self) -> str:
        return self.image.filename

    @property
    def filesize(self) -> int:
        return self.image.filesize

    @property
    def dimensions(self) -> ImageDimensions:
        return self.image.dimensions

    @property
    def names(self) -> dict[str, str]:
        return self.image.names

    @property
    def descriptions(self) -> dict[str, str]:
        return self.image.descriptions


class Stack(BaseModel):
    """A collection of variants of the same image, plus tags."""

    model_config = {"frozen": True}

    id: str = ""
    variants: list[StackImage] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)

    def original(self) -> StackImage | None:
        """Return the first variant flagged as original, or None."""
        for variant in self.variants:
            if variant.original:
                return variant
        return None

    def contains_original(self) -> bool:
        return self.original() is not None

    def last(self) -> StackImage | None:
        """Return the last variant, or None for an empty stack."""
        if not self.variants:
            return None
        return self.variants[-1]

    def variant(self, variant_id: str) -> StackImage | None:
        """Return the variant with *variant_id*, or None."""
        for variant in self.variants:
            if variant.id == variant_id:
                return variant
        return None

    def clear(self) -> Stack:
        """Return a copy with every variant except the original removed."""
        return self.model_copy(update={"variants": [v for v in self.variants if v.original]})

    def tag(self, *tags: str) -> Stack:
        """Return a copy with *tags* added."""
        return self.model_copy(update={"tags": with_tags(self.tags, *tags)})

    def untag(self, *tags: str) -> Stack:
        """Return a copy with *tags* removed."""
        return self.model_copy(update={"tags": without_tags(self.tags, *tags)})

    def new_variant(self, variant_id: str, image: Image) -> StackImage:
        """Build a non-original variant for this stack.

        Does not check whether *variant_id* is already taken; use
        :meth:`Gallery.new_variant` for that.

        Raises:
            EmptyIDError: If *variant_id* is empty.
        """
        if not variant_id:
            msg = "image id: empty id"
            raise EmptyIDError(msg)
        return StackImage(id=variant_id, original=False, image=image)


class Gallery(BaseModel):
    """An image gallery.  Each image is a :class:`Stack` of variants.

    Stack order is display order.
    """

    model_config = {"frozen": True}

    stacks: list[Stack] = Field(default_factory=list)

    def stack(self, stack_id: str) -> Stack | None:
        """Return the stack with *stack_id*, or None."""
        for stack in self.stacks:
            if stack.id == stack_id:
                return stack
        return None

    def new_stack(self, stack_id: str, variant: StackImage) -> Gallery:
        """Return a gallery with a new stack appended.

        *variant* becomes the stack's only variant and is marked as the
        original.

        Raises:
            EmptyIDError: If *stack_id* or the variant id is empty.
            DuplicateIDError: If the gallery already has *stack_id*.
        """
        if not stack_id:
            msg = "stack id: empty id"
            raise EmptyIDError(msg)
        if not variant.id:
            msg = "image id: empty id"
            raise EmptyIDError(msg)
        if self.stack(stack_id) is not None:
            msg = f"stack id: duplicate id {stack_id!r}"
            raise DuplicateIDError(msg)

        stack = Stack(
            id=stack_id,
            variants=[variant.model_copy(update={"original": True})],
            tags=[],
        )
        return self.model_copy(update={"stacks": [*self.stacks, stack]})

    def remove_stack(self, stack_id: str) -> Gallery:
        """Return a gallery without the stack *stack_id*.

        Raises:
            StackNotFoundError: If the gallery has no such stack.
        """
        self._require_stack(stack_id)
        return self.model_copy(update={"stacks": [s for s in self.stacks if s.id != stack_id]})

    def new_variant(self, stack_id: str, variant_id: str, image: Image) -> Gallery:
        """Return a gallery where *image* is added to stack *stack_id*.

        Raises:
            StackNotFoundError: If the gallery has no such stack.
            DuplicateIDError: If the stack already has *variant_id*.
            EmptyIDError: If *variant_id* is empty.
        """
        stack = self._require_stack(stack_id)
        if stack.variant(variant_id) is not None:
            msg = f"variant id: duplicate id {variant_id!r}"
            raise DuplicateIDError(msg)
        variant = stack.new_variant(variant_id, image)
        updated = stack.model_copy(update={"variants": [*stack.variants, variant]})
        return self._replace_stack(updated)

    def remove_variant(self, stack_id: str, variant_id: str) -> Gallery:
        """Return a gallery with variant *variant_id* removed from its stack.

        Raises:
            StackNotFoundError: If the gallery has no such stack.
            VariantNotFoundError: If the stack has no such variant.
        """
        stack = self._require_stack(stack_id)
        if stack.variant(variant_id) is None:
            msg = f"variant not found in stack: {variant_id!r}"
            raise VariantNotFoundError(msg)
        variants = [v for v in stack.variants if v.id != variant_id]
        return self._replace_stack(stack.model_copy(update={"variants": variants}))

    def replace_variant(self, stack_id: str, variant: StackImage) -> Gallery:
        """Return a gallery where the variant with ``variant.id`` is replaced.

        Raises:
            StackNotFoundError: If the gallery has no such stack.
            VariantNotFoundError: If the stack has no variant with that id.
        """
        stack = self._require_stack(stack_id)
        if stack.variant(variant.id) is None:
            msg = f"variant not found in stack: {variant.id!r}"
            raise VariantNotFoundError(msg)
        variants = [variant if v.id == variant.id else v for v in stack.variants]
        return self._replace_stack(stack.model_copy(update={"variants": variants}))

    def tag_stack(self, stack_id: str, *tags: str) -> Gallery:
        """Return a gallery where stack *stack_id* has *tags* added."""
        return self._replace_stack(self._require_stack(stack_id).tag(*tags))

    def untag_stack(self, stack_id: str, *tags: str) -> Gallery:
        """Return a gallery where stack *stack_id* has *tags* removed."""
        return self._replace_stack(self._require_stack(stack_id).untag(*tags))

    def sort(self, order: Sequence[str]) -> Gallery:
        """Return a gallery with stacks reordered by *order*.

        Ids unknown to the gallery are ignored.  Stacks named in *order*
        come first, in that order; the rest keep their previous relative
        order after them.
        """
        known = {s.id for s in self.stacks}
        positions: dict[str, int] = {}
        for stack_id in order:
            if stack_id in known and stack_id not in positions:
                positions[stack_id] = len(positions)

        if not positions:
            return self

        previous = {s.id: i for i, s in enumerate(self.stacks)}

        def sort_key(stack: Stack) -> tuple[int, int]:
            if stack.id in positions:
                return 0, positions[stack.id]
            return 1, previous[stack.id]

        return self.model_copy(update={"stacks": sorted(self.stacks, key=sort_key)})

    def clear(self) -> Gallery:
        """Return a gallery with no stacks."""
        return self.model_copy(update={"stacks": []})

    def _require_stack(self, stack_id: str) -> Stack:
        stack = self.stack(stack_id)
        if stack is None:
            msg = f"stack not found in gallery: {stack_id!r}"
            raise StackNotFoundError(msg)
        return stack

    def _replace_stack(self, stack: Stack) -> Gallery:
        stacks = [stack if s.id == stack.id else s for s in self.stacks]
        return self.model_copy(update={"stacks": stacks})


# ---------------------------------------------------------------------------
# Hydration
# ---------------------------------------------------------------------------


def hydrate_gallery(
    raw: Mapping[str, Any] | BaseModel,
    *,
    languages: Iterable[str] | None = None,
) -> Gallery:
    """Hydrate a :class:`Gallery` from an API response."""
    data = as_payload(raw)
    langs = list(languages) if languages is not None else None
    stacks = [hydrate_stack(stack, languages=langs) for stack in data.get("stacks") or []]
    logger.debug("Hydrated gallery with %d stacks", len(stacks))
    return Gallery(stacks=stacks)


def hydrate_stack(
    raw: Mapping[str, Any] | BaseModel,
    *,
    languages: Iterable[str] | None = None,
) -> Stack:
    """Hydrate a :class:`Stack` from an API response."""
    data = as_payload(raw)
    langs = list(languages) if languages is not None else None
    variants = [
        hydrate_stack_image(variant, languages=langs) for variant in data.get("variants") or []
    ]
    return Stack(
        id=data.get("id") or "",
        variants=variants,
        tags=data.get("tags") or [],
    )


def hydrate_stack_image(
    raw: Mapping[str, Any] | BaseModel,
    *,
    languages: Iterable[str] | None = None,
) -> StackImage:
    """Hydrate a stack variant from an API response.

    Identity fields are copied verbatim; everything else goes through
    :func:`hydrate_image`.
    """
    data = as_payload(raw)
    return StackImage(
        id=data.get("id") or "",
        original=data.get("original") or False,
        image=hydrate_image(data, languages=languages),
    )


# ---------------------------------------------------------------------------
# Stack queries
# ---------------------------------------------------------------------------


def was_processed(stack: Stack) -> bool:
    """Return whether *stack* carries the ``processed`` tag."""
    return has_tag(stack, PROCESSED_TAG)


def get_original_variant(stack: Stack) -> StackImage | None:
    """Return the first original variant of *stack*, or None."""
    return stack.original()
