"""Image model and hydration from API response payloads.

An :class:`Image` is a single stored image: where it lives, how big it
is, and its localized names and descriptions.  Response payloads may
carry extra or missing language keys; :func:`hydrate_image` projects
both localized maps onto a single language key set.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, Field


class ImageStorage(BaseModel):
    """Storage location of an :class:`Image`."""

    model_config = {"frozen": True}

    provider: str = ""
    path: str = ""


class ImageDimensions(BaseModel):
    """Width and height of an :class:`Image`, in pixels."""

    model_config = {"frozen": True}

    width: int = 0
    height: int = 0


class Image(BaseModel):
    """An image that may be stored in (cloud) storage.

    Attributes:
        storage: Storage provider and path.
        filename: Filename without the directory.
        filesize: Size in bytes.
        dimensions: Width and height.
        names: Localized names, keyed by language.
        descriptions: Localized descriptions, keyed by language.
    """

    model_config = {"frozen": True}

    storage: ImageStorage = Field(default_factory=ImageStorage)
    filename: str = ""
    filesize: int = 0
    dimensions: ImageDimensions = Field(default_factory=ImageDimensions)
    names: dict[str, str] = Field(default_factory=dict)
    descriptions: dict[str, str] = Field(default_factory=dict)


def as_payload(raw: Mapping[str, Any] | BaseModel) -> Mapping[str, Any]:
    """Return *raw* as a response-shaped mapping.

    Already-hydrated models are dumped to their wire form so they can be
    hydrated again.
    """
    if isinstance(raw, BaseModel):
        return raw.model_dump()
    return raw


def project_languages(
    localized: Mapping[str, str] | None,
    languages: Iterable[str],
) -> dict[str, str]:
    """Keep only the *languages* keys of *localized* that carry a value.

    Examples:
        >>> project_languages({"en": "Cat", "fr": "Chat"}, ["en", "de"])
        {'en': 'Cat'}
    """
    source = localized or {}
    projected: dict[str, str] = {}
    for lang in languages:
        value = source.get(lang)
        if value is not None:
            projected[lang] = value
    return projected


def hydrate_image(
    raw: Mapping[str, Any] | BaseModel,
    *,
    languages: Iterable[str] | None = None,
) -> Image:
    """Hydrate an :class:`Image` from an API response.

    When *languages* is given it is the authoritative key set for both
    ``names`` and ``descriptions``.  Otherwise the keys of ``raw["names"]``
    are used for both maps, so description-only languages are dropped.
    """
    data = as_payload(raw)
    names = data.get("names") or {}
    descriptions = data.get("descriptions") or {}

    keys = list(languages) if languages is not None else list(names)

    return Image.model_validate(
        {
            **data,
            "names": project_languages(names, keys),
            "descriptions": project_languages(descriptions, keys),
        }
    )
