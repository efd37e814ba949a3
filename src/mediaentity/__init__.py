"""mediaentity — typed image, gallery, and stack entities hydrated from API payloads."""

from mediaentity.domain.gallery import (
    DuplicateIDError,
    EmptyIDError,
    Gallery,
    GalleryError,
    Stack,
    StackImage,
    StackNotFoundError,
    VariantNotFoundError,
    get_original_variant,
    hydrate_gallery,
    hydrate_stack,
    hydrate_stack_image,
    was_processed,
)
from mediaentity.domain.image import Image, ImageDimensions, ImageStorage, hydrate_image
from mediaentity.domain.tagging import Taggable, has_tag

__version__ = "0.1.0"

__all__ = [
    "DuplicateIDError",
    "EmptyIDError",
    "Gallery",
    "GalleryError",
    "Image",
    "ImageDimensions",
    "ImageStorage",
    "Stack",
    "StackImage",
    "StackNotFoundError",
    "Taggable",
    "VariantNotFoundError",
    "get_original_variant",
    "has_tag",
    "hydrate_gallery",
    "hydrate_image",
    "hydrate_stack",
    "hydrate_stack_image",
    "was_processed",
]
