"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, mediaentity.toml only contains
overrides.  An empty file is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel


class HydrationConfig(BaseModel):
    """[hydration] section."""

    model_config = {"frozen": True}

    # None keeps every language present in the payload's names.
    languages: list[str] | None = None


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    indent: int = 2
