"""Shared pytest fixtures and payload builders for mediaentity tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's mediaentity.toml and env vars out of tests."""
    monkeypatch.chdir(tmp_path)
    for var in ("MEDIAENTITY_CONFIG", "MEDIAENTITY_JSON_OUTPUT", "MEDIAENTITY_VERBOSE"):
        monkeypatch.delenv(var, raising=False)


# ---------------------------------------------------------------------------
# Payload builders
# ---------------------------------------------------------------------------


def image_payload(**overrides: Any) -> dict[str, Any]:
    """A response-shaped image with English and German texts."""
    payload: dict[str, Any] = {
        "storage": {"provider": "fs", "path": "/foo/bar/baz.jpg"},
        "filename": "baz.jpg",
        "filesize": 12345,
        "dimensions": {"width": 1920, "height": 1080},
        "names": {"en": "Foo image", "de": "Foo Bild"},
        "descriptions": {"en": "An image of Foo", "de": "Ein Bild von Foo"},
    }
    payload.update(overrides)
    return payload


def variant_payload(variant_id: str, *, original: bool = False, **overrides: Any) -> dict[str, Any]:
    """A response-shaped stack variant."""
    return {**image_payload(**overrides), "id": variant_id, "original": original}


def stack_payload(stack_id: str, *variants: dict[str, Any], tags: list[str] | None = None) -> dict[str, Any]:
    """A response-shaped stack; omits ``tags`` when None."""
    payload: dict[str, Any] = {"id": stack_id, "variants": list(variants)}
    if tags is not None:
        payload["tags"] = tags
    return payload


def write_payload(path: Path, payload: Any) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path
