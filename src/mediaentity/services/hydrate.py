"""HydrationService — read JSON payload files and hydrate entities.

The domain hydrators raise on structurally malformed payloads.  This
service turns those failures (and file/JSON problems) into structured
:class:`ServiceResult` errors for the CLI.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ValidationError
from structlog.contextvars import bound_contextvars

from mediaentity.domain.gallery import (
    get_original_variant,
    hydrate_gallery,
    hydrate_stack,
    was_processed,
)
from mediaentity.domain.image import hydrate_image
from mediaentity.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

PayloadKind = Literal["image", "stack", "gallery"]

_HYDRATORS: dict[str, Callable[..., BaseModel]] = {
    "image": hydrate_image,
    "stack": hydrate_stack,
    "gallery": hydrate_gallery,
}


class PayloadError(Exception):
    """A payload file could not be read or parsed."""

    def __init__(self, code: str, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.detail = detail


def _error_result(op: str, code: str, message: str, **detail: Any) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=detail),
    )


class HydrationService:
    """Hydrate image, stack, and gallery payloads stored as JSON files.

    Args:
        languages: Default language filter applied when a call does not
            pass its own.  None keeps every language in the payload's names.
    """

    def __init__(self, languages: Sequence[str] | None = None) -> None:
        self._languages = list(languages) if languages is not None else None

    @staticmethod
    def load_payload(path: Path) -> dict[str, Any]:
        """Read a JSON object from *path*.

        Raises:
            PayloadError: If the file is missing or unreadable, is not
                valid UTF-8 JSON, or does not hold a JSON object.
        """
        if not path.is_file():
            raise PayloadError("FILE_NOT_FOUND", f"No such file: {path}", path=str(path))
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise PayloadError(
                "INVALID_JSON", f"{path} is not UTF-8 encoded: {exc}", path=str(path)
            ) from exc
        except OSError as exc:
            raise PayloadError(
                "FILE_UNREADABLE", f"Cannot read {path}: {exc}", path=str(path)
            ) from exc
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise PayloadError(
                "INVALID_JSON", f"Invalid JSON in {path}: {exc}", path=str(path)
            ) from exc
        if not isinstance(data, dict):
            raise PayloadError(
                "INVALID_PAYLOAD",
                f"Expected a JSON object in {path}, got {type(data).__name__}",
                path=str(path),
            )
        return data

    def hydrate_file(
        self,
        kind: PayloadKind,
        path: Path,
        *,
        languages: Sequence[str] | None = None,
    ) -> ServiceResult:
        """Hydrate the *kind* payload in *path*.

        On success ``data`` holds ``kind`` and the hydrated ``entity`` in
        its wire form.
        """
        op = f"hydrate_{kind}"
        langs = list(languages) if languages is not None else self._languages

        with bound_contextvars(kind=kind, source=str(path)):
            try:
                payload = self.load_payload(path)
                entity = _HYDRATORS[kind](payload, languages=langs)
            except PayloadError as exc:
                logger.debug("Payload rejected: %s", exc.message)
                return _error_result(op, exc.code, exc.message, **exc.detail)
            except (ValidationError, TypeError, AttributeError) as exc:
                logger.debug("Hydration failed", exc_info=True)
                return _error_result(
                    op, "INVALID_PAYLOAD", f"Malformed {kind} payload: {exc}", path=str(path)
                )

        return ServiceResult(
            ok=True,
            op=op,
            data={"kind": kind, "entity": entity.model_dump(mode="json")},
        )

    def inspect_gallery(self, path: Path) -> ServiceResult:
        """Summarize each stack of the gallery payload in *path*."""
        op = "inspect_gallery"

        with bound_contextvars(kind="gallery", source=str(path)):
            try:
                gallery = hydrate_gallery(self.load_payload(path), languages=self._languages)
            except PayloadError as exc:
                logger.debug("Payload rejected: %s", exc.message)
                return _error_result(op, exc.code, exc.message, **exc.detail)
            except (ValidationError, TypeError, AttributeError) as exc:
                logger.debug("Hydration failed", exc_info=True)
                return _error_result(
                    op, "INVALID_PAYLOAD", f"Malformed gallery payload: {exc}", path=str(path)
                )

        warnings: list[str] = []
        stacks: list[dict[str, Any]] = []
        for stack in gallery.stacks:
            original = get_original_variant(stack)
            if original is None:
                warnings.append(f"Stack {stack.id!r} has no original variant")
            stacks.append(
                {
                    "id": stack.id,
                    "variants": len(stack.variants),
                    "original": original.id if original is not None else None,
                    "processed": was_processed(stack),
                    "tags": list(stack.tags),
                }
            )

        return ServiceResult(
            ok=True,
            op=op,
            data={"stack_count": len(stacks), "stacks": stacks},
            warnings=warnings,
        )
