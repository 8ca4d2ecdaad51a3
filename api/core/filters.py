"""
Query-string filter parsing shared by listing endpoints.

Query strings arrive as text. We first reject keys outside the resource's
vocabulary (naming the key), then coerce values through a pydantic model,
and finally hand the builder a dict in the client's original key order.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from fastapi import HTTPException, status
from pydantic import BaseModel, ValidationError

from . import sql


def _validation_detail(exc: ValidationError) -> str:
    messages = []
    for error in exc.errors():
        loc = ".".join(str(part) for part in error.get("loc", ()))
        messages.append(f"{loc}: {error.get('msg')}" if loc else str(error.get("msg")))
    return "; ".join(messages)


def parse_filters(
    raw: Mapping[str, str],
    *,
    model: type[BaseModel],
    vocabulary: sql.FilterVocabulary,
) -> dict[str, Any]:
    raw = dict(raw)
    try:
        sql.check_filter_keys(raw, vocabulary)
    except sql.UnrecognizedFilterKeyError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    try:
        parsed = model.model_validate(raw)
    except ValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=_validation_detail(exc),
        ) from exc

    coerced = parsed.model_dump(by_alias=True, exclude_none=True)
    return {key: coerced[key] for key in raw if key in coerced}
