"""Diagnostic records collected while inlining."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class Diagnostic(BaseModel):
    """A single progress or warning message, in the order it was produced."""

    level: Literal["info", "warning"]
    message: str
    path: str | None = None
    kind: str | None = None  # reference kind, when tied to a reference


def info(
    diagnostics: list[Diagnostic] | None,
    message: str,
    path: str | None = None,
    kind: str | None = None,
) -> None:
    if diagnostics is not None:
        diagnostics.append(Diagnostic(level="info", message=message, path=path, kind=kind))


def warning(
    diagnostics: list[Diagnostic] | None,
    message: str,
    path: str | None = None,
    kind: str | None = None,
) -> None:
    if diagnostics is not None:
        diagnostics.append(Diagnostic(level="warning", message=message, path=path, kind=kind))
