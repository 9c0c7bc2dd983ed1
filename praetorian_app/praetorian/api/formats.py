"""Supported file formats."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from praetorian.adapters.registry import AdapterRegistry
from praetorian.deps import get_registry

router = APIRouter(prefix="/api", tags=["formats"])


class FormatInfo(BaseModel):
    format: str
    extensions: list[str]


@router.get("/formats", response_model=list[FormatInfo])
async def list_formats(
    registry: AdapterRegistry = Depends(get_registry),
) -> list[FormatInfo]:
    """List formats in dispatch order."""
    return [
        FormatInfo(format=a.format.value, extensions=list(a.extensions))
        for a in registry.adapters
    ]
