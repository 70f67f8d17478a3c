"""HTTP API router delegating to the boundary contract."""

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from . import contract

router = APIRouter(tags=["photostag"])


class ProcessRequest(BaseModel):
    """Request body for processing a single image."""

    image: str
    options: dict[str, Any]


class BatchRequest(BaseModel):
    """Request body for processing a batch."""

    images: list[str] | str
    options: dict[str, Any]


class ValidateRequest(BaseModel):
    """Request body for validating an image."""

    image: str = Field(min_length=1)


@router.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "ok", "version": contract.get_version()}


@router.get("/filters")
async def list_filters() -> list[str]:
    """Filter names in catalog order."""
    return contract.get_available_filters()


@router.get("/filters/catalog")
async def filter_catalog() -> list[dict]:
    """Filter entries with display metadata."""
    return contract.get_filter_catalog()


@router.get("/effects")
async def list_effects() -> list[str]:
    """Effect names in catalog order."""
    return contract.get_available_effects()


@router.get("/effects/catalog")
async def effect_catalog() -> list[dict]:
    """Effect entries with display metadata."""
    return contract.get_effect_catalog()


@router.post("/process")
def process_image(body: ProcessRequest) -> dict:
    """Process one image.

    Processing failures are answered with 400 and the error message.
    """
    result = contract.process_image(body.image, body.options)
    if not result["success"]:
        raise HTTPException(status_code=400, detail=result["error"])
    return result


@router.post("/batch")
def process_batch(body: BatchRequest) -> dict:
    """Process a batch. Per-item failures are reported in the results."""
    return contract.process_image_batch(body.images, body.options)


@router.post("/validate")
def validate_image(body: ValidateRequest) -> dict:
    """Check whether an image decodes."""
    return contract.validate_image(body.image)
