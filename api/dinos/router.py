"""
Dino CRUD API endpoints.
"""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter

from . import schemas, service

router = APIRouter()


@router.get("/dinos", response_model=list[schemas.Dino])
async def list_dinos() -> list[schemas.Dino]:
    return await service.list_dinos()


@router.post("/dinos", response_model=schemas.Dino)
async def create_dino(request: schemas.DinoCreate) -> schemas.Dino:
    return await service.create_dino(request)


@router.get("/dinos/{dino_id}", response_model=schemas.Dino)
async def get_dino(dino_id: UUID) -> schemas.Dino:
    return await service.get_dino(dino_id)


@router.put("/dinos/{dino_id}", response_model=schemas.Dino)
async def update_dino(dino_id: UUID, request: schemas.DinoUpdate) -> schemas.Dino:
    return await service.update_dino(dino_id, request)


@router.delete("/dinos/{dino_id}", response_model=schemas.DeleteResponse)
async def delete_dino(dino_id: UUID) -> schemas.DeleteResponse:
    """
    Delete a dino. Responds 404 when the id is unknown.
    """
    return await service.delete_dino(dino_id)
