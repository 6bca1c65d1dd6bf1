"""
Dino business logic.

Scope:
- NotFound for unknown ids on read/update/delete
- Conflict for duplicate client-supplied ids on create
- ids are immutable after creation
"""

from __future__ import annotations

import logging
import uuid
from uuid import UUID

from fastapi import HTTPException, status

from core import db

from . import repository, schemas

logger = logging.getLogger(__name__)


def _not_found(dino_id: UUID) -> HTTPException:
    logger.debug("dino_not_found id=%s", dino_id)
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Dino not found.",
    )


def _to_dino(row: dict) -> schemas.Dino:
    return schemas.Dino(
        id=row["id"],
        name=str(row["name"]),
        weight=int(row["weight"]),
        diet=str(row["diet"]),
        user_id=row.get("user_id"),
    )


async def list_dinos() -> list[schemas.Dino]:
    rows = await repository.list_dinos()
    return [_to_dino(row) for row in rows]


async def get_dino(dino_id: UUID) -> schemas.Dino:
    row = await repository.get_dino(dino_id)
    if row is None:
        raise _not_found(dino_id)
    return _to_dino(row)


async def create_dino(payload: schemas.DinoCreate) -> schemas.Dino:
    dino_id = payload.id or uuid.uuid4()
    try:
        row = await repository.create_dino(
            dino_id=dino_id,
            name=payload.name,
            weight=payload.weight,
            diet=payload.diet,
            user_id=payload.user_id,
        )
    except db.ConflictError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="A dino with this id already exists.",
        ) from exc

    logger.info("dino_created id=%s", dino_id)
    return _to_dino(row)


async def update_dino(dino_id: UUID, payload: schemas.DinoUpdate) -> schemas.Dino:
    if payload.id is not None and payload.id != dino_id:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Dino id is immutable.",
        )

    row = await repository.update_dino(
        dino_id,
        name=payload.name,
        weight=payload.weight,
        diet=payload.diet,
        user_id=payload.user_id,
        replace_user_id="user_id" in payload.model_fields_set,
    )
    if row is None:
        raise _not_found(dino_id)

    logger.info("dino_updated id=%s", dino_id)
    return _to_dino(row)


async def delete_dino(dino_id: UUID) -> schemas.DeleteResponse:
    row = await repository.delete_dino(dino_id)
    if row is None:
        raise _not_found(dino_id)

    logger.info("dino_deleted id=%s", dino_id)
    return schemas.DeleteResponse(id=row["id"])
