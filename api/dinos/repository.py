"""
Dino persistence (raw SQL).

Every function is a single statement; NotFound is detected from RETURNING.
"""

from __future__ import annotations

from uuid import UUID

from core import db

_COLUMNS = "id, name, weight, diet, user_id"


async def list_dinos() -> list[dict]:
    return await db.fetch_all(
        f"""
        SELECT {_COLUMNS}
        FROM dinos
        ORDER BY name ASC, id ASC
        """
    )


async def get_dino(dino_id: UUID) -> dict | None:
    return await db.fetch_one(
        f"""
        SELECT {_COLUMNS}
        FROM dinos
        WHERE id = $1
        """,
        dino_id,
    )


async def create_dino(
    *,
    dino_id: UUID,
    name: str,
    weight: int,
    diet: str,
    user_id: str | None = None,
) -> dict:
    row = await db.fetch_one(
        f"""
        INSERT INTO dinos (id, name, weight, diet, user_id)
        VALUES ($1, $2, $3, $4, $5)
        RETURNING {_COLUMNS}
        """,
        dino_id,
        name,
        weight,
        diet,
        user_id,
    )
    if row is None:
        raise db.StorageError("Failed to create dino.")
    return row


async def update_dino(
    dino_id: UUID,
    *,
    name: str | None = None,
    weight: int | None = None,
    diet: str | None = None,
    user_id: str | None = None,
    replace_user_id: bool = False,
) -> dict | None:
    """
    Overwrite the given fields of one dino. None leaves a column untouched,
    except `user_id`, which is written (possibly as NULL) when `replace_user_id` is set.
    """
    return await db.fetch_one(
        f"""
        UPDATE dinos
        SET name = COALESCE($2, name),
            weight = COALESCE($3, weight),
            diet = COALESCE($4, diet),
            user_id = CASE WHEN $6 THEN $5 ELSE user_id END
        WHERE id = $1
        RETURNING {_COLUMNS}
        """,
        dino_id,
        name,
        weight,
        diet,
        user_id,
        replace_user_id,
    )


async def delete_dino(dino_id: UUID) -> dict | None:
    return await db.fetch_one(
        """
        DELETE FROM dinos
        WHERE id = $1
        RETURNING id
        """,
        dino_id,
    )
