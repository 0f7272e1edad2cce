"""
Standard names library.

Items reference a standard name by value (``Item.name``), not by foreign
key. Renaming a standard name is the only operation that touches items:
the library row is committed first, then every item carrying the old name
is updated in a second, separate commit. If that second step fails it is
logged and rolled back on its own while the rename still succeeds, so the
two can drift apart.
"""
import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy import update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from menuboard.core.exceptions import DuplicateName, NotFound
from menuboard.models.menu import Item, StandardName

log = logging.getLogger(__name__)


async def get_standard_names(db: AsyncSession):
    result = await db.execute(select(StandardName).order_by(StandardName.name.asc()))
    return result.scalars().all()


async def get_standard_name(db: AsyncSession, name_id: int):
    result = await db.execute(select(StandardName).where(StandardName.id == name_id))
    return result.scalar_one_or_none()


async def create_standard_name(db: AsyncSession, name: str):
    """Add a name to the library; raises DuplicateName if it is already there"""
    row = StandardName(name=name)
    db.add(row)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise DuplicateName()
    await db.refresh(row)
    return row


async def sync_item_names(db: AsyncSession, old_name: str, new_name: str) -> int:
    result = await db.execute(
        update(Item)
        .where(Item.name == old_name)
        .values(name=new_name)
        .execution_options(synchronize_session=False)
    )
    await db.commit()
    return result.rowcount


async def rename_standard_name(db: AsyncSession, name_id: int, new_name: str) -> dict:
    """
    Rename a library entry and carry the new name over to matching items.

    Raises NotFound for an unknown id and DuplicateName when ``new_name``
    is taken. ``items_updated`` is None when the item sync failed.
    """
    row = await get_standard_name(db, name_id)
    if not row:
        raise NotFound("Name not found")

    old_name = row.name
    row_id = row.id
    row.name = new_name
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise DuplicateName()

    items_updated: Optional[int] = None
    try:
        items_updated = await sync_item_names(db, old_name, new_name)
    except SQLAlchemyError:
        await db.rollback()
        log.exception("Failed to sync items from %r to %r", old_name, new_name)

    return {
        "id": row_id,
        "name": new_name,
        "old_name": old_name,
        "items_updated": items_updated,
    }


async def delete_standard_name(db: AsyncSession, name_id: int):
    """Remove the library row only. Items keep their names."""
    row = await get_standard_name(db, name_id)
    if row:
        await db.delete(row)
        await db.commit()
    return row
