from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from menuboard.core.exceptions import ValidationFailed
from menuboard.models.menu import Section, Item
from menuboard.models.menu.item import encode_options
from menuboard.schemas.menu import ItemCreate, ItemUpdate


def _dump_options(groups) -> str:
    return encode_options([group.model_dump() for group in groups or []])


async def _ensure_section(db: AsyncSession, section_id: int) -> None:
    result = await db.execute(select(Section.id).where(Section.id == section_id))
    if result.first() is None:
        raise ValidationFailed("Invalid section")


async def get_item(db: AsyncSession, item_id: int):
    result = await db.execute(select(Item).where(Item.id == item_id))
    return result.scalar_one_or_none()


async def get_items(db: AsyncSession, section_id: int = None):
    query = select(Item)
    if section_id is not None:
        query = query.where(Item.section_id == section_id)
    result = await db.execute(query.order_by(Item.id.asc()))
    return result.scalars().all()


async def create_item(db: AsyncSession, item: ItemCreate, commit: bool = True):
    """Create an item; raises ValidationFailed when the section does not exist"""
    await _ensure_section(db, item.section_id)

    new_item = Item(
        section_id=item.section_id,
        name=item.name,
        description=item.description or "",
        price=float(item.price),
        available=item.available,
        image_url=item.image_url or "",
        options=_dump_options(item.options),
    )
    db.add(new_item)
    if commit:
        await db.commit()
        await db.refresh(new_item)
    return new_item


async def update_item(db: AsyncSession, item_id: int, updates: ItemUpdate):
    """Update only the fields that were sent"""
    item = await get_item(db, item_id)
    if not item:
        return None

    update_data = updates.model_dump(exclude_unset=True, exclude_none=True)
    if "section_id" in update_data:
        await _ensure_section(db, update_data["section_id"])
    if "options" in update_data:
        update_data["options"] = _dump_options(updates.options)

    for key, value in update_data.items():
        setattr(item, key, value)

    await db.commit()
    await db.refresh(item)
    return item


async def delete_item(db: AsyncSession, item_id: int):
    item = await get_item(db, item_id)
    if item:
        await db.delete(item)
        await db.commit()
    return item
