from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy import delete, func

from menuboard.models.menu import Section, Item
from menuboard.schemas.menu import SectionCreate, SectionUpdate


async def next_display_order(db: AsyncSession) -> int:
    """One past the current max, so new sections land at the end."""
    result = await db.execute(select(func.max(Section.display_order)))
    current = result.scalar()
    return 0 if current is None else current + 1


async def get_sections(db: AsyncSession):
    """All sections, display_order then id"""
    result = await db.execute(
        select(Section).order_by(Section.display_order.asc(), Section.id.asc())
    )
    return result.scalars().all()


async def get_section(db: AsyncSession, section_id: int):
    result = await db.execute(select(Section).where(Section.id == section_id))
    return result.scalar_one_or_none()


async def create_section(db: AsyncSession, section: SectionCreate):
    display_order = section.display_order
    if display_order is None:
        display_order = await next_display_order(db)

    new_section = Section(name=section.name, display_order=display_order)
    db.add(new_section)
    await db.commit()
    await db.refresh(new_section)
    return new_section


async def update_section(db: AsyncSession, section_id: int, updates: SectionUpdate):
    section = await get_section(db, section_id)
    if not section:
        return None

    update_data = updates.model_dump(exclude_unset=True, exclude_none=True)
    for key, value in update_data.items():
        setattr(section, key, value)

    await db.commit()
    await db.refresh(section)
    return section


async def delete_section(db: AsyncSession, section_id: int):
    """Delete a section and, first, every item in it"""
    section = await get_section(db, section_id)
    if not section:
        return None

    # Hard-delete dependent rows; no FK cascade is assumed
    await db.execute(delete(Item).where(Item.section_id == section_id))
    await db.execute(delete(Section).where(Section.id == section_id))
    await db.commit()
    return section
