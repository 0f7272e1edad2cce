from typing import Dict, List

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from menuboard.models.menu import Section, Item
from menuboard.schemas.menu import ItemRead, MenuSection


async def get_grouped_menu(db: AsyncSession) -> List[MenuSection]:
    """
    Sections (display_order, id) each carrying their items (id ascending).
    Sections without items are kept with an empty list.
    """
    result = await db.execute(
        select(Section, Item)
        .outerjoin(Item, Item.section_id == Section.id)
        .order_by(Section.display_order.asc(), Section.id.asc(), Item.id.asc())
    )

    menu: Dict[int, MenuSection] = {}
    for section, item in result.all():
        entry = menu.get(section.id)
        if entry is None:
            entry = menu[section.id] = MenuSection(
                id=section.id,
                name=section.name,
                display_order=section.display_order or 0,
                items=[],
            )
        if item is not None:
            entry.items.append(ItemRead.from_model(item))

    return list(menu.values())
