"""
Bulk Menu Import Service

Creates sections and items from a nested JSON document:

    [{"name": "Drinks", "items": [{"name": "Cola", "price": 3}]}, ...]

Every distinct item name is first offered to the standard names library
(duplicates ignored). Sections are then created in input order, each row
committed on its own. A failing section or item is recorded in ``errors``
and the import moves on to the next section; nothing is rolled back.
"""
import logging
from typing import Any, List

from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from menuboard.core.constants import UNTITLED_SECTION
from menuboard.core.exceptions import MenuboardError, ValidationFailed
from menuboard.crud.menu import section as section_crud
from menuboard.crud.menu import item as item_crud
from menuboard.models.menu import StandardName
from menuboard.schemas.menu import ImportItem, ImportResult, ItemCreate, SectionCreate
from menuboard.utils.validation import describe_validation_error

log = logging.getLogger(__name__)


def collect_item_names(payload: List[Any]) -> List[str]:
    """Distinct, non-empty item names in first-seen order"""
    names = {}
    for doc in payload:
        if not isinstance(doc, dict):
            continue
        items = doc.get("items")
        if not isinstance(items, list):
            continue
        for raw in items:
            if not isinstance(raw, dict):
                continue
            name = raw.get("name")
            if isinstance(name, str) and name.strip():
                names.setdefault(name.strip(), None)
    return list(names)


def section_label(doc: Any, index: int) -> str:
    if isinstance(doc, dict):
        name = doc.get("name")
        if isinstance(name, str) and name.strip():
            return name.strip()
        return UNTITLED_SECTION
    return f"Section #{index + 1}"


class MenuImporter:
    """Best-effort, non-transactional importer"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def run(self, payload: Any) -> ImportResult:
        if not isinstance(payload, list):
            raise ValidationFailed("Import data must be an array of sections")

        result = ImportResult()
        await self.seed_standard_names(collect_item_names(payload))

        for index, doc in enumerate(payload):
            await self._import_section(doc, index, result)

        log.info(
            "Import finished: %d sections, %d items, %d errors",
            result.sections, result.items, len(result.errors),
        )
        return result

    async def seed_standard_names(self, names: List[str]) -> int:
        """Insert names missing from the library. Never raises."""
        if not names:
            return 0

        existing = set((await self.db.execute(select(StandardName.name))).scalars().all())
        added = 0
        for name in names:
            if name in existing:
                continue
            self.db.add(StandardName(name=name))
            try:
                await self.db.commit()
                added += 1
            except IntegrityError:
                # already in the library (concurrent insert)
                await self.db.rollback()
            except SQLAlchemyError:
                await self.db.rollback()
                log.warning("Could not add standard name %r during import", name, exc_info=True)
        return added

    def _error(self, result: ImportResult, message: str) -> None:
        log.warning("Import: %s", message)
        result.errors.append(message)

    async def _import_section(self, doc: Any, index: int, result: ImportResult) -> None:
        label = section_label(doc, index)

        if not isinstance(doc, dict):
            self._error(result, f"{label}: section must be an object")
            return

        items = doc.get("items")
        if items is None:
            items = []
        elif not isinstance(items, list):
            self._error(result, f"{label}: items must be a list")
            return

        try:
            section = await section_crud.create_section(self.db, SectionCreate(name=label))
        except SQLAlchemyError:
            await self.db.rollback()
            log.exception("Import: failed to create section %r", label)
            self._error(result, f"{label}: could not create section")
            return
        result.sections += 1

        for position, raw in enumerate(items, start=1):
            try:
                if not isinstance(raw, dict):
                    raise ValueError("item must be an object")
                data = ImportItem.model_validate(raw)
                await item_crud.create_item(
                    self.db,
                    ItemCreate(section_id=section.id, **data.model_dump()),
                )
            except ValidationError as exc:
                message = describe_validation_error(exc)
            except ValueError as exc:
                message = str(exc)
            except MenuboardError as exc:
                message = exc.message
            except SQLAlchemyError:
                await self.db.rollback()
                log.exception("Import: failed to create item %d of %r", position, label)
                message = "database error"
            else:
                result.items += 1
                continue

            # remaining items of this section are skipped
            self._error(result, f"{label}: item {position}: {message}")
            break


async def import_menu(db: AsyncSession, payload: Any) -> ImportResult:
    return await MenuImporter(db).run(payload)
