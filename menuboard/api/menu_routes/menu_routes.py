from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Any, List, Optional

from menuboard.auth.dependencies import require_admin
from menuboard.db import get_db
from menuboard.schemas.menu import MenuSection, ImportResponse
from menuboard.services.menu import get_grouped_menu, filter_menu, import_menu

router = APIRouter()


@router.get("/menu", response_model=List[MenuSection])
async def get_menu(q: Optional[str] = None, db: AsyncSession = Depends(get_db)):
    """Sections with their items; ``q`` narrows it down like the menu search box"""
    menu = await get_grouped_menu(db)
    return filter_menu(q, menu)


@router.post("/import", response_model=ImportResponse, dependencies=[Depends(require_admin)])
async def bulk_import(payload: Any = Body(...), db: AsyncSession = Depends(get_db)):
    """Best-effort import; failures per section come back in ``results.errors``"""
    results = await import_menu(db, payload)
    return ImportResponse(message="Import finished", results=results)
