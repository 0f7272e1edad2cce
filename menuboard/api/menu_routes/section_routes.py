from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from menuboard.auth.dependencies import require_admin
from menuboard.core.exceptions import NotFound
from menuboard.crud.menu import section as section_crud
from menuboard.db import get_db
from menuboard.schemas.menu import SectionCreate, SectionUpdate, SectionRead

router = APIRouter()


@router.get("/sections", response_model=List[SectionRead])
async def list_sections(db: AsyncSession = Depends(get_db)):
    """Flat section list for the admin console"""
    return await section_crud.get_sections(db)


@router.post("/sections", response_model=SectionRead, dependencies=[Depends(require_admin)])
async def create_section(section: SectionCreate, db: AsyncSession = Depends(get_db)):
    return await section_crud.create_section(db, section)


@router.put("/sections/{section_id}", response_model=SectionRead, dependencies=[Depends(require_admin)])
async def update_section(section_id: int, updates: SectionUpdate, db: AsyncSession = Depends(get_db)):
    section = await section_crud.update_section(db, section_id, updates)
    if not section:
        raise NotFound("Section not found")
    return section


@router.delete("/sections/{section_id}", dependencies=[Depends(require_admin)])
async def delete_section(section_id: int, db: AsyncSession = Depends(get_db)):
    """Delete a section together with its items"""
    section = await section_crud.delete_section(db, section_id)
    if not section:
        raise NotFound("Section not found")
    return {"message": "Deleted", "id": section_id}
