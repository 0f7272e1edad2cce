from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from menuboard.auth.dependencies import require_admin
from menuboard.core.exceptions import NotFound
from menuboard.crud.menu import standard_name as name_crud
from menuboard.db import get_db
from menuboard.schemas.menu import (
    StandardNameCreate,
    StandardNameUpdate,
    StandardNameRead,
    StandardNameRenameResult,
)

router = APIRouter()


@router.get("/names", response_model=List[StandardNameRead])
async def list_names(db: AsyncSession = Depends(get_db)):
    return await name_crud.get_standard_names(db)


@router.post("/names", response_model=StandardNameRead, dependencies=[Depends(require_admin)])
async def create_name(payload: StandardNameCreate, db: AsyncSession = Depends(get_db)):
    return await name_crud.create_standard_name(db, payload.name)


@router.put("/names/{name_id}", response_model=StandardNameRenameResult, dependencies=[Depends(require_admin)])
async def rename_name(name_id: int, payload: StandardNameUpdate, db: AsyncSession = Depends(get_db)):
    """Rename a standard name; items with the old name follow"""
    return await name_crud.rename_standard_name(db, name_id, payload.name)


@router.delete("/names/{name_id}", dependencies=[Depends(require_admin)])
async def delete_name(name_id: int, db: AsyncSession = Depends(get_db)):
    """Remove from the library only; items are left as they are"""
    row = await name_crud.delete_standard_name(db, name_id)
    if not row:
        raise NotFound("Name not found")
    return {"message": "Deleted", "id": name_id}
