from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.datastructures import UploadFile
from typing import Optional, Tuple

from menuboard.auth.dependencies import require_admin
from menuboard.core.exceptions import NotFound, ValidationFailed
from menuboard.crud.menu import item as item_crud
from menuboard.db import get_db
from menuboard.schemas.menu import ItemCreate, ItemUpdate, ItemRead
from menuboard.utils.uploads import save_item_image
from menuboard.utils.validation import describe_validation_error

router = APIRouter()

FORM_CONTENT_TYPES = ("multipart/form-data", "application/x-www-form-urlencoded")


async def read_item_payload(request: Request) -> Tuple[dict, Optional[UploadFile]]:
    """
    Items come either as multipart (optional ``image`` file, ``options`` as
    JSON text) or as a plain JSON body.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        data, image = {}, None
        for key, value in form.multi_items():
            if isinstance(value, UploadFile):
                if key == "image" and value.filename:
                    image = value
                continue
            data[key] = value
        return data, image

    try:
        data = await request.json()
    except ValueError:
        raise ValidationFailed("Invalid JSON")
    if not isinstance(data, dict):
        raise ValidationFailed("Item must be a JSON object")
    return data, None


def _validate(schema, data: dict):
    try:
        return schema.model_validate(data)
    except ValidationError as exc:
        raise ValidationFailed(describe_validation_error(exc))


@router.post("/items", response_model=ItemRead, dependencies=[Depends(require_admin)])
async def create_item(request: Request, db: AsyncSession = Depends(get_db)):
    data, image = await read_item_payload(request)
    item = _validate(ItemCreate, data)

    # an uploaded file wins over a typed-in URL
    if image is not None:
        image_url = await save_item_image(image, str(request.base_url))
        item = item.model_copy(update={"image_url": image_url})

    created = await item_crud.create_item(db, item)
    return ItemRead.from_model(created)


@router.put("/items/{item_id}", response_model=ItemRead, dependencies=[Depends(require_admin)])
async def update_item(item_id: int, request: Request, db: AsyncSession = Depends(get_db)):
    data, image = await read_item_payload(request)
    updates = _validate(ItemUpdate, data)

    if not await item_crud.get_item(db, item_id):
        raise NotFound("Item not found")

    if image is not None:
        image_url = await save_item_image(image, str(request.base_url))
        updates = updates.model_copy(update={"image_url": image_url})

    item = await item_crud.update_item(db, item_id, updates)
    if not item:
        raise NotFound("Item not found")
    return ItemRead.from_model(item)


@router.delete("/items/{item_id}", dependencies=[Depends(require_admin)])
async def delete_item(item_id: int, db: AsyncSession = Depends(get_db)):
    item = await item_crud.delete_item(db, item_id)
    if not item:
        raise NotFound("Item not found")
    return {"message": "Deleted", "id": item_id}
