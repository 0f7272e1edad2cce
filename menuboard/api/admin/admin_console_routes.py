import json
import logging
from typing import Optional
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, Request, Form, File, UploadFile
from fastapi.responses import RedirectResponse
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from menuboard.api.public_routes import templates
from menuboard.auth.dependencies import (
    SESSION_TOKEN_KEY,
    get_session_claims,
    require_admin_session,
)
from menuboard.auth.tokens import check_password, issue_token
from menuboard.core.exceptions import MenuboardError
from menuboard.crud.menu import item as item_crud
from menuboard.crud.menu import section as section_crud
from menuboard.crud.menu import standard_name as name_crud
from menuboard.db import get_db
from menuboard.schemas.menu import (
    ItemCreate,
    ItemUpdate,
    SectionCreate,
    SectionUpdate,
    StandardNameCreate,
)
from menuboard.services.menu import get_grouped_menu, import_menu
from menuboard.utils.uploads import save_item_image
from menuboard.utils.validation import describe_validation_error

log = logging.getLogger(__name__)

router = APIRouter(prefix="/admin")


def _back(success: Optional[str] = None, error: Optional[str] = None) -> RedirectResponse:
    params = {}
    if success:
        params["success"] = success
    if error:
        params["error"] = error
    url = "/admin" + (f"?{urlencode(params)}" if params else "")
    return RedirectResponse(url=url, status_code=303)


def _error_message(exc: Exception) -> str:
    if isinstance(exc, ValidationError):
        return describe_validation_error(exc)
    return exc.message


def _item_form(
    section_id: str,
    name: str,
    description: str,
    price: str,
    available: Optional[str],
    image_url: str,
    options: str,
) -> dict:
    return {
        "section_id": section_id,
        "name": name,
        "description": description,
        "price": price,
        "available": available is not None,
        "image_url": image_url,
        "options": options,
    }


# ----- Login / Logout
@router.get("/login")
async def login_form(request: Request):
    if get_session_claims(request):
        return RedirectResponse(url="/admin", status_code=303)
    return templates.TemplateResponse(request, "admin/login.html")


@router.post("/login")
async def login_post(request: Request, password: str = Form("")):
    if not check_password(password):
        log.warning("Admin console login failed")
        return templates.TemplateResponse(
            request,
            "admin/login.html",
            {"error": "Invalid password"},
            status_code=401,
        )
    request.session[SESSION_TOKEN_KEY] = issue_token()
    return RedirectResponse(url="/admin", status_code=303)


@router.get("/logout")
async def logout(request: Request):
    request.session.clear()
    return RedirectResponse(url="/admin/login", status_code=303)


# ----- Dashboard
@router.get("")
async def dashboard(
    request: Request,
    db: AsyncSession = Depends(get_db),
    claims=Depends(require_admin_session),
):
    return templates.TemplateResponse(request, "admin/dashboard.html", {
        "menu": await get_grouped_menu(db),
        "names": await name_crud.get_standard_names(db),
        "success": request.query_params.get("success"),
        "error": request.query_params.get("error"),
    })


# ----- Sections
@router.post("/sections/create")
async def create_section(
    name: str = Form(""),
    db: AsyncSession = Depends(get_db),
    claims=Depends(require_admin_session),
):
    try:
        await section_crud.create_section(db, SectionCreate(name=name))
    except ValidationError as exc:
        return _back(error=_error_message(exc))
    return _back(success="Section added")


@router.post("/sections/{section_id}/edit")
async def edit_section(
    section_id: int,
    name: str = Form(""),
    display_order: Optional[int] = Form(None),
    db: AsyncSession = Depends(get_db),
    claims=Depends(require_admin_session),
):
    try:
        updates = SectionUpdate(name=name, display_order=display_order)
    except ValidationError as exc:
        return _back(error=_error_message(exc))
    if not await section_crud.update_section(db, section_id, updates):
        return _back(error="Section not found")
    return _back(success="Section updated")


@router.post("/sections/{section_id}/delete")
async def delete_section(
    section_id: int,
    db: AsyncSession = Depends(get_db),
    claims=Depends(require_admin_session),
):
    if not await section_crud.delete_section(db, section_id):
        return _back(error="Section not found")
    return _back(success="Section deleted")


# ----- Standard names
@router.post("/names/create")
async def create_name(
    name: str = Form(""),
    db: AsyncSession = Depends(get_db),
    claims=Depends(require_admin_session),
):
    try:
        payload = StandardNameCreate(name=name)
        await name_crud.create_standard_name(db, payload.name)
    except (ValidationError, MenuboardError) as exc:
        return _back(error=_error_message(exc))
    return _back(success="Name added")


@router.post("/names/{name_id}/edit")
async def rename_name(
    name_id: int,
    name: str = Form(""),
    db: AsyncSession = Depends(get_db),
    claims=Depends(require_admin_session),
):
    try:
        payload = StandardNameCreate(name=name)
        result = await name_crud.rename_standard_name(db, name_id, payload.name)
    except (ValidationError, MenuboardError) as exc:
        return _back(error=_error_message(exc))

    if result["items_updated"] is None:
        return _back(success="Name updated", error="Items could not be synced")
    return _back(success=f"Name updated ({result['items_updated']} items synced)")


@router.post("/names/{name_id}/delete")
async def delete_name(
    name_id: int,
    db: AsyncSession = Depends(get_db),
    claims=Depends(require_admin_session),
):
    if not await name_crud.delete_standard_name(db, name_id):
        return _back(error="Name not found")
    return _back(success="Name deleted")


# ----- Items
@router.post("/items/create")
async def create_item(
    request: Request,
    section_id: str = Form(""),
    name: str = Form(""),
    description: str = Form(""),
    price: str = Form("0"),
    available: Optional[str] = Form(None),
    image_url: str = Form(""),
    options: str = Form("[]"),
    image: UploadFile = File(None),
    db: AsyncSession = Depends(get_db),
    claims=Depends(require_admin_session),
):
    data = _item_form(section_id, name, description, price, available, image_url, options)
    try:
        item = ItemCreate.model_validate(data)
        if image and image.filename:
            item = item.model_copy(update={"image_url": await save_item_image(image, str(request.base_url))})
        await item_crud.create_item(db, item)
    except (ValidationError, MenuboardError) as exc:
        return _back(error=_error_message(exc))
    return _back(success="Item added")


@router.post("/items/{item_id}/edit")
async def edit_item(
    item_id: int,
    request: Request,
    section_id: str = Form(""),
    name: str = Form(""),
    description: str = Form(""),
    price: str = Form("0"),
    available: Optional[str] = Form(None),
    image_url: str = Form(""),
    options: str = Form("[]"),
    image: UploadFile = File(None),
    db: AsyncSession = Depends(get_db),
    claims=Depends(require_admin_session),
):
    data = _item_form(section_id, name, description, price, available, image_url, options)
    try:
        updates = ItemUpdate.model_validate(data)
        if image and image.filename:
            updates = updates.model_copy(update={"image_url": await save_item_image(image, str(request.base_url))})
        item = await item_crud.update_item(db, item_id, updates)
    except (ValidationError, MenuboardError) as exc:
        return _back(error=_error_message(exc))
    if not item:
        return _back(error="Item not found")
    return _back(success="Item updated")


@router.post("/items/{item_id}/delete")
async def delete_item(
    item_id: int,
    db: AsyncSession = Depends(get_db),
    claims=Depends(require_admin_session),
):
    if not await item_crud.delete_item(db, item_id):
        return _back(error="Item not found")
    return _back(success="Item deleted")


# ----- Bulk import (JSON textarea)
@router.post("/import")
async def bulk_import(
    json_text: str = Form(""),
    db: AsyncSession = Depends(get_db),
    claims=Depends(require_admin_session),
):
    try:
        payload = json.loads(json_text)
    except ValueError as exc:
        return _back(error=f"Invalid JSON: {exc}")

    try:
        results = await import_menu(db, payload)
    except MenuboardError as exc:
        return _back(error=exc.message)

    success = f"Imported {results.sections} sections and {results.items} items"
    error = "; ".join(results.errors) if results.errors else None
    return _back(success=success, error=error)
