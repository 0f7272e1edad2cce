from fastapi import APIRouter, Request, Depends
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from pathlib import Path
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from menuboard.db import get_db
from menuboard.services.menu import get_grouped_menu, filter_menu

BASE_DIR = Path(__file__).resolve().parent.parent
templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def public_menu(request: Request, q: Optional[str] = None, db: AsyncSession = Depends(get_db)):
    menu = await get_grouped_menu(db)
    return templates.TemplateResponse(request, "menu.html", {
        "sections": menu,
        "menu": filter_menu(q, menu),
        "q": q or "",
    })


@router.get("/health")
async def health():
    return {"status": "ok"}
