from fastapi import APIRouter
from . import menu_routes
from . import section_routes
from . import item_routes
from . import name_routes

router = APIRouter()

router.include_router(menu_routes.router, tags=["Menu"])
router.include_router(section_routes.router, tags=["Sections"])
router.include_router(item_routes.router, tags=["Items"])
router.include_router(name_routes.router, tags=["Standard Names"])
