### menuboard/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.sessions import SessionMiddleware

from menuboard.core.config import settings
from menuboard.core.constants import UPLOAD_PATHS  # noqa: F401  creates upload folders
from menuboard.core.exceptions import MenuboardError
from menuboard.auth.dependencies import AdminLoginRequired
from menuboard.auth.routes import router as auth_router
from menuboard.api import public_routes
from menuboard.api.admin import admin_console_routes
from menuboard.api.menu_routes import router as menu_api_router
from menuboard.db import create_db_and_tables, seed_default_sections
from menuboard.utils.validation import describe_validation_error

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
log = logging.getLogger(__name__)

# Create the FastAPI app
app = FastAPI(title="Menuboard API", version="1.0.0")

# ✅ Session middleware (admin console keeps its token in the session cookie)
app.add_middleware(SessionMiddleware, secret_key=settings.session_secret)

# ✅ Allow the frontend (CORS)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ✅ Uploaded item photos
app.mount("/uploads", StaticFiles(directory=settings.upload_dir), name="uploads")


# ----- Error handling: every JSON error is {"error": "..."}
@app.exception_handler(MenuboardError)
async def menuboard_error_handler(request: Request, exc: MenuboardError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"error": describe_validation_error(exc)})


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)


@app.exception_handler(SQLAlchemyError)
async def db_error_handler(request: Request, exc: SQLAlchemyError):
    log.exception("Database error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Database error"})


@app.exception_handler(AdminLoginRequired)
async def admin_login_redirect(request: Request, exc: AdminLoginRequired):
    return RedirectResponse(url="/admin/login", status_code=303)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    log.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Server error"})


@app.on_event("startup")
async def on_startup():
    log.info("🔧 Starting DB setup...")
    await create_db_and_tables()
    if settings.seed_default_sections:
        await seed_default_sections()
    log.info("✅ DB ready.")


# ✅ Routers
app.include_router(auth_router, prefix="/api", tags=["Auth"])
app.include_router(menu_api_router, prefix="/api")
app.include_router(public_routes.router)
app.include_router(admin_console_routes.router)
