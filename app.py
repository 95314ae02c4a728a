import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlmodel import SQLModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import Settings, get_settings
from database import build_engine
from models.envelope import failure

# registers the contacts table on SQLModel.metadata
import models

# Routers
from routes.contact_routes import router as contact_router

logger = logging.getLogger(__name__)


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(x) for x in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg')}")
    return "; ".join(parts) or "Invalid request"


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(title="Contacts API")
    app.state.settings = settings
    app.state.engine = build_engine(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------
    # STARTUP
    # -------------------------
    @app.on_event("startup")
    def on_startup():
        SQLModel.metadata.create_all(app.state.engine)
        Path(settings.assets_dir).mkdir(parents=True, exist_ok=True)
        logger.info(
            "Contacts API ready (prefix=%r, assets=%s)",
            settings.contacts_prefix,
            settings.assets_dir,
        )

    # -------------------------
    # ERRORS
    # -------------------------
    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=failure(str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=422, content=failure(_validation_message(exc)))

    # -------------------------
    # ROUTERS
    # -------------------------
    app.include_router(contact_router, prefix=settings.contacts_prefix)

    # uploaded avatars are served from the root: <scheme>://<host>/<file>
    app.mount(
        "/",
        StaticFiles(directory=settings.assets_dir, check_dir=False),
        name="assets",
    )

    return app


app = create_app()


def main() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run("app:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
