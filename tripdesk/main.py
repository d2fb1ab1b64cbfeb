import yaml
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from tripdesk.infrastructure.config import settings
from tripdesk.infrastructure.database import Base, engine
from tripdesk.infrastructure.logger_config import configure_logging
from tripdesk.infrastructure.models import models  # noqa: F401  registers the tables on Base
from tripdesk.presentation.exception_handlers import register_exception_handlers
from tripdesk.presentation.routers import router

configure_logging()

app = FastAPI(title="tripdesk")


# Use the contractual schema
def custom_openapi():
    with open(settings.openapi_path) as f:
        return yaml.safe_load(f)


@app.on_event("startup")
def _log_startup() -> None:
    logger.info(f"Reservation API ready on {engine.url.render_as_string(hide_password=True)}")


@app.get("/health")
def get_health() -> dict[str, str]:
    return {"status": "ok"}


app.openapi = custom_openapi
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Location"],
)
register_exception_handlers(app)
Base.metadata.create_all(bind=engine)
app.include_router(router)
