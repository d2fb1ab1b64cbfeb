"""
Web client: server-rendered reservation pages backed by the reservation API.

Run separately from the API service, e.g. `uvicorn tripdesk.web.app:app --port 3000`.
"""

from fastapi import FastAPI

from tripdesk.infrastructure.logger_config import configure_logging
from tripdesk.web.views import router

configure_logging()

app = FastAPI(title="tripdesk web", docs_url=None, redoc_url=None, openapi_url=None)
app.include_router(router)
