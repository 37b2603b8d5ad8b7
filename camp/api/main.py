"""
FastAPI app assembly: logging, middleware and router wiring.
"""
import logging
from datetime import datetime, timezone
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from camp import __version__
from camp.utils.config import get_settings

# Configure logging
_settings = get_settings()
LOG_LEVEL_NAME = _settings["log_level"]
LOG_LEVEL = getattr(logging, LOG_LEVEL_NAME, logging.INFO)
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)
logger.info("app_startup: log_level=%s", LOG_LEVEL_NAME)

from camp.api.children import router as children_router
from camp.api.groups import router as groups_router
from camp.api.disciplines import router as disciplines_router
from camp.api.results import router as results_router

# Database schema is managed by Alembic migrations.

app = FastAPI(
    title="Camp Olympics Service",
    description="API for managing camp children, groups, Olympic disciplines and ranked results.",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings["cors_origins"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/healthcheck")
def healthcheck():
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}


app.include_router(children_router)
app.include_router(groups_router)
app.include_router(disciplines_router)
app.include_router(results_router)
