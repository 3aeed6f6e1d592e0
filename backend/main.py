import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.api.health_routes import router as health_router
from backend.api.survey_routes import router as survey_router
from backend.api.issue_routes import router as issue_router
from backend.api.data_routes import router as data_router
from backend.api.dependencies import get_service
from backend.core.config import settings
from backend.core.logging import setup_logging

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Clean Water & Sanitation Backend",
    version="1.0.0",
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(survey_router)
app.include_router(issue_router)
app.include_router(data_router)

def run():
    get_service()
    logger.info("Backend running at http://%s:%s", settings.host, settings.port)
    logger.info("Data files: surveys=%s issues=%s", settings.surveys_path, settings.issues_path)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())

if __name__ == "__main__":
    run()
