# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-07
# Updated: 2026-01-29
# Description: main.py
# -----------------------------------------------------------------------------
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.AppContainer import get_app_container
from api.routers import documents, health, query
from settings import API_PREFIX

logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Config errors and schema failures propagate here and stop the server from starting
    container = get_app_container()
    container.store.init_schema()
    logger.info("RAG API ready (backend=%s)", container.cfg.vector_backend)
    yield


app = FastAPI(title="RAG QA API", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

for router in (health.router, documents.router, query.router):
    app.include_router(router)
    if API_PREFIX:
        app.include_router(router, prefix=API_PREFIX)


if __name__ == "__main__":
    import uvicorn

    cfg = get_app_container().cfg
    uvicorn.run(app, host="0.0.0.0", port=cfg.port)
