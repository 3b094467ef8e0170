from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from employee_api.api.v1.router import api_router
from employee_api.core.config import Settings, settings
from employee_api.core.database import database
from employee_api.core.logging_config import setup_logging
from employee_api.repositories.employee_repository import EmployeeRepository
from employee_api.services.seed_loader import load_seed_data

logger = logging.getLogger(__name__)


async def seed_database(config: Settings) -> None:
    if not config.SEED_FILE or not database.initialized:
        return

    async with database.session_factory() as session:
        repository = EmployeeRepository(session)
        if await repository.exists():
            logger.info("Employees table already populated — skipping seed")
            return
        await load_seed_data(repository, config.SEED_FILE)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    setup_logging(settings.LOG_LEVEL)
    try:
        await database.initialize(settings)
    except Exception:
        logger.exception("Failed to initialize Database — continuing without DB")
    try:
        await seed_database(settings)
    except Exception:
        logger.exception("Failed to load seed data from %s", settings.SEED_FILE)
    yield
    await database.close()


app = FastAPI(
    title="Employee API",
    description="CRUD service for employee records",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.get("/")
async def root():
    return {"message": "Employee API"}
