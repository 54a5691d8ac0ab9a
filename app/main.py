from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.api.router import api_router
from app.core.config import settings
from app.services.employee_service import employee_repository

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    try:
        await employee_repository.initialize(settings)
    except Exception:
        logger.exception("Failed to initialize EmployeeRepository; continuing without DB")
    yield
    await employee_repository.close()


app = FastAPI(
    title="Employee Screening API",
    description="Employee CRUD backed by Cosmos DB with optional Redis caching",
    version=settings.APP_VERSION,
    lifespan=lifespan,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
    openapi_url="/openapi.json" if settings.DEBUG else None,
)

app.include_router(api_router)


@app.get("/")
async def root():
    return {"message": "Employee Screening API"}
