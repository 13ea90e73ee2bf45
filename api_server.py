from __future__ import annotations  # FastAPI server for the mock interview backend

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api import ai_router, interviews_router
from api.schemas import HealthResp
from config.settings import settings
from heuristics.types import utcnow
from interviews.errors import InternalError, InterviewError
from interviews.service import InterviewService
from observability import log_event
from storage.sqlite import InterviewDatabase

logger = logging.getLogger(__name__)


def create_app(db: Optional[InterviewDatabase] = None) -> FastAPI:  # Build the app around a database client
    database = db or InterviewDatabase(settings.DB_PATH)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        database.connect()
        app.state.db = database
        app.state.service = InterviewService(database)
        log_event("server_started", "-", node=settings.ENVIRONMENT)
        try:
            yield
        finally:
            database.close()

    app = FastAPI(title="Mock Interview API", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.FRONTEND_URL],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(InterviewError)
    async def interview_error_handler(request: Request, exc: InterviewError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("Interview error on %s %s: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content=exc.to_payload())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        fields = [".".join(str(part) for part in err.get("loc", ()) if part != "body") for err in exc.errors()]
        message = "Invalid request: " + ", ".join(f for f in fields if f) if fields else "Invalid request"
        return JSONResponse(status_code=400, content={"success": False, "error": message, "code": "validation_error"})

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unexpected error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content=InternalError("Internal server error").to_payload())

    @app.get("/api/health", response_model=HealthResp)
    def health() -> HealthResp:  # Liveness probe
        return HealthResp(
            message="Mock interview backend is running",
            timestamp=utcnow(),
            environment=settings.ENVIRONMENT,
        )

    app.include_router(interviews_router)
    app.include_router(ai_router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("api_server:app", host="0.0.0.0", port=3001)
