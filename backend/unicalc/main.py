"""UniCalc: FastAPI application entry point."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from unicalc.config import settings
from unicalc.logging_config import setup_logging
from unicalc.core.engine.sessions import CalculatorSessions
from unicalc.api.routes_calculator import router as calculator_router
from unicalc.api.routes_convert import router as convert_router

VERSION = "0.1.0"

setup_logging(settings.log_level, settings.log_file)

app = FastAPI(
    title=settings.app_name,
    version=VERSION,
    description="Calculator sessions and unit/currency conversion.",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.state.sessions = CalculatorSessions(max_sessions=settings.max_sessions)

app.include_router(calculator_router, prefix="/api")
app.include_router(convert_router, prefix="/api")


@app.get("/api/health")
async def health():
    return {"status": "ok", "version": VERSION}
