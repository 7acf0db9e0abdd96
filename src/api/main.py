"""
FastAPI application for the Kurs Saldo API.
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.auth.routes import router as auth_router
from .deps import build_state, cors_origins
from .routes import router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build sources and the keyword cache on startup; clear on shutdown."""
    sources, keyword_cache = build_state()
    app.state.sources = sources
    app.state.keyword_cache = keyword_cache
    yield
    app.state.keyword_cache.clear()


app = FastAPI(
    title="Kurs Saldo API",
    description="Indonesian financial news, trending topics and exchange rates",
    version="1.0.0",
    lifespan=lifespan,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins(),
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "X-API-Key"],
)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"success": False, "error": "Invalid request body", "details": jsonable_encoder(exc.errors())},
    )


app.include_router(router)
app.include_router(auth_router)
