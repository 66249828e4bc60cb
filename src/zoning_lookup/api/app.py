"""FastAPI application exposing the zoning lookup endpoint."""

from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

import httpx
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from zoning_lookup.api.schemas import ErrorResponse, LookupRequest, LookupResponse
from zoning_lookup.config import Settings, get_settings
from zoning_lookup.pipeline import ZoningLookup, build_lookup

LOOKUP_PATH = "/api/lookup/vancouver"


def create_app(
    settings: Optional[Settings] = None, lookup: Optional[ZoningLookup] = None
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Application settings (loaded from the environment if omitted)
        lookup: Pre-built pipeline; when omitted one is wired from settings on
            startup, sharing a single HTTP client for the app's lifetime
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if app.state.lookup is not None:
            yield
            return

        async with httpx.AsyncClient(timeout=settings.http_timeout) as client:
            app.state.lookup = build_lookup(settings, client)
            logger.info("Zoning lookup API ready (source: {})", settings.boundary_source)
            yield
            app.state.lookup = None

    app = FastAPI(
        title="Vancouver Zoning Lookup API",
        description="Resolve a Vancouver street address to its zoning district.",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.lookup = lookup

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 405:
            return JSONResponse(
                status_code=405,
                content={"error": "Method not allowed"},
                headers=exc.headers,
            )
        return JSONResponse(
            status_code=exc.status_code, content={"error": str(exc.detail)}, headers=exc.headers
        )

    @app.get("/health", tags=["system"])
    async def health() -> Dict[str, Any]:
        return {"status": "ok"}

    @app.post(
        LOOKUP_PATH,
        response_model=LookupResponse,
        responses={405: {"model": ErrorResponse}},
        openapi_extra={
            "requestBody": {
                "content": {"application/json": {"schema": LookupRequest.model_json_schema()}},
                "required": True,
            }
        },
        tags=["lookup"],
    )
    async def lookup_vancouver(request: Request) -> JSONResponse:
        """
        Look up the zoning district for a Vancouver address.

        Always answers 200: a body that is not JSON, or lacks a string
        ``address``, gets the same ``not_found`` result as any other failure.
        """
        try:
            body = await request.json()
        except ValueError:
            body = None
        address = body.get("address") if isinstance(body, dict) else None

        result = await request.app.state.lookup.lookup(address)
        return JSONResponse(
            status_code=200,
            content=result.to_dict(include_reason=settings.verbose_errors),
        )

    return app
