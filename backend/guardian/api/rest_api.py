"""
FastAPI REST API - Main HTTP endpoints
Provides token analysis, transfer graph and jeeter reports
"""

from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from typing import Awaitable, Callable, Optional
import logging

from guardian.config.constants import LIVENESS_MESSAGE
from guardian.config.settings import settings
from guardian.core.data_models import RequestParams
from guardian.core.exceptions import GuardianException
from guardian.core.service_manager import ServiceManager, get_service_manager
from guardian.orchestration.assembler import as_payload, assemble_error
from guardian.api.middleware import (
    logging_middleware,
    security_headers_middleware,
    error_handling_middleware
)
from guardian.utils.validators import normalize_request_params

logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    docs_url="/api/docs",
    redoc_url="/api/redoc"
)

app.middleware("http")(error_handling_middleware)
app.middleware("http")(logging_middleware)
app.middleware("http")(security_headers_middleware)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"]
)


async def run_endpoint(
    operation: Callable[[RequestParams], Awaitable],
    params: RequestParams,
    failure_message: str
) -> JSONResponse:
    """
    Single error boundary of a request

    Validation errors map to 400, every other failure to 500 with the
    underlying message.
    """
    try:
        response = await operation(params)
        return JSONResponse(content=as_payload(response))

    except GuardianException as e:
        if e.status_code >= 500:
            logger.error(f"{failure_message}: {e.message}", extra={"chain": params.chain_key})
        return JSONResponse(
            status_code=e.status_code,
            content=as_payload(assemble_error(e.message or failure_message))
        )

    except Exception as e:
        logger.error(f"{failure_message}: {str(e)}", extra={"chain": params.chain_key}, exc_info=True)
        return JSONResponse(
            status_code=500,
            content=as_payload(assemble_error(str(e) or failure_message))
        )


# ===== Liveness / Health =====

@app.get("/", response_class=PlainTextResponse)
async def root():
    """Liveness check"""
    return LIVENESS_MESSAGE


@app.get("/api/health")
async def health_check(services: ServiceManager = Depends(get_service_manager)):
    """Health check endpoint"""
    collaborators = services.collaborators
    return {
        "status": "healthy" if services.registry is not None else "starting",
        "version": settings.APP_VERSION,
        "chains": services.registry.keys() if services.registry else [],
        "cache": collaborators.cache.backend_name if collaborators else "disabled"
    }


# ===== Analysis Endpoints =====

@app.get("/analyze")
async def analyze(
    chain: Optional[str] = None,
    token: Optional[str] = None,
    fast: Optional[str] = None,
    window: Optional[str] = None,
    span: Optional[str] = None,
    delay: Optional[str] = None,
    services: ServiceManager = Depends(get_service_manager)
):
    """Token identity facts plus holder concentration and verification"""
    params = normalize_request_params(
        chain=chain, token=token, fast=fast, window=window, span=span, delay=delay
    )
    return await run_endpoint(services.analyze.run, params, "Analyze failed")


@app.get("/graph")
async def graph(
    chain: Optional[str] = None,
    token: Optional[str] = None,
    center: Optional[str] = None,
    window: Optional[str] = None,
    span: Optional[str] = None,
    delay: Optional[str] = None,
    services: ServiceManager = Depends(get_service_manager)
):
    """Token transfer graph around a center address"""
    params = normalize_request_params(
        chain=chain, token=token, center=center, window=window, span=span, delay=delay
    )
    return await run_endpoint(services.graph.run, params, "Graph failed")


@app.get("/jeeter")
async def jeeter(
    chain: Optional[str] = None,
    token: Optional[str] = None,
    window: Optional[str] = None,
    span: Optional[str] = None,
    delay: Optional[str] = None,
    services: ServiceManager = Depends(get_service_manager)
):
    """Early-seller report (EVM only)"""
    params = normalize_request_params(
        chain=chain, token=token, window=window, span=span, delay=delay
    )
    return await run_endpoint(services.jeeter.run, params, "Jeeter failed")
