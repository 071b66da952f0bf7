"""FastAPI application for qris-amount."""
from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException, Request, Security, status
from fastapi.responses import JSONResponse, Response
from fastapi.security import APIKeyHeader

from . import __version__
from .config import DEFAULT_API_KEY, settings
from .logging_conf import configure_logging
from .middleware import RequestLoggingMiddleware, route_path
from .monitoring import metrics_payload, record_service_error
from .schemas import (
    InsertAmountRequest,
    InsertAmountResponse,
    InspectRequest,
    InspectResponse,
    TLVElementSchema,
)
from .services.amount import AmountService
from .services.errors import ServiceError, err_bad_payload

logger = logging.getLogger("qris_amount.api")
_api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    configure_logging()
    if settings.api_key == DEFAULT_API_KEY:
        logger.warning("api key is using the default value", extra={"environment": settings.environment})
    yield


app = FastAPI(title="qris-amount", version=__version__, lifespan=lifespan)
app.add_middleware(RequestLoggingMiddleware)


async def require_api_key(api_key: str | None = Security(_api_key_header)) -> None:
    if api_key != settings.api_key:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid API key")


def _check_payload_size(payload: str) -> None:
    if len(payload) > settings.max_payload_length:
        raise err_bad_payload(f"Payload exceeds {settings.max_payload_length} characters")


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    path = route_path(request)
    logger.warning("service error", extra={"code": exc.code, "path": path, "method": request.method})
    record_service_error(exc.code, path)
    return JSONResponse(status_code=exc.status_code, content={"code": exc.code, "message": exc.message})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled exception", extra={"path": route_path(request), "method": request.method})
    return JSONResponse(status_code=500, content={"code": "ERR_INTERNAL", "message": "Internal server error"})


@app.get("/health", tags=["system"])
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metrics", tags=["system"])
async def metrics() -> Response:
    payload, content_type = metrics_payload()
    return Response(content=payload, media_type=content_type)


@app.post("/v1/qris/amount", response_model=InsertAmountResponse, tags=["qris"], dependencies=[Depends(require_api_key)])
async def insert_amount(payload: InsertAmountRequest) -> InsertAmountResponse:
    _check_payload_size(payload.payload)
    result = AmountService().apply_amount(payload=payload.payload, amount=payload.amount)
    return InsertAmountResponse(
        payload=result.payload,
        crc=result.crc,
        amount=result.amount,
        previous_amount=result.previous_amount,
    )


@app.post("/v1/qris/inspect", response_model=InspectResponse, tags=["qris"], dependencies=[Depends(require_api_key)])
async def inspect_payload(payload: InspectRequest) -> InspectResponse:
    _check_payload_size(payload.payload)
    result = AmountService().inspect(payload=payload.payload)
    return InspectResponse(
        elements=[
            TLVElementSchema(tag=el.tag, length=el.length, value=el.value, start=el.start, end=el.end)
            for el in result.elements
        ],
        had_crc=result.had_crc,
        crc=result.crc,
        crc_valid=result.crc_valid,
    )
