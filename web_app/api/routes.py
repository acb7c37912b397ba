"""API routes implementation."""

from datetime import datetime, timezone
from typing import List, Optional

from fastapi import APIRouter, Query, Request, status
from fastapi.responses import RedirectResponse

from shortlinks.common.headers import build_base_url
from shortlinks.common.url_builder import build_short_url
from shortlinks.errors import BadRequestError, NotFoundError

from .schemas import (
    AddRedirectRequest,
    AddRedirectResponse,
    DeleteRedirectRequest,
    ErrorResponse,
    HealthResponse,
    MessageResponse,
    RedirectRecordResponse,
)

router = APIRouter()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check if the service can reach its store.",
)
async def health_check(request: Request):
    """Health check endpoint for load balancers and monitoring."""
    manager = request.app.state.manager

    store_healthy = await manager.health_check()

    return HealthResponse(
        status="healthy" if store_healthy else "unhealthy",
        store="healthy" if store_healthy else "unhealthy",
        authentication_required=manager.authentication_required,
        timestamp=datetime.now(timezone.utc),
    )


@router.post(
    "/add",
    response_model=AddRedirectResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid id or URL, or missing password"},
        401: {"model": ErrorResponse, "description": "Password incorrect"},
        409: {"model": ErrorResponse, "description": "Short id already in use"},
        500: {"model": ErrorResponse, "description": "Store failure"},
    },
    summary="Create redirect",
    description="Create a redirect. Optionally provide the short id; the response carries the edit key.",
)
async def add_redirect(request: Request, body: AddRedirectRequest):
    """Create a redirect."""
    manager = request.app.state.manager
    config = request.app.state.config

    record = await manager.create_record(
        url=body.url,
        requested_id=body.id,
        provided_password=body.password,
    )

    base_url = build_base_url(
        headers=request.headers,
        fallback_base_url=config.server_hostname,
        request_scheme=request.url.scheme,
        request_host=request.headers.get("host"),
    )

    return AddRedirectResponse(
        id=record.id,
        key=record.key,
        short_url=build_short_url(record.id, base_url),
    )


@router.get(
    "/all",
    response_model=List[RedirectRecordResponse],
    responses={
        400: {"model": ErrorResponse, "description": "No password provided"},
        401: {"model": ErrorResponse, "description": "Listing disabled or password incorrect"},
        404: {"model": ErrorResponse, "description": "No redirects stored"},
        500: {"model": ErrorResponse, "description": "Store failure or corrupt entry"},
    },
    summary="List redirects",
    description="List every stored redirect with its edit key. Requires the admin password.",
)
async def list_redirects(request: Request, password: Optional[str] = Query(None)):
    """List all redirects."""
    manager = request.app.state.manager

    records = await manager.list_records(provided_password=password)

    return [RedirectRecordResponse(**record.to_dict()) for record in records]


@router.get(
    "/{record_id}",
    responses={
        302: {"description": "Redirect to the stored URL"},
        404: {"model": ErrorResponse, "description": "Short id not found"},
    },
    summary="Follow redirect",
)
async def follow_redirect(request: Request, record_id: str):
    """Redirect to the stored URL."""
    manager = request.app.state.manager

    url = await manager.resolve(record_id)
    if url is None:
        raise NotFoundError("Short URL not found")

    return RedirectResponse(url=url, status_code=status.HTTP_302_FOUND)


@router.delete(
    "/{record_id}",
    response_model=MessageResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Id mismatch or missing password"},
        401: {"model": ErrorResponse, "description": "Edit key or password incorrect"},
        404: {"model": ErrorResponse, "description": "Short id or its edit key not found"},
    },
    summary="Delete redirect",
)
async def delete_redirect(request: Request, record_id: str, body: DeleteRedirectRequest):
    """Delete a redirect using its edit key."""
    manager = request.app.state.manager

    if body.id is not None and body.id != record_id:
        raise BadRequestError("Short URL id in body does not match the path")

    await manager.delete_record(
        record_id=record_id,
        provided_key=body.key,
        provided_password=body.password,
    )

    return MessageResponse(message="Short URL removed")
