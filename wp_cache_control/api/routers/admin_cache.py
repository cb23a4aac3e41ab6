"""Admin Cache router - handles /admin/cache/* endpoints"""
from fastapi import APIRouter, Depends, Header, HTTPException, Query
from fastapi.responses import JSONResponse

from ...core.auth import (
    OPERATION_TOKEN_HEADER,
    OPERATIONS,
    get_api_key,
    issue_operation_token,
    require_operation_token,
    verify_operation_token,
)
from ...core.config import CacheControlSettings
from ...core.exceptions import AuthorizationError
from ...domain.models.invalidation_result import InvalidationResult, InvalidationStatus
from ...services.cache_control_service import CacheControlService, OperationRequest
from ..dependencies import get_cache_control_service, get_settings
from ..models import (
    ClearUrlRequest,
    InvalidationResponse,
    OperationRequestModel,
    OperationTokenResponse,
)

# Every route here requires the administrator API key
router = APIRouter(dependencies=[Depends(get_api_key)])

STATUS_CODE_MAP = {
    InvalidationStatus.SUCCESS: 200,
    InvalidationStatus.NOT_FOUND: 404,
    InvalidationStatus.INVALID_INPUT: 422,
    InvalidationStatus.DISABLED: 503,
    InvalidationStatus.PARTIAL_FAILURE: 500,
    InvalidationStatus.IO_FAILURE: 500,
    InvalidationStatus.FAILURE: 500,
}


def to_response(result: InvalidationResult) -> JSONResponse:
    """Render an invalidation result with its HTTP status code"""
    return JSONResponse(result.to_dict(), status_code=STATUS_CODE_MAP.get(result.status, 500))


@router.get("/token", response_model=OperationTokenResponse)
def get_operation_token(
    operation: str = Query(..., description="clear_one, clear_all or clear_object"),
    settings: CacheControlSettings = Depends(get_settings),
):
    """Issue an anti-forgery token for one operation"""
    if operation not in OPERATIONS:
        raise HTTPException(422, f"Unknown operation: {operation}")

    token, expires_at = issue_operation_token(operation, settings.token_ttl)
    return OperationTokenResponse(operation=operation, token=token, expires_at=expires_at)


@router.post(
    "/clear",
    response_model=InvalidationResponse,
    dependencies=[Depends(require_operation_token("clear_one"))],
)
def clear_url(
    request: ClearUrlRequest,
    service: CacheControlService = Depends(get_cache_control_service),
):
    """Clear the cache entry of one URL"""
    return to_response(service.on_request_clear_one(request.url))


@router.post(
    "/clear-all",
    response_model=InvalidationResponse,
    dependencies=[Depends(require_operation_token("clear_all"))],
)
def clear_all(service: CacheControlService = Depends(get_cache_control_service)):
    """Clear the entire page cache"""
    return to_response(service.on_request_clear_all())


@router.post(
    "/object/clear",
    response_model=InvalidationResponse,
    dependencies=[Depends(require_operation_token("clear_object"))],
)
def clear_object_cache(service: CacheControlService = Depends(get_cache_control_service)):
    """Flush the object cache"""
    return to_response(service.on_request_clear_object_cache())


@router.post("/operations", response_model=InvalidationResponse)
def run_operation(
    request: OperationRequestModel,
    token: str | None = Header(None, alias=OPERATION_TOKEN_HEADER),
    service: CacheControlService = Depends(get_cache_control_service),
):
    """Run any operation; the token must match the requested operation"""
    if not verify_operation_token(request.operation, token):
        raise AuthorizationError("Security check failed", {"operation": request.operation})

    result = service.handle(OperationRequest(operation=request.operation, url=request.url))
    return to_response(result)
