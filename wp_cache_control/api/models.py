# wp_cache_control/api/models.py - Pydantic models for request/response validation
from pydantic import BaseModel, Field, validator

OPERATION_PATTERN = "^(clear_one|clear_all|clear_object)$"


class ClearUrlRequest(BaseModel):
    """Clear-one endpoint request model"""

    url: str = Field(..., min_length=1, max_length=2048, description="URL of the cached page")

    @validator("url")
    def strip_url(cls, v):  # noqa: N805
        return v.strip()

    class Config:
        json_schema_extra = {"example": {"url": "https://example.com/sample-page/"}}


class OperationRequestModel(BaseModel):
    """Generic operation request model"""

    operation: str = Field(..., pattern=OPERATION_PATTERN, description="Operation to perform")
    url: str | None = Field(None, max_length=2048, description="URL, required for clear_one")

    @validator("url")
    def strip_url(cls, v):  # noqa: N805
        return v.strip() if v is not None else v

    class Config:
        json_schema_extra = {
            "example": {"operation": "clear_one", "url": "https://example.com/sample-page/"}
        }


class InvalidationResponse(BaseModel):
    """Invalidation response model"""

    status: str = Field(..., description="Result kind")
    message: str = Field(..., description="Human-readable outcome")
    path: str | None = Field(None, description="Cache file or cache root concerned")
    files_removed: int | None = None
    directories_removed: int | None = None
    failed_paths: list[str] | None = None


class OperationTokenResponse(BaseModel):
    """Operation token response model"""

    operation: str
    token: str
    expires_at: int
