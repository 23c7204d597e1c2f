from datetime import datetime
from typing import Any, Dict, Generic, Optional, TypeVar
from pydantic import BaseModel, Field

DataType = TypeVar("DataType")

class APIResponse(BaseModel, Generic[DataType]):
    """Success envelope: `{"message": ..., "data": ...}`."""
    message: str
    data: Optional[DataType] = None

class ErrorDetail(BaseModel):
    code: str = Field(..., description="Stable code such as NOT_FOUND or VALIDATION_ERROR")
    message: str
    details: Optional[Dict[str, Any]] = None

class ErrorResponse(BaseModel):
    """Error envelope shared by every exception handler."""
    error: ErrorDetail
    timestamp: str
    path: str
    request_id: Optional[str] = None

    @classmethod
    def build(
        cls,
        *,
        code: str,
        message: str,
        path: str,
        request_id: Optional[str],
        details: Optional[Dict[str, Any]] = None,
    ) -> "ErrorResponse":
        return cls(
            error=ErrorDetail(code=code, message=message, details=details),
            timestamp=datetime.utcnow().isoformat(),
            path=path,
            request_id=request_id,
        )
