from pydantic import BaseModel


# ─── Error Detail (per field) ──────────────────────────────────────────────────
class ErrorDetail(BaseModel):
    field: str
    message: str


# ─── Error Body ───────────────────────────────────────────────────────────────
class ErrorBody(BaseModel):
    code: str
    details: list[ErrorDetail] | None = None
    field: str | None = None


# ─── Error Response ───────────────────────────────────────────────────────────
class ErrorResponse(BaseModel):
    success: bool = False
    message: str
    error: ErrorBody


# ─── Health ───────────────────────────────────────────────────────────────────
class HealthResponse(BaseModel):
    status: str = "ok"


# Documented on every route that reads from storage
STORAGE_ERROR_RESPONSES = {
    503: {"model": ErrorResponse, "description": "Storage unavailable"},
    500: {"model": ErrorResponse, "description": "Unexpected server error"},
}
