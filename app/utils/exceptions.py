from fastapi import HTTPException, status


# ═══════════════════════════════════════════════════════════════════════════════
# ERROR CODES — Machine-readable constants for frontend switch/case
# ═══════════════════════════════════════════════════════════════════════════════
class ErrorCode:
    STORAGE_UNAVAILABLE      = "STORAGE_UNAVAILABLE"
    STORAGE_INIT_FAILED      = "STORAGE_INIT_FAILED"
    INTERNAL_SERVER_ERROR    = "INTERNAL_SERVER_ERROR"


# ═══════════════════════════════════════════════════════════════════════════════
# BASE EXCEPTION
# ═══════════════════════════════════════════════════════════════════════════════
class AppException(HTTPException):
    """
    Base exception for all application-level errors.
    Carries a machine-readable error_code for frontend handling.
    """
    def __init__(
        self,
        status_code: int,
        message: str,
        error_code: str,
        details: list | None = None,
        field: str | None = None,
    ):
        super().__init__(status_code=status_code, detail={
            "message": message,
            "error": {
                "code": error_code,
                "details": details,
                "field": field,
            }
        })


# ═══════════════════════════════════════════════════════════════════════════════
# CONCRETE EXCEPTIONS
# ═══════════════════════════════════════════════════════════════════════════════

class StorageUnavailableException(AppException):
    """The backing store could not be reached while serving a query."""
    def __init__(self, message: str = "Storage is unavailable. Please try again later."):
        super().__init__(
            status.HTTP_503_SERVICE_UNAVAILABLE,
            message,
            ErrorCode.STORAGE_UNAVAILABLE,
        )


class StorageInitializationFailedException(Exception):
    """
    Schema creation or seeding failed at startup.
    Raised before the app serves traffic, so it is not an HTTP error.
    """
    error_code = ErrorCode.STORAGE_INIT_FAILED

    def __init__(self, message: str = "Storage initialization failed"):
        super().__init__(message)
