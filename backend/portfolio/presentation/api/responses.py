"""Error bodies shared by the API routers.

Errors are returned as ``{"message": ...}`` (the shape the frontend reads),
not FastAPI's default ``{"detail": ...}``.
"""

from fastapi.responses import JSONResponse


def message_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"message": message}, status_code=status_code)
