"""Client-safe error kinds returned by the API.

Every error that reaches a client is one of the classes below and is rendered
as ``{"error": message}``. The underlying cause is logged, never serialized.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse


class FileProxyError(Exception):
    """Base class for errors mapped to an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Something went wrong"

    def __init__(self, message: str = None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class UploadError(FileProxyError):
    message = "Upload failed"


class NoFileFound(FileProxyError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "No file found"


class FileReadError(FileProxyError):
    message = "Failed to read stored file"


class GenerationError(FileProxyError):
    message = "Generation request failed"


async def file_proxy_error_handler(request: Request, exc: FileProxyError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})
