# /privy_lookup/errors.py
"""
Failure types for the lookup endpoint.

Each failure knows its HTTP status and the JSON body returned to the caller.
They are raised inside the endpoint and rendered by `lookup_failure_handler`,
registered on the app in `privy_lookup.main`.
"""
from typing import Any, Dict, Optional
from fastapi import Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException


class LookupFailure(Exception):
    """Base class for every failure the lookup endpoint reports."""
    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_body(self) -> Dict[str, Any]:
        return {"success": False, "error": self.message}


class MethodNotAllowed(LookupFailure):
    status_code = 405

    def __init__(self):
        super().__init__("Method not allowed")

    def to_body(self) -> Dict[str, Any]:
        return {"error": self.message}


class InvalidInput(LookupFailure):
    status_code = 400

    def to_body(self) -> Dict[str, Any]:
        return {"error": self.message}


class ConfigurationError(LookupFailure):
    status_code = 500

    def __init__(self):
        super().__init__("Server configuration error: Missing Privy credentials")

    def to_body(self) -> Dict[str, Any]:
        return {"error": self.message}


class UserNotFound(LookupFailure):
    status_code = 404

    def __init__(self, email: str):
        super().__init__("User not found")
        self.email = email

    def to_body(self) -> Dict[str, Any]:
        return {"success": False, "error": self.message, "email": self.email}


class UpstreamError(LookupFailure):
    """Non-404 error status from the Privy API. The upstream body is never forwarded."""

    def __init__(self, status_code: int, reason: str):
        super().__init__(f"Privy API error: {reason}", status_code=status_code)
        self.reason = reason


class UnexpectedError(LookupFailure):
    status_code = 500

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or "Internal server error")


async def lookup_failure_handler(request: Request, exc: LookupFailure) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Give routing-level 405s on the lookup endpoint the same body as MethodNotAllowed."""
    if exc.status_code == 405 and request.url.path.rstrip("/").endswith("/lookup-user"):
        failure = MethodNotAllowed()
        return JSONResponse(status_code=failure.status_code, content=failure.to_body(), headers=exc.headers)
    return await http_exception_handler(request, exc)
