# errors.py
"""
Error taxonomy shared by services and the HTTP layer.

Services raise these; register_error_handlers maps them to a JSON body of the form
{"error": <stable code>, "message": <human readable text>}.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ServiceError(Exception):
     """Base class for errors with a stable code and HTTP status."""
     code = "server_error"
     status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

     def __init__(self, message: str):
          super().__init__(message)
          self.message = message


class NotFoundError(ServiceError):
     code = "not_found"
     status_code = status.HTTP_404_NOT_FOUND


class ConflictError(ServiceError):
     code = "conflict"
     status_code = status.HTTP_409_CONFLICT


class UnauthorizedError(ServiceError):
     code = "unauthorized"
     status_code = status.HTTP_401_UNAUTHORIZED


class ForbiddenError(ServiceError):
     code = "forbidden"
     status_code = status.HTTP_403_FORBIDDEN


_HTTP_CODES = {
     400: "bad_request",
     401: "unauthorized",
     403: "forbidden",
     404: "not_found",
     405: "method_not_allowed",
     409: "conflict",
     422: "unprocessable",
}


def error_body(code: str, message: str) -> dict:
     return {"error": code, "message": message}


def register_error_handlers(app: FastAPI) -> None:
     @app.exception_handler(ServiceError)
     async def service_error(request: Request, exc: ServiceError):
          if exc.status_code >= 500:
               logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
               return JSONResponse(
                    status_code=exc.status_code,
                    content=error_body(exc.code, "Internal server error"),
               )
          return JSONResponse(status_code=exc.status_code, content=error_body(exc.code, exc.message))

     @app.exception_handler(StarletteHTTPException)
     async def http_error(request: Request, exc: StarletteHTTPException):
          code = _HTTP_CODES.get(exc.status_code, "server_error")
          message = exc.detail if isinstance(exc.detail, str) else code
          if exc.status_code == status.HTTP_404_NOT_FOUND and message == "Not Found":
               message = "Route not found"
          return JSONResponse(status_code=exc.status_code, content=error_body(code, message))

     @app.exception_handler(RequestValidationError)
     async def validation_error(request: Request, exc: RequestValidationError):
          return JSONResponse(
               status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
               content={**error_body("unprocessable", "Request validation failed"), "details": jsonable_errors(exc)},
          )

     @app.exception_handler(Exception)
     async def unexpected_error(request: Request, exc: Exception):
          logger.exception("Unhandled error on %s %s", request.method, request.url.path)
          return JSONResponse(
               status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
               content=error_body("server_error", "Internal server error"),
          )


def jsonable_errors(exc: RequestValidationError) -> list:
     return [
          {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
          for err in exc.errors()
     ]
