import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class AppError(Exception):
    """
    라우터/서비스에서 raise 하는 모든 오류의 베이스.
    status_code 와 message 는 그대로 클라이언트에 전달됩니다.
    """
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Server error"
    headers: dict | None = None

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid request."


class AuthenticationError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Authentication required."


class MissingCredentialError(AuthenticationError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Authentication token is missing."
    headers = {"WWW-Authenticate": "Bearer"}


class InvalidCredentialError(AuthenticationError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "Authentication token is invalid or expired."


class InvalidCredentialsError(AuthenticationError):
    # 로그인 실패: 이메일/비밀번호 중 무엇이 틀렸는지 구분하지 않음
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid email or password."


class ConflictError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Email already exists."


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "User not found."


class InternalError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Server error"


def _error_response(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message}, headers=headers)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if isinstance(exc, InternalError):
        logger.error("Internal error on %s %s: %s", request.method, request.url.path, exc)
        return _error_response(exc.status_code, InternalError.message)
    return _error_response(exc.status_code, exc.message, exc.headers)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        message = f"{field}: {first.get('msg')}" if field else str(first.get("msg"))
    else:
        message = ValidationError.message
    return _error_response(status.HTTP_400_BAD_REQUEST, message)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, InternalError.message)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
