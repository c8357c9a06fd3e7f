import logging

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError
from starlette.responses import JSONResponse

from wellness.helpers.validation import validation_error_code
from wellness.schemas.sche_base import ErrorResponse

logger = logging.getLogger(__name__)


class CustomException(Exception):
    http_code: int
    code: str
    message: str

    def __init__(self, http_code: int = None, code: str = None, message: str = None):
        self.http_code = http_code if http_code else 500
        self.code = code if code else str(self.http_code)
        self.message = message if message else ''
        super().__init__(self.message)


class NotFoundException(CustomException):
    def __init__(self, message: str, code: str = 'NOT_FOUND'):
        super().__init__(http_code=404, code=code, message=message)


class BadRequestException(CustomException):
    def __init__(self, message: str, code: str):
        super().__init__(http_code=400, code=code, message=message)


async def http_exception_handler(request: Request, exc: CustomException):
    return JSONResponse(
        status_code=exc.http_code,
        content=jsonable_encoder(ErrorResponse(error=exc.message, code=exc.code))
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    first = errors[0] if errors else {'type': 'value_error', 'loc': ('body',), 'msg': 'Invalid request'}
    code = validation_error_code(first)
    logger.info(f"Rejected {request.method} {request.url.path}: {code}")
    return JSONResponse(
        status_code=400,
        content=jsonable_encoder(ErrorResponse(error=first.get('msg', 'Invalid request'), code=code))
    )


async def sqlalchemy_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Storage failure on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={'error': f'Internal server error: {exc}'}
    )
