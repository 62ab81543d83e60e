from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from core.logger import logger
from domain.exceptions import (
    AlreadyExistsError,
    DomainError,
    InvalidAttributeError,
    InvalidPasswordError,
    InvalidQueryValueError,
    NotFoundError,
    StorageFailure,
    SupervisorCycleError,
)

# Порядок важен: первый подходящий класс определяет статус
STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (AlreadyExistsError, status.HTTP_409_CONFLICT),
    (SupervisorCycleError, status.HTTP_409_CONFLICT),
    (InvalidAttributeError, status.HTTP_400_BAD_REQUEST),
    (InvalidQueryValueError, status.HTTP_400_BAD_REQUEST),
    (InvalidPasswordError, status.HTTP_400_BAD_REQUEST),
    (StorageFailure, status.HTTP_500_INTERNAL_SERVER_ERROR),
]


def status_for(exc: DomainError) -> int:
    for error_type, code in STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    code = status_for(exc)
    if code >= 500:
        logger.error(
            f'[API] {request.method} {request.url.path}: {type(exc).__name__}: {exc} '
            f'(cause: {exc.__cause__!r})'
        )
        detail = 'Внутренняя ошибка хранилища'
    else:
        logger.warning(f'[API] {request.method} {request.url.path}: {type(exc).__name__}: {exc}')
        detail = str(exc)
    return JSONResponse(status_code=code, content={'detail': detail})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
