from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from marketplace.platform.exception.exceptions import CustomBaseError
from marketplace.platform.logging.loguru_io import Logger


def _format_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return 'Invalid request'
    first = errors[0]
    location = '.'.join(str(part) for part in first.get('loc', ()) if part != 'body')
    message = first.get('msg', 'Invalid value')
    return f'{location}: {message}' if location else message


async def custom_error_handler(request: Request, exc: CustomBaseError) -> JSONResponse:
    if exc.status_code >= 500:
        Logger.base.exception(f'{type(exc).__name__}: {exc.message}')
    else:
        Logger.base.error(f'{type(exc).__name__}: {exc.message}')
    return JSONResponse(status_code=exc.status_code, content={'message': exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    Logger.base.error(f'Validation error: {exc.errors()}')
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={'message': _format_validation_error(exc)},
    )


async def general_500_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    Logger.base.exception(f'Unhandled exception: {str(exc)}')
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={'message': 'Internal server error'},
    )


# Exception handler mapping
EXCEPTION_HANDLERS = {
    CustomBaseError: custom_error_handler,
    RequestValidationError: validation_error_handler,
    Exception: general_500_exception_handler,  # Catch-all for unhandled exceptions
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)  # type: ignore[arg-type]
