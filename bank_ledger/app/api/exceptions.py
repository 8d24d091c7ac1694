from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..core.errors import (
    AccountNotFoundError,
    OverdraftError,
    StorageError,
    StorageIOError,
    StorageTimeoutError,
    StorageUnavailableError,
)


logger = logging.getLogger(__name__)

_STORAGE_STATUS: list[tuple[type[StorageError], int]] = [
    (StorageTimeoutError, 504),
    (StorageUnavailableError, 503),
    (StorageIOError, 500),
]


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AccountNotFoundError)
    async def account_not_found_handler(
        request: Request, exc: AccountNotFoundError
    ) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(OverdraftError)
    async def overdraft_handler(request: Request, exc: OverdraftError) -> JSONResponse:
        return JSONResponse(status_code=409, content={"detail": str(exc)})

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
        status_code = next(
            (code for kind, code in _STORAGE_STATUS if isinstance(exc, kind)), 500
        )
        logger.error(
            "storage.failure",
            extra={"path": request.url.path, "status_code": status_code},
            exc_info=exc,
        )
        return JSONResponse(status_code=status_code, content={"detail": str(exc)})
