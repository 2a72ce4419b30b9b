from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from excatalog.repositories.errors import DatasetReadError
from excatalog.utils.log import logger


async def http_exception_handler(request: Request, exc: HTTPException):
    return JSONResponse({"detail": exc.detail}, status_code=exc.status_code)


async def dataset_read_error_handler(request: Request, exc: DatasetReadError):
    logger.error(f"Catalog unavailable: {exc}")
    return JSONResponse({"detail": "Exercise catalog unavailable"}, status_code=503)


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception")
    return JSONResponse({"detail": "Gremlins."}, status_code=500)


def register_error_handlers(app: FastAPI) -> None:
    # handlers take narrower exception types than add_exception_handler declares
    app.add_exception_handler(HTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(DatasetReadError, dataset_read_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_exception_handler)
