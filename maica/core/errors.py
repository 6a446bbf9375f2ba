import logging
import uuid

from fastapi import Request
from fastapi.responses import JSONResponse

from maica.core.exceptions import MaicaException

logger = logging.getLogger("maica.errors")


def register_error_handlers(app):
    @app.exception_handler(MaicaException)
    async def application_exception(request: Request, exc: MaicaException):
        if exc.status_code >= 500:
            logger.error("%s code=%s path=%s", exc.message, exc.code, request.url.path)
        else:
            logger.info("%s code=%s path=%s", exc.message, exc.code, request.url.path)
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(Exception)
    async def unhandled_exception(request: Request, exc: Exception):  # noqa: BLE001
        correlation_id = uuid.uuid4().hex
        logger.exception("Unhandled error cid=%s path=%s method=%s", correlation_id, request.url.path, request.method)
        return JSONResponse(status_code=500, content={"detail": "Internal server error", "cid": correlation_id})

    return app
