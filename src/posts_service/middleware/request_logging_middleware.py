import logging
import time

from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log one line per handled request.

    Parameters
    ----------
    app: FastAPI
        The FastAPI application instance.
    logger_name: str, optional
        Name of the logger the access lines are written to. Defaults to ``posts_service.access``.

    Attributes
    ----------
    logger: logging.Logger
        Logger receiving the access lines.

    Methods
    -------
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        Process the request and log method, path, status code and elapsed time.

    Note
    ----
        - Responses with a status of 500 or above are logged at WARNING, everything else at INFO.
    """

    def __init__(self, app: FastAPI, logger_name: str = "posts_service.access") -> None:
        super().__init__(app)
        self.logger = logging.getLogger(logger_name)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        """Process the request and log the outcome.

        Parameters
        ----------
        request: Request
            The incoming request.
        call_next: RequestResponseEndpoint
            The next middleware or route handler in the processing chain.

        Returns
        -------
        Response
            The unchanged response from the next handler.
        """
        started = time.perf_counter()
        response: Response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        self.logger.log(
            level,
            "%s %s -> %d (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response
