import logging

from fastapi import Request

logger = logging.getLogger(__name__)


async def log_requests(request: Request, call_next):
    # Logged before dispatch so failing handlers still leave a trace.
    logger.info("%s %s", request.method, request.url.path)
    return await call_next(request)
