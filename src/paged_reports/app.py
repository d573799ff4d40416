from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from paged_reports.core.services import config
from paged_reports.routers import pdf

logger = logging.getLogger(__name__)


def configure_logging(level: str = config.LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


async def _internal_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Internal Server Error"})


def create_app() -> FastAPI:
    app = FastAPI(title="Paged Reports")

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    app.include_router(pdf.router)
    app.add_exception_handler(Exception, _internal_error)
    return app


app = create_app()


def main() -> None:
    import uvicorn

    configure_logging()
    logger.info("Server running on port %d", config.PORT)
    uvicorn.run(app, host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
