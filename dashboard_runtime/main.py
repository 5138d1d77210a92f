from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, Dict

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles

from dashboard_runtime.config import Settings, settings
from dashboard_runtime.logging_config import configure_logging
from dashboard_runtime.metrics import MetricsCollector
from dashboard_runtime.service import DashboardService
from tickets.store import LoadError, TicketStore

logger = logging.getLogger(__name__)


def get_service(request: Request) -> DashboardService:
    return request.app.state.service


def method_not_allowed(allow: str):
    def handler() -> JSONResponse:
        return JSONResponse(
            status_code=405,
            content={"detail": "Method Not Allowed"},
            headers={"Allow": allow},
        )

    return handler


def create_app(config: Settings | None = None, metrics: MetricsCollector | None = None) -> FastAPI:
    config = config or settings
    configure_logging(config.log_level)
    service = DashboardService(
        store=TicketStore(config.tickets_csv_path),
        metrics=metrics or MetricsCollector(),
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # nothing to serve without a dataset, so a failed first load stops startup
        service.reload()
        logger.info("Ticket dashboard ready", extra={"source": config.tickets_csv_path, "port": config.port})
        yield

    app = FastAPI(title="Ticket Dashboard", lifespan=lifespan)
    app.state.service = service
    app.state.settings = config

    @app.get("/health")
    def health(svc: DashboardService = Depends(get_service)) -> Dict[str, Any]:
        snap = svc.snapshot()
        return {
            "status": "ok",
            "total_tickets": len(snap),
            "loaded_at": snap.loaded_at.isoformat() if snap.loaded_at else None,
        }

    @app.get("/api/summary")
    def summary(svc: DashboardService = Depends(get_service)) -> Dict[str, Any]:
        svc.metrics.inc("dashboard_summary_requests_total", "summary")
        return svc.get_current_summary().model_dump()

    @app.post("/api/reload")
    def reload(svc: DashboardService = Depends(get_service)):
        svc.metrics.inc("dashboard_summary_requests_total", "reload")
        try:
            result = svc.reload()
        except LoadError as exc:
            return JSONResponse(
                status_code=500,
                content={"detail": f"Failed to reload CSV: {exc}", "code": exc.code},
            )
        return result.model_dump()

    @app.get(config.metrics_path, response_class=PlainTextResponse)
    def metrics_export(svc: DashboardService = Depends(get_service)) -> str:
        if not config.metrics_enabled:
            return ""
        return svc.metrics.render_prometheus()

    # must be registered before the static mount so wrong methods get 405, not 404
    other_methods = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
    for path, allow in (("/api/summary", "GET"), ("/api/reload", "POST")):
        app.add_api_route(
            path,
            method_not_allowed(allow),
            methods=[m for m in other_methods if m != allow],
            include_in_schema=False,
        )

    if Path(config.static_dir).is_dir():
        app.mount("/", StaticFiles(directory=config.static_dir, html=True), name="static")

    return app


app = create_app()


def run() -> None:
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
