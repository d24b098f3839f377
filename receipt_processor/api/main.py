"""FastAPI application factory"""

from fastapi import Depends, FastAPI
from fastapi.responses import PlainTextResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from receipt_processor.api.dependencies import get_store
from receipt_processor.api.middleware import RequestIDMiddleware, MetricsMiddleware
from receipt_processor.api.routes import receipts
from receipt_processor.infrastructure.storage.store import ReceiptStore
from receipt_processor.infrastructure.observability.logging import setup_logging
from receipt_processor.config import settings

BANNER = "Receipt Processor API is running. Use /receipts/process to submit a receipt."

# Setup structured logging
setup_logging(settings.log_level)


def create_app(store: ReceiptStore | None = None) -> FastAPI:
    """Create and configure FastAPI application with its own receipt store"""
    app = FastAPI(
        title="Receipt Processor",
        description="Scores purchase receipts and serves their points",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.store = store if store is not None else ReceiptStore()

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/", response_class=PlainTextResponse)
    def home():
        return BANNER

    # Health check endpoint
    @app.get("/health")
    def health_check(receipt_store: ReceiptStore = Depends(get_store)):
        return {"status": "ok", "service": settings.service_name, "receipts": len(receipt_store)}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(receipts.router, tags=["receipts"])

    return app


app = create_app()
