"""
FastAPI application factory.

Serves the remote invoice API consumed by the dual-path store, plus the PDF
rendering endpoints.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from invoicekit import __version__
from invoicekit.api.middleware import ErrorHandlerMiddleware, LoggingMiddleware
from invoicekit.api.middleware.error_handler import setup_exception_handlers
from invoicekit.api.routes import health_router, invoices_router, pdf_router
from invoicekit.application.use_cases import RenderInvoicePdfUseCase
from invoicekit.config import Settings, get_logger, get_settings
from invoicekit.infrastructure.pdf import TemplateInvoiceRenderer
from invoicekit.infrastructure.storage.json_file import JsonInvoiceFileStore

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Log startup and shutdown with the effective storage locations."""
    settings: Settings = app.state.settings

    logger.info(
        "application_starting",
        app=settings.app_name,
        version=settings.app_version,
        environment=settings.environment,
        host=settings.api.host,
        port=settings.api.port,
        invoices_path=str(settings.storage.invoices_path),
        templates=[str(p) for p in settings.template_candidates],
    )

    yield

    logger.info("application_stopped")


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        settings: Settings override; the global settings when omitted

    Returns:
        Configured FastAPI instance
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="invoicekit API",
        description="Invoice storage and template PDF rendering",
        version=__version__,
        docs_url="/docs" if settings.api.debug else None,
        redoc_url="/redoc" if settings.api.debug else None,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.file_store = JsonInvoiceFileStore(
        invoices_path=settings.storage.invoices_path,
        date_path=settings.storage.date_path,
    )
    app.state.render_use_case = RenderInvoicePdfUseCase(
        renderer=TemplateInvoiceRenderer(),
        template_candidates=settings.template_candidates,
    )

    # Add middleware
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(ErrorHandlerMiddleware)

    # CORS
    if settings.api.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.api.cors_origins,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    setup_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(invoices_router)
    app.include_router(pdf_router)

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "invoicekit.api.main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.debug,
    )
