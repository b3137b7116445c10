"""
FXRISK Main Application Entry Point
"""

import logging
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fxrisk import __version__
from fxrisk.api import router
from fxrisk.config import get_settings
from fxrisk.service import CurrencyService

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management."""
    service: CurrencyService = app.state.currency_service

    logger.info(f"🚀 Starting FXRISK v.{__version__}")
    if service.fetcher.mock_mode:
        logger.warning("⚠️ No rate provider configured - serving synthetic mock rates")
    else:
        names = [p.PROVIDER_NAME for p in service.manager.providers if p.is_configured]
        logger.info(f"✅ Rate providers: {', '.join(names)}")

    yield

    logger.info("🛑 Shutting down FXRISK")
    service.refresh_rates()
    logger.info("✅ Shutdown complete")


def create_app(service: CurrencyService | None = None) -> FastAPI:
    """Create FastAPI application."""
    app = FastAPI(
        title="FXRISK",
        description="Multi-currency conversion and currency risk analysis",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/api/v1/openapi.json"
    )
    app.state.currency_service = service or CurrencyService(get_settings())

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)

    @app.get("/")
    async def root():
        """Root endpoint with API information."""
        return {
            "name": "FXRISK",
            "version": __version__,
            "description": "Multi-currency conversion and currency risk analysis",
            "docs": "/docs",
            "api": {
                "currencies": "/api/v1/currencies",
                "convert": "/api/v1/convert?amount=100&from=EUR&to=USD",
                "rates": "/api/v1/rates?from=EUR&to=USD",
                "historical": "/api/v1/rates/historical?from=EUR&to=USD&start={date}&end={date}",
                "risk_analysis": "/api/v1/risk-analysis",
                "health": "/api/v1/health"
            }
        }

    return app


# Create application instance
app = create_app()


def main():
    """Main entry point for running the server."""
    settings = get_settings()

    logger.info(f"Starting FXRISK server on {settings.api_host}:{settings.api_port}")

    uvicorn.run(
        "fxrisk.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    main()
