"""FastAPI application entry point."""

import argparse
import logging
import sys
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any

import uvicorn
from fastapi import FastAPI

from deploy_notifier.config import get_settings
from deploy_notifier.projects import ProjectRegistry
from deploy_notifier.webhook import router as webhook_router

logger = logging.getLogger(__name__)

SERVICE_NAME = "gh-deployment-notifier"


def setup_logging(level: str) -> None:
    """Configure structured logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    settings = get_settings()
    setup_logging(settings.log_level)
    app.state.projects = ProjectRegistry.from_settings(settings)
    if not settings.signature_required:
        logger.warning(
            "GITHUB_WEBHOOK_SECRET is not set - webhook signatures will not be verified. "
            "Do not run like this in production."
        )
    logger.info(f"Deployment notifier starting up with {len(app.state.projects)} project entries")
    yield
    logger.info("Deployment notifier shutting down")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="GitHub Deployment Notifier",
        description="Forwards GitHub deployment statuses to Slack",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.include_router(webhook_router, tags=["webhook"])

    @app.get("/")
    async def health_check() -> dict[str, Any]:
        """Health check endpoint."""
        return {
            "status": "healthy",
            "service": SERVICE_NAME,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    return app


app = create_app()


def cli() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="GitHub Deployment Notifier - deployment statuses to Slack"
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Start the webhook server")
    serve_parser.add_argument("--host", default=None, help="Host to bind to")
    serve_parser.add_argument("--port", type=int, default=None, help="Port to bind to")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")

    args = parser.parse_args()

    if args.command == "serve":
        settings = get_settings()
        setup_logging(settings.log_level)
        uvicorn.run(
            "deploy_notifier.main:app",
            host=args.host or settings.host,
            port=args.port or settings.port,
            reload=args.reload,
        )
    else:
        parser.print_help()


if __name__ == "__main__":
    cli()
