"""CLI entrypoint using typer."""

from __future__ import annotations

import asyncio

import structlog
import typer
import uvicorn
from rich.console import Console

from resume_ai_api import __version__
from resume_ai_core.config.settings import Settings
from resume_ai_infra.db.engine import create_engine
from resume_ai_infra.db.session import init_db
from resume_ai_services.observability import configure_logging
from resume_ai_services.payments.signature import compute_signature

app = typer.Typer(
    name="resume-ai",
    help="AI enhancement, analysis, and paid unlock service for resumes",
)
console = Console()
logger = structlog.get_logger()


@app.command()
def serve(
    host: str | None = typer.Option(None, "--host", help="Bind address (default from settings)"),
    port: int | None = typer.Option(None, "--port", help="Port (default from settings)"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Run the HTTP API."""
    from resume_ai_api.app import create_app

    settings = Settings()  # type: ignore[call-arg]
    if verbose:
        settings.log_level = "DEBUG"

    configure_logging(settings)
    bind_host = host or settings.api_host
    bind_port = port or settings.api_port
    console.print(f"[bold green]Serving on[/bold green] http://{bind_host}:{bind_port}")

    uvicorn.run(create_app(settings), host=bind_host, port=bind_port, log_config=None)


@app.command("init-db")
def init_database() -> None:
    """Create database tables."""
    settings = Settings()  # type: ignore[call-arg]
    configure_logging(settings)
    asyncio.run(_init_database(settings))
    console.print(f"[bold green]Tables created:[/bold green] {settings.db_backend}")


@app.command("sign-payment")
def sign_payment(
    order_id: str = typer.Argument(..., help="Gateway order ID"),
    payment_id: str = typer.Argument(..., help="Gateway payment ID"),
) -> None:
    """Print the signature the gateway would send for a payment."""
    settings = Settings()  # type: ignore[call-arg]
    signature = compute_signature(
        settings.razorpay_key_secret.get_secret_value(), order_id, payment_id
    )
    console.print(signature)


@app.command()
def version() -> None:
    """Show version."""
    console.print(f"resume-ai-gateway v{__version__}")


async def _init_database(settings: Settings) -> None:
    """Create all tables and dispose of the engine."""
    engine = create_engine(settings)
    try:
        await init_db(engine)
    finally:
        await engine.dispose()
    logger.info("db_initialized", db_backend=settings.db_backend)


if __name__ == "__main__":
    app()
