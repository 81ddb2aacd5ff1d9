"""Command line interface for hello-relay."""

from typing import Optional

import typer
import uvicorn
from rich.console import Console
from rich.table import Table

from .config import settings
from .exceptions import WireMockError
from .log import configure_logging
from .models import RequestPattern, ResponseDefinition, StubMapping
from .wiremock import WireMockClient

app = typer.Typer(help="hello-relay - calls an external URL and reports the status code")
console = Console()


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Host to bind to"),
    port: Optional[int] = typer.Option(None, "--port", help="Port to bind to"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Start the relay server.

    SIGINT/SIGTERM stop new connections; in-flight requests get
    SHUTDOWN_TIMEOUT seconds to finish before the process exits.
    """
    from .app import create_app

    run_settings = settings.model_copy(
        update={
            "api_host": host or settings.api_host,
            "api_port": port or settings.api_port,
            "debug": debug or settings.debug,
            "log_level": "DEBUG" if debug else settings.log_level,
        }
    )
    configure_logging(run_settings.log_level, run_settings.debug)

    console.print(
        f"[bold blue]Starting hello-relay on {run_settings.api_host}:{run_settings.api_port}[/bold blue]"
    )
    console.print(f"   External URL: {run_settings.external_url}")

    uvicorn.run(
        create_app(run_settings),
        host=run_settings.api_host,
        port=run_settings.api_port,
        log_level=run_settings.log_level.lower(),
        timeout_graceful_shutdown=run_settings.shutdown_timeout,
    )


@app.command()
def config_check() -> None:
    """Show the effective configuration."""
    table = Table(title="Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="yellow")

    table.add_row("External URL", settings.external_url)
    table.add_row("Listen address", f"{settings.api_host}:{settings.api_port}")
    table.add_row("Request timeout", f"{settings.request_timeout}s")
    table.add_row("Shutdown timeout", f"{settings.shutdown_timeout}s")
    table.add_row("Log level", settings.log_level)
    table.add_row("Debug", str(settings.debug))

    console.print(table)


@app.command()
def stub(
    url_path: str = typer.Argument(..., help="Path to stub, e.g. /status/204"),
    status: int = typer.Argument(..., help="Status code the stub returns"),
    admin_url: str = typer.Option(
        "http://localhost:8081", "--admin-url", envvar="WIREMOCK_URL", help="WireMock base URL"
    ),
    body: Optional[str] = typer.Option(None, "--body", help="Response body"),
    reset: bool = typer.Option(False, "--reset", help="Remove existing stubs first"),
) -> None:
    """Create a WireMock stub for local testing."""
    configure_logging(settings.log_level, settings.debug)

    mapping = StubMapping(
        request=RequestPattern(method="GET", url=url_path),
        response=ResponseDefinition(status=status, body=body),
    )

    try:
        with WireMockClient(admin_url) as client:
            client.wait_until_healthy()
            if reset:
                client.reset()
            client.create_stub(mapping)
    except WireMockError as e:
        console.print(f"[bold red]Error: {e}[/bold red]")
        raise typer.Exit(1)

    console.print(f"[green]Stubbed GET {url_path} -> {status}[/green]")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
