import asyncio

import typer
import uvicorn

from zipslack.app.config import settings

app = typer.Typer(help="zipslack - workspaces, channels and messages over REST")


@app.command()
def start(
    reload: bool = typer.Option(False, "--reload", help="Restart on code changes."),
) -> None:
    """Start the zipslack server."""
    typer.echo(f"Starting zipslack on {settings.host}:{settings.port}...")
    uvicorn.run(
        "zipslack.app.main:app",
        host=settings.host,
        port=settings.port,
        reload=reload,
    )


@app.command("init-db")
def init_db() -> None:
    """Create the database schema (and default data) without starting the server."""
    from zipslack.app.db import init_db as _init_db

    asyncio.run(_init_db())
    typer.echo(f"Database ready at {settings.db_path}")


if __name__ == "__main__":
    app()
