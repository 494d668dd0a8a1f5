"""CLI commands for Deep Search."""

import asyncio
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markdown import Markdown

from ..config import settings
from ..models.params import Credentials
from ..models.report import ToolResponse
from ..models.search_result import SearchKind
from ..service import DeepSearchService
from ..utils.logging import setup_logging

app = typer.Typer(
    name="deep-search",
    help="Search the web and consolidate the content of the top result pages",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)

NumResults = Annotated[
    int,
    typer.Option("--num", "-n", min=1, max=10, help="Number of results (1-10)"),
]
ApiKey = Annotated[
    Optional[str],
    typer.Option("--api-key", help="Google API key (defaults to GOOGLE_API_KEY)"),
]
EngineId = Annotated[
    Optional[str],
    typer.Option("--cx", help="Search engine ID (defaults to GOOGLE_CX)"),
]
Raw = Annotated[
    bool,
    typer.Option("--raw", help="Print plain markdown instead of rendering it"),
]
Verbose = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Enable verbose logging"),
]


def _credentials(api_key: str | None, cx: str | None) -> Credentials | None:
    if api_key is None and cx is None:
        return None
    return Credentials(api_key=api_key, cx=cx)


def _emit(response: ToolResponse, raw: bool) -> None:
    """Print a response and exit non-zero when it carries an error."""
    if response.is_error:
        err_console.print(f"[red]{response.text}[/red]")
        raise typer.Exit(code=1)

    if raw:
        console.print(response.text, markup=False, highlight=False)
    else:
        console.print(Markdown(response.text))


@app.command()
def search(
    query: Annotated[str, typer.Argument(help="Search query")],
    num_results: NumResults = 10,
    api_key: ApiKey = None,
    cx: EngineId = None,
    raw: Raw = False,
    verbose: Verbose = False,
) -> None:
    """Quick search returning result snippets only."""
    setup_logging("DEBUG" if verbose else settings.log_level, json_output=settings.log_json)

    response = asyncio.run(
        DeepSearchService().simple_search(
            query, num_results=num_results, credentials=_credentials(api_key, cx)
        )
    )
    _emit(response, raw)


@app.command()
def deep(
    query: Annotated[str, typer.Argument(help="Search query")],
    num_results: NumResults = 10,
    max_content: Annotated[
        Optional[int],
        typer.Option("--max-content", "-m", help="Characters per page (5000-100000)"),
    ] = None,
    search_type: Annotated[
        SearchKind,
        typer.Option("--type", "-t", help="Search type"),
    ] = SearchKind.WEB,
    include: Annotated[
        Optional[str],
        typer.Option("--include", help="Comma-separated domains to include"),
    ] = None,
    exclude: Annotated[
        Optional[str],
        typer.Option("--exclude", help="Comma-separated domains to exclude"),
    ] = None,
    api_key: ApiKey = None,
    cx: EngineId = None,
    raw: Raw = False,
    verbose: Verbose = False,
) -> None:
    """Search and print the full content of the top result pages."""
    setup_logging("DEBUG" if verbose else settings.log_level, json_output=settings.log_json)

    with console.status(f"[cyan]Deep searching: {query}"):
        response = asyncio.run(
            DeepSearchService().deep_search(
                query,
                num_results=num_results,
                max_content_per_page=max_content,
                search_type=search_type,
                include_domains=include,
                exclude_domains=exclude,
                credentials=_credentials(api_key, cx),
            )
        )
    _emit(response, raw)


@app.command()
def news(
    query: Annotated[str, typer.Argument(help="News topic")],
    num_results: NumResults = 10,
    max_content: Annotated[
        Optional[int],
        typer.Option("--max-content", "-m", help="Characters per article (5000-100000)"),
    ] = None,
    api_key: ApiKey = None,
    cx: EngineId = None,
    raw: Raw = False,
    verbose: Verbose = False,
) -> None:
    """Search recent news and print the full article content."""
    setup_logging("DEBUG" if verbose else settings.log_level, json_output=settings.log_json)

    with console.status(f"[cyan]Searching news: {query}"):
        response = asyncio.run(
            DeepSearchService().deep_search_news(
                query,
                num_results=num_results,
                max_content_per_page=max_content,
                credentials=_credentials(api_key, cx),
            )
        )
    _emit(response, raw)


@app.command()
def serve(
    host: Annotated[
        Optional[str],
        typer.Option("--host", "-h", help="API host"),
    ] = None,
    port: Annotated[
        Optional[int],
        typer.Option("--port", "-p", help="API port"),
    ] = None,
    reload: Annotated[
        bool,
        typer.Option("--reload", "-r", help="Enable auto-reload"),
    ] = False,
) -> None:
    """Start the FastAPI server."""
    import uvicorn

    host = host or settings.api_host
    port = port or settings.api_port

    console.print("\n[bold blue]Starting Deep Search API[/bold blue]")
    console.print(f"Host: {host}")
    console.print(f"Port: {port}")
    console.print(f"Docs: http://{host}:{port}/docs")
    console.print()

    uvicorn.run(
        "deep_search.api.app:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=True,
    )


@app.command()
def version() -> None:
    """Show version information."""
    from .. import __version__

    console.print(f"Deep Search v{__version__}")


def main() -> None:
    """Main entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
