import typer

from mdx_include.cli.common import console, get_workspace

serve_app = typer.Typer(help="Start servers.")


@serve_app.command("api")
def api(
    host: str = "127.0.0.1",
    port: int = 8000,
) -> None:
    """Start the FastAPI HTTP server."""
    import uvicorn

    from mdx_include.api.app import create_app

    app = create_app(get_workspace())
    console.print(f"[green]Starting API server on {host}:{port}[/green]")
    uvicorn.run(app, host=host, port=port)


@serve_app.command("mcp")
def mcp(
    transport: str = "stdio",
) -> None:
    """Start the MCP server."""
    from mdx_include.mcp.server import create_mcp_server

    server = create_mcp_server(get_workspace())
    console.print(f"[green]Starting MCP server (transport: {transport})[/green]")
    server.run(transport=transport)  # type: ignore[arg-type]
