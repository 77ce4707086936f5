import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from mdx_include.cli.document import complete, links, refs, root
from mdx_include.cli.lint import lint
from mdx_include.cli.serve import serve_app
from mdx_include.cli.watch import watch

app = typer.Typer(
    name="mdx-include",
    help="Check and complete {* path ln[..] hl[..] *} file references in Markdown docs.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def _configure(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


app.command("lint")(lint)
app.command("refs")(refs)
app.command("links")(links)
app.command("complete")(complete)
app.command("root")(root)
app.command("watch")(watch)
app.add_typer(serve_app, name="serve")


def main() -> None:
    app()
