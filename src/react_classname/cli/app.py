import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from react_classname.cli.options import console
from react_classname.cli.transform import transform
from react_classname.cli.watch import watch

app = typer.Typer(
    name="react-classname",
    help="React className injector: let components accept and apply a className prop.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def configure(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log every component decision.")] = False,
) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


app.command("transform")(transform)
app.command("watch")(watch)


def main() -> None:
    app()
