from pathlib import Path
from typing import Annotated

import typer

from react_classname.cli.options import BindingName, ClassProp, SkipNodeModules, build_options, console
from react_classname.core.files import iter_source_files, transform_path


def transform(
    paths: Annotated[list[Path], typer.Argument(help="Files or directories to transform.", exists=True)],
    write: Annotated[bool, typer.Option("--write", "-w", help="Rewrite changed files in place.")] = False,
    check: Annotated[bool, typer.Option("--check", help="Exit with status 1 if any file would change.")] = False,
    skip_node_modules: SkipNodeModules = False,
    class_prop: ClassProp = "className",
    binding_name: BindingName = "$cn",
    language: Annotated[str | None, typer.Option(help="Language override (tsx, ts, js, jsx).")] = None,
) -> None:
    """Inject className plumbing into React components.

    A single file is printed to stdout unless --write or --check is given.
    """
    options = build_options(skip_node_modules, class_prop, binding_name)
    files = list(iter_source_files(paths))
    if len(files) > 1 and not (write or check):
        console.print("[red]Pass --write or --check when transforming more than one file.[/red]")
        raise typer.Exit(2)

    pending: list[Path] = []
    for file in files:
        try:
            result = transform_path(file, options, language=language, write=write)
        except (OSError, ValueError) as exc:
            console.print(f"[red]Error[/red] {file}: {exc}")
            raise typer.Exit(1) from None

        if result.changed:
            pending.append(file)
            if write:
                console.print(f"[green]Transformed[/green] {file}")
        if not (write or check):
            typer.echo(result.code, nl=False)

    if check and pending:
        for file in pending:
            console.print(f"[yellow]Would transform[/yellow] {file}")
        raise typer.Exit(1)
