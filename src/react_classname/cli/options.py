from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console

from react_classname.models import TransformOptions

console = Console(stderr=True, soft_wrap=True)

SkipNodeModules = Annotated[
    bool,
    typer.Option(help="Leave files under node_modules untouched.", envvar="REACT_CLASSNAME_SKIP_NODE_MODULES"),
]
ClassProp = Annotated[
    str,
    typer.Option(help="Prop and attribute that carries the class.", envvar="REACT_CLASSNAME_CLASS_PROP"),
]
BindingName = Annotated[
    str,
    typer.Option(help="Local name given to an injected class binding.", envvar="REACT_CLASSNAME_BINDING_NAME"),
]


def build_options(skip_node_modules: bool, class_prop: str, binding_name: str) -> TransformOptions:
    try:
        return TransformOptions(
            skip_node_modules=skip_node_modules,
            class_prop=class_prop,
            binding_name=binding_name,
        )
    except ValidationError as exc:
        for error in exc.errors():
            console.print(f"[red]Invalid option[/red] {error['loc'][0]}: {error['msg']}")
        raise typer.Exit(2) from None
