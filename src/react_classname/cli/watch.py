import asyncio
import contextlib
from pathlib import Path
from typing import Annotated

import typer

from react_classname.cli.options import BindingName, ClassProp, SkipNodeModules, build_options, console
from react_classname.core.files import transform_path
from react_classname.core.ports.watcher import ChangeCallback
from react_classname.models import TransformOptions
from react_classname.watcher.watchfiles_adapter import JsxSourceFilter, WatchfilesWatcher


def make_change_handler(root: Path, options: TransformOptions, out_dir: Path | None = None) -> ChangeCallback:
    """Build the watcher callback that re-transforms changed files."""
    root = root.resolve()
    out_root = out_dir.resolve() if out_dir is not None else None

    async def _on_change(paths: set[Path]) -> None:
        for path in sorted(paths):
            resolved = path.resolve()
            if not resolved.exists():
                continue
            if out_root is not None and resolved.is_relative_to(out_root):
                continue
            target = out_root / resolved.relative_to(root) if out_root is not None else None
            try:
                result = transform_path(resolved, options, write=True, out_path=target)
            except (OSError, ValueError) as exc:
                console.print(f"[red]Error[/red] {path}: {exc}")
                continue
            if result.changed:
                console.print(f"[green]Transformed[/green] {path}")

    return _on_change


def watch(
    directory: Annotated[Path, typer.Argument(help="Directory to watch.", exists=True, file_okay=False)],
    out_dir: Annotated[Path | None, typer.Option(help="Mirror results into this directory instead of rewriting in place.")] = None,
    skip_node_modules: SkipNodeModules = False,
    class_prop: ClassProp = "className",
    binding_name: BindingName = "$cn",
) -> None:
    """Re-transform JSX sources whenever they change."""
    options = build_options(skip_node_modules, class_prop, binding_name)
    watcher = WatchfilesWatcher(
        directory,
        make_change_handler(directory, options, out_dir),
        JsxSourceFilter(include_node_modules=not options.skip_node_modules),
    )

    async def _run() -> None:
        await watcher.start()
        try:
            await asyncio.Event().wait()
        finally:
            await watcher.stop()

    console.print(f"[green]Watching[/green] {watcher.directory} (Ctrl+C to stop)")
    with contextlib.suppress(KeyboardInterrupt):
        asyncio.run(_run())
