from collections.abc import Iterable, Iterator
from pathlib import Path

from react_classname.core.languages import is_supported_path
from react_classname.core.transform import transform_source
from react_classname.models import TransformOptions, TransformResult


def iter_source_files(paths: Iterable[Path]) -> Iterator[Path]:
    """Expand *paths* into files; directories are walked for supported source files."""
    for path in paths:
        if path.is_dir():
            yield from sorted(p for p in path.rglob("*") if p.is_file() and is_supported_path(p))
        else:
            yield path


def transform_path(
    path: Path,
    options: TransformOptions | None = None,
    *,
    language: str | None = None,
    write: bool = False,
    out_path: Path | None = None,
) -> TransformResult:
    """Transform a file on disk.

    With ``write`` the result goes to *out_path* (default: *path* itself),
    and only when the target's current content differs.
    """
    # bytes keep line endings exactly as they are on disk
    text = path.read_bytes().decode("utf-8")
    result = transform_source(path, text, options, language=language)
    if write:
        _write_if_different(out_path or path, result.code)
    return result


def _write_if_different(target: Path, code: str) -> bool:
    data = code.encode("utf-8")
    if target.exists() and target.read_bytes() == data:
        return False
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(data)
    return True
