from pathlib import Path

# tree-sitter grammar names; plain JavaScript and JSX share one grammar
_GRAMMAR_ALIASES = {
    "javascript": "javascript",
    "js": "javascript",
    "jsx": "javascript",
    "ts": "typescript",
    "tsx": "tsx",
    "typescript": "typescript",
}

_SUFFIX_GRAMMARS = {
    ".cjs": "javascript",
    ".cts": "typescript",
    ".js": "javascript",
    ".jsx": "javascript",
    ".mjs": "javascript",
    ".mts": "typescript",
    ".ts": "typescript",
    ".tsx": "tsx",
}


def grammar_for_name(name: str) -> str:
    """Map a user-supplied language name (``jsx``, ``TS``...) to its grammar."""
    grammar = _GRAMMAR_ALIASES.get(name.strip().lower())
    if grammar is None:
        choices = ", ".join(sorted(_GRAMMAR_ALIASES))
        raise ValueError(f"Unknown language '{name}', expected one of: {choices}")
    return grammar


def grammar_for_path(file_path: Path) -> str:
    grammar = _SUFFIX_GRAMMARS.get(file_path.suffix.lower())
    if grammar is None:
        raise ValueError(f"Cannot transform {file_path.name}: not a JavaScript or TypeScript source")
    return grammar


def select_grammar(file_path: Path, override: str | None = None) -> str:
    """Pick the grammar for *file_path*; an explicit *override* ignores the suffix."""
    if override:
        return grammar_for_name(override)
    return grammar_for_path(file_path)


def is_supported_path(file_path: Path) -> bool:
    return file_path.suffix.lower() in _SUFFIX_GRAMMARS
