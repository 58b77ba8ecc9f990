from typing import cast

from tree_sitter import Node, Tree
from tree_sitter_language_pack import SupportedLanguage, get_parser


class SourceParseError(ValueError):
    """Raised when source text does not parse into an error-free tree."""

    def __init__(self, path: str, line: int, column: int) -> None:
        super().__init__(f"Failed to parse {path} at line {line}, column {column}")
        self.path = path
        self.line = line
        self.column = column


def parse_source(source_bytes: bytes, language: str, path: str = "<source>") -> Tree:
    parser = get_parser(cast(SupportedLanguage, language))
    tree = parser.parse(source_bytes)
    if tree.root_node.has_error:
        row, column = _first_error(tree.root_node).start_point
        raise SourceParseError(path, row + 1, column + 1)
    return tree


def _first_error(node: Node) -> Node:
    for child in node.children:
        if child.is_error or child.is_missing:
            return child
        if child.has_error:
            return _first_error(child)
    return node


def node_text(node: Node, source: bytes) -> str:
    return source[node.start_byte : node.end_byte].decode("utf-8")


def significant_children(node: Node) -> list[Node]:
    """Named children of *node*, comments excluded."""
    return [child for child in node.named_children if child.type != "comment"]


def unwrap_parentheses(node: Node) -> Node:
    while node.type == "parenthesized_expression":
        inner = significant_children(node)
        # TypeScript allows `(expr: Type)`, which is not a plain grouping
        if len(inner) != 1:
            return node
        node = inner[0]
    return node
