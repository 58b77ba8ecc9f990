"""Plan the edits that thread a class-name binding through a component.

The parameter edit adds the binding to the props pattern; the attribute
edit applies it to the root element, merging with any class the element
already has. Merging keeps the original expression first and evaluates it
exactly once:

    <div className="card">  ->  <div className={"card" + ($cn ? " " + $cn : "")}>
"""

import html
import json
import re
from collections.abc import Iterator
from dataclasses import dataclass

from tree_sitter import Node

from react_classname.core.edits import TextEdit
from react_classname.core.matcher import ComponentCandidate
from react_classname.core.parsing import node_text, significant_children
from react_classname.core.props import PropsShape, PropsStatus
from react_classname.models import TransformOptions

# Node types that bind at least as tightly as `+` on its left-hand side
_TIGHT_EXPRESSIONS = frozenset(
    {
        "array",
        "call_expression",
        "false",
        "identifier",
        "member_expression",
        "new_expression",
        "non_null_expression",
        "null",
        "number",
        "object",
        "parenthesized_expression",
        "string",
        "subscript_expression",
        "template_string",
        "this",
        "true",
        "unary_expression",
        "undefined",
    }
)
_ADDITIVE_OR_TIGHTER = frozenset({"+", "-", "*", "/", "%", "**"})
_REFERENCE_TYPES = frozenset({"identifier", "shorthand_property_identifier"})
# JSX decodes only terminated references in attribute strings
_CHARACTER_REFERENCE_RE = re.compile(r"&(?:#[0-9]+|#[xX][0-9a-fA-F]+|[A-Za-z][A-Za-z0-9]*);")


class InjectionError(RuntimeError):
    """Raised when asked to rewrite a component that cannot take a class binding."""


@dataclass(frozen=True)
class ClassAttribute:
    opening: Node
    attribute: Node | None = None
    value: Node | None = None

    @property
    def is_absent(self) -> bool:
        return self.attribute is None


def opening_tag(root_element: Node) -> Node:
    if root_element.type == "jsx_element":
        tag = root_element.child_by_field_name("open_tag")
        if tag is None:
            raise InjectionError("Markup element has no opening tag")
        return tag
    return root_element


def find_class_attribute(root_element: Node, source: bytes, class_prop: str = "className") -> ClassAttribute:
    """Return the class attribute of the root element; the last one wins, as in JSX."""
    opening = opening_tag(root_element)
    found = ClassAttribute(opening)
    for attribute in opening.named_children:
        if attribute.type != "jsx_attribute":
            continue
        parts = significant_children(attribute)
        if parts and node_text(parts[0], source) == class_prop:
            found = ClassAttribute(opening, attribute, parts[1] if len(parts) > 1 else None)
    return found


def merge_expression(original: str, binding: str) -> str:
    return f'{original} + ({binding} ? " " + {binding} : "")'


def plan_injection(
    candidate: ComponentCandidate,
    shape: PropsShape,
    class_attr: ClassAttribute,
    source: bytes,
    options: TransformOptions | None = None,
) -> list[TextEdit]:
    if not shape.can_inject:
        raise InjectionError(f"{candidate.name}: props are {shape.status.value}, nothing can be injected")
    if candidate.root_element is None:
        raise InjectionError(f"{candidate.name}: no root element to apply the class binding to")
    options = options or TransformOptions()

    edits: list[TextEdit] = []
    if shape.status is PropsStatus.INJECTABLE:
        edits.append(_binding_edit(candidate, shape, source, options))
        binding = options.binding_name
    else:
        if shape.class_binding is None:
            raise InjectionError(f"{candidate.name}: class field is bound to no local name")
        binding = shape.class_binding

    attribute_edit = _attribute_edit(class_attr, binding, source, options.class_prop)
    if attribute_edit is not None:
        edits.append(attribute_edit)
    return edits


def _binding_edit(
    candidate: ComponentCandidate, shape: PropsShape, source: bytes, options: TransformOptions
) -> TextEdit:
    field = f"{options.class_prop}: {options.binding_name}"
    if shape.pattern is None:
        return TextEdit.insert(candidate.parameters.start_byte + 1, f"{{ {field} }}")
    entries = significant_children(shape.pattern)
    if entries:
        return TextEdit.insert(entries[0].start_byte, f"{field}, ")
    pattern = shape.pattern
    if not source[pattern.start_byte + 1 : pattern.end_byte - 1].strip():
        return TextEdit(pattern.start_byte, pattern.end_byte, f"{{ {field} }}")
    # only comments inside the braces
    return TextEdit.insert(pattern.start_byte + 1, f" {field}")


def _attribute_edit(class_attr: ClassAttribute, binding: str, source: bytes, class_prop: str) -> TextEdit | None:
    if class_attr.attribute is None:
        anchor = significant_children(class_attr.opening)[-1]
        return TextEdit.insert(anchor.end_byte, f" {class_prop}={{{binding}}}")

    value = class_attr.value
    if value is None:
        return TextEdit.insert(class_attr.attribute.end_byte, f"={{{binding}}}")
    if _references(value, binding, source):
        return None

    if value.type == "string":
        literal = json.dumps(decode_jsx_string(node_text(value, source)[1:-1]), ensure_ascii=False)
        return TextEdit(value.start_byte, value.end_byte, f"{{{merge_expression(literal, binding)}}}")

    if value.type == "jsx_expression":
        inner = significant_children(value)
        if not inner:
            return TextEdit(value.start_byte, value.end_byte, f"{{{binding}}}")
        expression = inner[0]
        text = node_text(expression, source)
        if not _is_tight(expression, source):
            text = f"({text})"
        return TextEdit(expression.start_byte, expression.end_byte, merge_expression(text, binding))

    # markup passed as the attribute value
    text = f"({node_text(value, source)})"
    return TextEdit(value.start_byte, value.end_byte, f"{{{merge_expression(text, binding)}}}")


def decode_jsx_string(text: str) -> str:
    """Resolve the character references JSX resolves in a quoted attribute value."""
    return _CHARACTER_REFERENCE_RE.sub(lambda match: html.unescape(match.group()), text)


def _is_tight(expression: Node, source: bytes) -> bool:
    if expression.type in _TIGHT_EXPRESSIONS:
        return True
    if expression.type == "binary_expression":
        operator = expression.child_by_field_name("operator")
        return operator is not None and node_text(operator, source) in _ADDITIVE_OR_TIGHTER
    return False


def _references(node: Node, name: str, source: bytes) -> bool:
    return any(node_text(found, source) == name for found in _walk_references(node))


def _walk_references(node: Node) -> Iterator[Node]:
    if node.type in _REFERENCE_TYPES:
        yield node
    for child in node.named_children:
        yield from _walk_references(child)
