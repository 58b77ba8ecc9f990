"""Locate top-level React components and the markup element they render."""

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from tree_sitter import Node, Tree

from react_classname.core.parsing import node_text, significant_children, unwrap_parentheses

logger = logging.getLogger(__name__)

_FORWARD_REF = "forwardRef"
_MARKUP_TYPES = frozenset({"jsx_element", "jsx_self_closing_element"})


class ComponentKind(Enum):
    FUNCTION_DECLARATION = "FunctionDeclaration"
    ARROW_CONST = "ArrowConst"
    FORWARD_REF_ARROW = "ForwardRefArrow"


@dataclass(frozen=True)
class ComponentCandidate:
    kind: ComponentKind
    name: str
    declaration: Node
    parameters: Node
    root_element: Node | None
    ref_parameter: Node | None = None

    @property
    def line(self) -> int:
        return self.declaration.start_point[0] + 1


def find_components(tree: Tree, source: bytes) -> list[ComponentCandidate]:
    """Return component candidates among the program's top-level declarations, in source order."""
    return list(_iter_candidates(tree.root_node, source))


def _iter_candidates(program: Node, source: bytes) -> Iterator[ComponentCandidate]:
    for statement in significant_children(program):
        declaration = _unwrap_export(statement)
        if declaration is None:
            continue
        if declaration.type == "function_declaration":
            candidate = _match_function_declaration(declaration, source)
            if candidate is not None:
                yield candidate
        elif declaration.type == "lexical_declaration" and declaration.children[0].type == "const":
            for declarator in declaration.named_children:
                if declarator.type != "variable_declarator":
                    continue
                candidate = _match_const_declarator(declarator, source)
                if candidate is not None:
                    yield candidate


def _unwrap_export(statement: Node) -> Node | None:
    if statement.type == "export_statement":
        return statement.child_by_field_name("declaration")
    return statement


def _is_component_name(name: str) -> bool:
    return name[:1].isupper()


def _match_function_declaration(node: Node, source: bytes) -> ComponentCandidate | None:
    name_node = node.child_by_field_name("name")
    parameters = node.child_by_field_name("parameters")
    if name_node is None or parameters is None:
        return None
    name = node_text(name_node, source)
    if not _is_component_name(name):
        return None
    return ComponentCandidate(
        kind=ComponentKind.FUNCTION_DECLARATION,
        name=name,
        declaration=node,
        parameters=parameters,
        root_element=extract_root_element(node.child_by_field_name("body"), name),
    )


def _match_const_declarator(declarator: Node, source: bytes) -> ComponentCandidate | None:
    name_node = declarator.child_by_field_name("name")
    value = declarator.child_by_field_name("value")
    if name_node is None or name_node.type != "identifier" or value is None:
        return None
    name = node_text(name_node, source)
    if not _is_component_name(name):
        return None

    value = unwrap_parentheses(value)
    if value.type == "arrow_function":
        return _arrow_candidate(ComponentKind.ARROW_CONST, name, declarator, value)

    if value.type == "call_expression" and _is_forward_ref(value.child_by_field_name("function"), source):
        arguments = value.child_by_field_name("arguments")
        render = significant_children(arguments) if arguments is not None else []
        if render and render[0].type == "arrow_function":
            return _arrow_candidate(ComponentKind.FORWARD_REF_ARROW, name, declarator, render[0])
        logger.debug("%s: forwardRef is not given an arrow function", name)
    return None


def _arrow_candidate(kind: ComponentKind, name: str, declarator: Node, arrow: Node) -> ComponentCandidate | None:
    parameters = arrow.child_by_field_name("parameters")
    if parameters is None:
        parameters = arrow.child_by_field_name("parameter")
    if parameters is None:
        return None

    ref_parameter = None
    if kind is ComponentKind.FORWARD_REF_ARROW and parameters.type == "formal_parameters":
        params = significant_children(parameters)
        if len(params) > 1:
            ref_parameter = params[1]

    return ComponentCandidate(
        kind=kind,
        name=name,
        declaration=declarator,
        parameters=parameters,
        root_element=extract_root_element(arrow.child_by_field_name("body"), name),
        ref_parameter=ref_parameter,
    )


def _is_forward_ref(function: Node | None, source: bytes) -> bool:
    if function is None:
        return False
    if function.type == "identifier":
        return node_text(function, source) == _FORWARD_REF
    if function.type == "member_expression":
        prop = function.child_by_field_name("property")
        return prop is not None and node_text(prop, source) == _FORWARD_REF
    return False


def extract_root_element(body: Node | None, name: str = "<anonymous>") -> Node | None:
    """Return the single markup element a component body renders, if there is exactly one.

    A block body must consist of one ``return`` statement; an arrow's
    expression body is taken as is. Fragments are not root elements.
    """
    if body is None:
        return None

    if body.type == "statement_block":
        statements = significant_children(body)
        if len(statements) != 1 or statements[0].type != "return_statement":
            logger.debug("%s: body is not a single return statement", name)
            return None
        returned = significant_children(statements[0])
        if len(returned) != 1:
            return None
        expression = returned[0]
    else:
        expression = body

    expression = unwrap_parentheses(expression)
    if expression.type not in _MARKUP_TYPES:
        logger.debug("%s: does not return a markup element", name)
        return None

    opening = expression.child_by_field_name("open_tag") if expression.type == "jsx_element" else expression
    if opening is None or opening.child_by_field_name("name") is None:
        logger.debug("%s: returns a fragment", name)
        return None
    return expression
