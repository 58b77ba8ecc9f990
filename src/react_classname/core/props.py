from dataclasses import dataclass
from enum import Enum

from tree_sitter import Node

from react_classname.core.matcher import ComponentCandidate, ComponentKind
from react_classname.core.parsing import node_text, significant_children
from react_classname.models import TransformOptions


class PropsStatus(Enum):
    NON_DESTRUCTURED = "non-destructured"
    SPREAD_PRESENT = "spread-present"
    ALREADY_BOUND = "already-bound"
    INJECTABLE = "injectable"


@dataclass(frozen=True)
class PropsShape:
    status: PropsStatus
    is_object_pattern: bool = False
    has_class_name_field: bool = False
    has_rest_spread: bool = False
    other_bindings: tuple[str, ...] = ()
    pattern: Node | None = None
    class_binding: str | None = None

    @property
    def can_inject(self) -> bool:
        return self.status in (PropsStatus.ALREADY_BOUND, PropsStatus.INJECTABLE)


_NON_DESTRUCTURED = PropsShape(PropsStatus.NON_DESTRUCTURED)


def analyze_props(
    candidate: ComponentCandidate, source: bytes, options: TransformOptions | None = None
) -> PropsShape:
    """Classify the props parameter of *candidate*.

    Rules apply in order: no parameter is injectable, anything but a single
    object pattern is non-destructured, a rest capture wins over an existing
    class field, and an existing class field is reused rather than added.
    """
    class_prop = options.class_prop if options is not None else "className"

    if candidate.parameters.type != "formal_parameters":
        return _NON_DESTRUCTURED
    params = significant_children(candidate.parameters)
    if candidate.kind is ComponentKind.FORWARD_REF_ARROW and len(params) <= 2:
        params = params[:1]

    if not params:
        return PropsShape(PropsStatus.INJECTABLE)
    if len(params) != 1:
        return _NON_DESTRUCTURED

    pattern = _object_pattern(params[0])
    if pattern is None:
        return _NON_DESTRUCTURED
    return _classify_pattern(pattern, source, class_prop)


def _object_pattern(param: Node) -> Node | None:
    if param.type in ("required_parameter", "optional_parameter"):
        inner = param.child_by_field_name("pattern")
    elif param.type == "assignment_pattern":
        inner = param.child_by_field_name("left")
    else:
        inner = param
    if inner is not None and inner.type == "object_pattern":
        return inner
    return None


def _classify_pattern(pattern: Node, source: bytes, class_prop: str) -> PropsShape:
    bindings: list[str] = []
    has_class_field = False
    class_binding: str | None = None
    has_rest = False

    for entry in significant_children(pattern):
        if entry.type == "rest_pattern":
            has_rest = True
            continue
        key, local = _entry_binding(entry, source)
        if key == class_prop:
            has_class_field = True
            class_binding = local
        elif key is not None:
            bindings.append(key)

    if has_rest:
        status = PropsStatus.SPREAD_PRESENT
    elif has_class_field:
        # `className: { nested }` binds nothing we could reference
        status = PropsStatus.ALREADY_BOUND if class_binding is not None else PropsStatus.NON_DESTRUCTURED
    else:
        status = PropsStatus.INJECTABLE

    return PropsShape(
        status=status,
        is_object_pattern=True,
        has_class_name_field=has_class_field,
        has_rest_spread=has_rest,
        other_bindings=tuple(bindings),
        pattern=pattern,
        class_binding=class_binding,
    )


def _entry_binding(entry: Node, source: bytes) -> tuple[str | None, str | None]:
    """Return ``(prop key, local name)`` for one object-pattern entry."""
    if entry.type == "shorthand_property_identifier_pattern":
        name = node_text(entry, source)
        return name, name

    if entry.type == "object_assignment_pattern":
        left = entry.child_by_field_name("left")
        if left is not None and left.type == "shorthand_property_identifier_pattern":
            name = node_text(left, source)
            return name, name
        return None, None

    if entry.type == "pair_pattern":
        key_node = entry.child_by_field_name("key")
        value = entry.child_by_field_name("value")
        if key_node is None or value is None:
            return None, None
        key = _property_key(key_node, source)
        if value.type == "assignment_pattern":
            left = value.child_by_field_name("left")
            if left is None:
                return key, None
            value = left
        local = node_text(value, source) if value.type == "identifier" else None
        return key, local

    return None, None


def _property_key(node: Node, source: bytes) -> str | None:
    if node.type == "property_identifier":
        return node_text(node, source)
    if node.type == "string":
        return node_text(node, source)[1:-1]
    return None
