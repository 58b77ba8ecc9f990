"""Tests for props signature classification."""

from __future__ import annotations

from collections.abc import Callable

import pytest
from tree_sitter import Tree

from react_classname.core.matcher import find_components
from react_classname.core.props import PropsShape, PropsStatus, analyze_props
from react_classname.models import TransformOptions

ParseTsx = Callable[[str], tuple[Tree, bytes]]


def _shape(parse_tsx: ParseTsx, source: str, options: TransformOptions | None = None) -> PropsShape:
    tree, source_bytes = parse_tsx(source)
    (candidate,) = find_components(tree, source_bytes)
    return analyze_props(candidate, source_bytes, options)


class TestInjectable:
    def test_no_parameters(self, parse_tsx: ParseTsx) -> None:
        shape = _shape(parse_tsx, "function Card() { return <div /> }")
        assert shape.status is PropsStatus.INJECTABLE
        assert shape.pattern is None
        assert shape.can_inject is True

    def test_destructured_fields_recorded_in_order(self, parse_tsx: ParseTsx) -> None:
        shape = _shape(parse_tsx, "function Card({ title, children, size = 'md', on: handler }) { return <div /> }")
        assert shape.status is PropsStatus.INJECTABLE
        assert shape.is_object_pattern is True
        assert shape.has_class_name_field is False
        assert shape.has_rest_spread is False
        assert shape.other_bindings == ("title", "children", "size", "on")

    def test_typed_pattern(self, parse_tsx: ParseTsx) -> None:
        shape = _shape(parse_tsx, "const Card = ({ children }: { children: ReactNode }) => <div />")
        assert shape.status is PropsStatus.INJECTABLE
        assert shape.other_bindings == ("children",)

    def test_pattern_with_default_value(self, parse_tsx: ParseTsx) -> None:
        shape = _shape(parse_tsx, "const Card = ({ title } = {}) => <div />")
        assert shape.status is PropsStatus.INJECTABLE

    def test_empty_pattern(self, parse_tsx: ParseTsx) -> None:
        shape = _shape(parse_tsx, "const Card = ({}) => <div />")
        assert shape.status is PropsStatus.INJECTABLE
        assert shape.pattern is not None
        assert shape.other_bindings == ()

    def test_forward_ref_considers_first_parameter_only(self, parse_tsx: ParseTsx) -> None:
        shape = _shape(parse_tsx, "const Input = forwardRef(({ label }, ref) => <input ref={ref} />)")
        assert shape.status is PropsStatus.INJECTABLE
        assert shape.other_bindings == ("label",)


class TestNonDestructured:
    @pytest.mark.parametrize(
        "source",
        [
            "function Card(props: React.HTMLAttributes<HTMLDivElement>) { return <div {...props} /> }",
            "const Card = props => <div />",
            "function Card({ a }, context) { return <div /> }",
            "function Card(...args) { return <div /> }",
            "function Card([first]) { return <div /> }",
            "const Input = forwardRef((props, ref) => <input ref={ref} />)",
        ],
        ids=["typed-identifier", "bare-identifier", "two-parameters", "rest-parameter", "array-pattern", "forward-ref"],
    )
    def test_classified_non_destructured(self, parse_tsx: ParseTsx, source: str) -> None:
        shape = _shape(parse_tsx, source)
        assert shape.status is PropsStatus.NON_DESTRUCTURED
        assert shape.can_inject is False

    def test_nested_class_pattern(self, parse_tsx: ParseTsx) -> None:
        shape = _shape(parse_tsx, "function Card({ className: { length } }) { return <div /> }")
        assert shape.status is PropsStatus.NON_DESTRUCTURED


class TestSpreadPresent:
    def test_rest_capture(self, parse_tsx: ParseTsx) -> None:
        shape = _shape(parse_tsx, "function Card({ title, ...rest }) { return <div {...rest} /> }")
        assert shape.status is PropsStatus.SPREAD_PRESENT
        assert shape.has_rest_spread is True
        assert shape.can_inject is False

    def test_rest_wins_over_class_field(self, parse_tsx: ParseTsx) -> None:
        shape = _shape(parse_tsx, "function Card({ className, ...rest }) { return <div /> }")
        assert shape.status is PropsStatus.SPREAD_PRESENT
        assert shape.has_class_name_field is True


class TestAlreadyBound:
    @pytest.mark.parametrize(
        ("params", "local"),
        [
            ("{ className }", "className"),
            ("{ className = 'base' }", "className"),
            ("{ className: cls }", "cls"),
            ("{ className: cls = '' }", "cls"),
            ("{ 'className': cls }", "cls"),
            ("{ title, className: $cn }", "$cn"),
        ],
    )
    def test_existing_binding_is_reused(self, parse_tsx: ParseTsx, params: str, local: str) -> None:
        shape = _shape(parse_tsx, f"function Card({params}) {{ return <div /> }}")
        assert shape.status is PropsStatus.ALREADY_BOUND
        assert shape.has_class_name_field is True
        assert shape.class_binding == local

    def test_custom_class_prop(self, parse_tsx: ParseTsx) -> None:
        options = TransformOptions(class_prop="classes")
        bound = _shape(parse_tsx, "function Card({ classes: cls }) { return <div /> }", options)
        assert bound.status is PropsStatus.ALREADY_BOUND
        assert bound.class_binding == "cls"

        unbound = _shape(parse_tsx, "function Card({ className }) { return <div /> }", options)
        assert unbound.status is PropsStatus.INJECTABLE
        assert unbound.other_bindings == ("className",)
