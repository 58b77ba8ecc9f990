"""Unit tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from react_classname.models import ComponentReport, TransformOptions, TransformResult


class TestTransformOptions:
    """Tests for the TransformOptions model."""

    def test_defaults(self) -> None:
        """Test the documented defaults."""
        options = TransformOptions()
        assert options.skip_node_modules is False
        assert options.on_transform is None
        assert options.class_prop == "className"
        assert options.binding_name == "$cn"

    def test_accepts_callback(self) -> None:
        """Test that a plain function is accepted as the transform hook."""
        seen: list[str] = []
        options = TransformOptions(on_transform=seen.append)
        assert options.on_transform is not None
        options.on_transform("code")
        assert seen == ["code"]

    def test_is_frozen(self) -> None:
        """Test that options cannot be changed after creation."""
        options = TransformOptions()
        with pytest.raises(ValidationError):
            options.skip_node_modules = True  # type: ignore[misc]

    @pytest.mark.parametrize("name", ["", "class name", "1cls", "cn-x"])
    def test_rejects_invalid_binding_name(self, name: str) -> None:
        """Test that the injected binding must be a valid identifier."""
        with pytest.raises(ValidationError):
            TransformOptions(binding_name=name)

    def test_rejects_invalid_class_prop(self) -> None:
        """Test that the class prop must be a valid identifier."""
        with pytest.raises(ValidationError):
            TransformOptions(class_prop="data-class")

    def test_accepts_dollar_and_underscore(self) -> None:
        """Test identifiers using $ and _."""
        options = TransformOptions(binding_name="$_cls", class_prop="_class")
        assert options.binding_name == "$_cls"


class TestTransformResult:
    """Tests for the TransformResult model."""

    def test_serializes_to_dict(self) -> None:
        """Test that a result with reports can be dumped."""
        result = TransformResult(
            path="Card.tsx",
            code="code",
            changed=True,
            components=[ComponentReport(name="Card", kind="ArrowConst", line=1, outcome="injected")],
        )
        data = result.model_dump()
        assert data["skipped"] is False
        assert data["components"] == [
            {"name": "Card", "kind": "ArrowConst", "line": 1, "outcome": "injected", "reason": None}
        ]

    def test_rejects_unknown_outcome(self) -> None:
        """Test that outcomes are restricted to the known set."""
        with pytest.raises(ValidationError):
            ComponentReport(name="Card", kind="ArrowConst", line=1, outcome="exploded")  # type: ignore[arg-type]
