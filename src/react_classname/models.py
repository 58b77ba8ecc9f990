import re
from collections.abc import Callable
from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


class TransformOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    skip_node_modules: bool = False
    on_transform: Callable[[str], None] | None = None
    class_prop: str = "className"
    binding_name: str = "$cn"

    @field_validator("class_prop", "binding_name")
    @classmethod
    def _check_identifier(cls, value: str) -> str:
        if not _IDENTIFIER_RE.match(value):
            raise ValueError(f"'{value}' is not a valid JavaScript identifier")
        return value


Outcome = Literal["injected", "merged", "unchanged", "skipped"]


class ComponentReport(BaseModel):
    name: str
    kind: str
    line: int
    outcome: Outcome
    reason: str | None = None


class TransformResult(BaseModel):
    path: str
    code: str
    changed: bool
    skipped: bool = False
    components: list[ComponentReport] = []
