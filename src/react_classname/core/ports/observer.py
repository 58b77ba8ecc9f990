from typing import Protocol


class TransformObserver(Protocol):
    def on_transform(self, path: str, code: str) -> None: ...
