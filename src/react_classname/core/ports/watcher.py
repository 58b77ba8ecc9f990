from collections.abc import Callable, Coroutine
from pathlib import Path
from typing import Any, Protocol

# Receives each batch of changed source files; awaited before the next batch
ChangeCallback = Callable[[set[Path]], Coroutine[Any, Any, None]]


class FileWatcherPort(Protocol):
    """Something that reports source changes under a directory until stopped."""

    @property
    def directory(self) -> Path: ...

    async def start(self) -> None: ...

    async def stop(self) -> None: ...
