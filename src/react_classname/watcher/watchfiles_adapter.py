from __future__ import annotations

import asyncio
import contextlib
import logging
from pathlib import Path

from watchfiles import Change, DefaultFilter, awatch

from react_classname.core.languages import is_supported_path
from react_classname.core.paths import VENDOR_DIRECTORY
from react_classname.core.ports.watcher import ChangeCallback

logger = logging.getLogger(__name__)


class JsxSourceFilter(DefaultFilter):
    """Pass additions and modifications of JavaScript/TypeScript sources.

    ``DefaultFilter`` ignores ``node_modules``; it is watched only when
    ``include_node_modules`` is set.
    """

    def __init__(self, *, include_node_modules: bool = False) -> None:
        ignore_dirs = [d for d in self.ignore_dirs if not (include_node_modules and d == VENDOR_DIRECTORY)]
        super().__init__(ignore_dirs=ignore_dirs)

    def __call__(self, change: Change, path: str) -> bool:
        if change == Change.deleted or not is_supported_path(Path(path)):
            return False
        return super().__call__(change, path)


class WatchfilesWatcher:
    """Watch a source tree and hand batches of changed files to a callback.

    Implements the ``FileWatcherPort`` protocol.
    """

    def __init__(
        self,
        directory: str | Path,
        on_change: ChangeCallback,
        watch_filter: JsxSourceFilter | None = None,
    ) -> None:
        self._directory = Path(directory)
        self._on_change = on_change
        self._filter = watch_filter or JsxSourceFilter()
        self._task: asyncio.Task[None] | None = None

    @property
    def directory(self) -> Path:
        return self._directory

    async def start(self) -> None:
        if self._task is not None:
            return
        self._task = asyncio.create_task(self._watch())
        logger.info("Watching %s for component changes", self._directory)

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None
        logger.info("Stopped watching %s", self._directory)

    async def _watch(self) -> None:
        async for changes in awatch(self._directory, watch_filter=self._filter):
            paths = {Path(p) for _, p in changes}
            if not paths:
                continue
            logger.info("Re-transforming %d changed file(s)", len(paths))
            try:
                await self._on_change(paths)
            except Exception:
                logger.exception("Error in watcher callback")
