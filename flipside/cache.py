from typing import Any, Awaitable, Callable
from loguru import logger

class ViewCache:
    """Listing payloads memoized by route path until a mutation revalidates them."""

    def __init__(self):
        self._views: dict[str, Any] = {}

    async def get_or_load(self, path: str, loader: Callable[[], Awaitable[Any]]):
        if path not in self._views:
            self._views[path] = await loader()
        return self._views[path]

    def revalidate(self, path: str):
        if self._views.pop(path, None) is not None:
            logger.debug("Revalidated {}", path)

    def clear(self):
        self._views.clear()

    def __contains__(self, path: str):
        return path in self._views

view_cache = ViewCache()

def revalidate_path(path: str):
    view_cache.revalidate(path)
