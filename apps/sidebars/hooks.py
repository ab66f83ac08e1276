"""Named synchronous actions and filters with ordered listener lists.

Listeners run in the order they were added. Actions are called for their
side effects; filters receive the current value (plus any extra positional
arguments) and return the value handed to the next listener.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Mapping
from typing import Any, Callable

from django.utils.module_loading import import_string

from .exceptions import SidebarConfigurationError

logger = logging.getLogger(__name__)

Listener = Callable[..., Any]


class HookRegistry:
    def __init__(self) -> None:
        self._actions: dict[str, list[Listener]] = defaultdict(list)
        self._filters: dict[str, list[Listener]] = defaultdict(list)

    def add_action(self, name: str, callback: Listener) -> Listener:
        self._actions[name].append(callback)
        return callback

    def add_filter(self, name: str, callback: Listener) -> Listener:
        self._filters[name].append(callback)
        return callback

    def remove_action(self, name: str, callback: Listener) -> bool:
        return self._remove(self._actions, name, callback)

    def remove_filter(self, name: str, callback: Listener) -> bool:
        return self._remove(self._filters, name, callback)

    @staticmethod
    def _remove(table: dict[str, list[Listener]], name: str, callback: Listener) -> bool:
        listeners = table.get(name)
        if not listeners or callback not in listeners:
            return False
        listeners.remove(callback)
        return True

    def has_action(self, name: str) -> bool:
        return bool(self._actions.get(name))

    def has_filter(self, name: str) -> bool:
        return bool(self._filters.get(name))

    def do_action(self, name: str, **kwargs: Any) -> None:
        for callback in list(self._actions.get(name, ())):
            try:
                callback(**kwargs)
            except Exception:
                logger.exception("Action listener %r failed for %s", callback, name)

    def apply_filters(self, name: str, value: Any, *args: Any) -> Any:
        for callback in list(self._filters.get(name, ())):
            try:
                value = callback(value, *args)
            except Exception:
                logger.exception("Filter listener %r failed for %s", callback, name)
        return value

    def load(self, config: Mapping[str, Mapping[str, Any]] | None) -> None:
        """Connect dotted-path listeners declared in settings.

        ``config`` looks like ``{"actions": {name: [path, ...]}, "filters": {...}}``.
        """

        if not config:
            return
        if not isinstance(config, Mapping):
            raise SidebarConfigurationError("SIDEBAR_HOOKS must be a mapping")

        for kind, add in (("actions", self.add_action), ("filters", self.add_filter)):
            for name, paths in (config.get(kind) or {}).items():
                if isinstance(paths, str):
                    paths = [paths]
                for path in paths:
                    try:
                        callback = import_string(path)
                    except ImportError as exc:
                        raise SidebarConfigurationError(
                            f"Unable to import {kind[:-1]} listener {path!r} for {name}"
                        ) from exc
                    add(name, callback)
                    logger.debug("Connected %s listener %s to %s", kind[:-1], path, name)
