"""
Config store — a key/value view over a JSON document on disk.

A ``JsonConfig`` reads its file once at construction and keeps the
parsed document in memory.  An optional ``path_prefix`` scopes every
accessor to a subtree, so one project of a multi-app file can be handled
as if it were the whole document:

    JsonConfig(path, path_prefix=("projects", "admin")).get("type")

The view keeps a reference to the root document plus the key path; the
subtree is never copied.  Writes go through to the in-memory document
and are persisted (atomically) before ``set``/``unset`` return.

Subclasses supply ``provide_defaults()`` and may override ``migrate()``,
which runs exactly once, at construction, before any caller can read.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from ionkit.core.config.loader import read_json_file, write_json_file
from ionkit.core.errors import ConfigError

logger = logging.getLogger(__name__)


class JsonConfig:
    """Layered key/value accessor over a JSON file.

    Args:
        path: The JSON file.  A missing file reads as an empty document
            (``provide_defaults()`` fills in values).
        path_prefix: Keys leading to the subtree this view operates on.
        migrate: Run ``migrate()`` after loading.
        indent: JSON indentation used when persisting.

    Raises:
        ConfigError: If the file exists but is unreadable, not valid
            JSON, or not a JSON object.
    """

    def __init__(
        self,
        path: Path | str,
        *,
        path_prefix: Sequence[str] = (),
        migrate: bool = True,
        indent: int = 2,
    ):
        self.path = Path(path)
        self.path_prefix: tuple[str, ...] = tuple(path_prefix)
        self.indent = indent
        self._document = self._load()

        if migrate:
            self.migrate()

    # ── Hooks ───────────────────────────────────────────────────

    def provide_defaults(self) -> dict[str, Any]:
        """Values returned for keys the document does not set."""
        return {}

    def migrate(self) -> None:
        """Rewrite deprecated shapes into the current one."""

    # ── Reading ─────────────────────────────────────────────────

    @property
    def document(self) -> dict[str, Any]:
        """The whole (root) document, ignoring ``path_prefix``."""
        return self._document

    @property
    def c(self) -> dict[str, Any]:
        """Defaults merged with the scoped subtree (a fresh dict)."""
        return {**self.provide_defaults(), **(self._scope() or {})}

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a key in the scoped subtree, falling back to defaults."""
        scope = self._scope()
        if scope is not None and key in scope:
            return scope[key]
        return self.provide_defaults().get(key, default)

    # ── Writing ─────────────────────────────────────────────────

    def set(self, key: str, value: Any) -> None:
        """Set a key in the scoped subtree and persist the document."""
        scope = self._scope(create=True)
        assert scope is not None  # create=True always yields a mapping
        scope[key] = value
        logger.debug("Config set %s", self._label(key))
        self.save()

    def unset(self, key: str) -> None:
        """Remove a key from the scoped subtree (no-op if absent)."""
        scope = self._scope()
        if scope is None or key not in scope:
            return
        del scope[key]
        logger.debug("Config unset %s", self._label(key))
        self.save()

    def save(self) -> None:
        """Persist the whole document."""
        write_json_file(self.path, self._document, indent=self.indent)

    # ── Internals ───────────────────────────────────────────────

    def _load(self) -> dict[str, Any]:
        try:
            document = read_json_file(self.path)
        except FileNotFoundError:
            logger.debug("No config file at %s, using defaults", self.path)
            return {}

        if not isinstance(document, dict):
            raise ConfigError(
                f"Expected a JSON object in {self.path}, got {type(document).__name__}"
            )
        return document

    def _scope(self, create: bool = False) -> dict[str, Any] | None:
        """Follow ``path_prefix`` from the root document.

        Returns None when part of the path is missing, unless ``create``
        is set, in which case the missing mappings are added.
        """
        node: dict[str, Any] = self._document
        for key in self.path_prefix:
            child = node.get(key)
            if child is None:
                if not create:
                    return None
                child = {}
                node[key] = child
            if not isinstance(child, dict):
                raise ConfigError(
                    f"Cannot scope into {'.'.join(self.path_prefix)} in {self.path}: "
                    f"'{key}' is not an object"
                )
            node = child
        return node

    def _label(self, key: str) -> str:
        return ".".join((*self.path_prefix, key))

    def __repr__(self) -> str:
        prefix = ".".join(self.path_prefix)
        return f"<{self.__class__.__name__} path={str(self.path)!r} prefix={prefix!r}>"
