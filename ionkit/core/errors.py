"""
Exception hierarchy — failures that are allowed to propagate.

Resolution problems are never raised; they are collected as
``ProjectDetailsError`` values on the result.  The exceptions below are
for everything outside that taxonomy.
"""

from __future__ import annotations


class IonkitError(Exception):
    """Base class for all ionkit exceptions."""


class FatalError(IonkitError):
    """An unrecoverable condition — the command cannot continue."""


class ConfigError(IonkitError):
    """Raised when a config file cannot be read, parsed, or written."""


class RunnerNotFoundError(IonkitError):
    """The project type has no runner for the requested action.

    Callers degrade this into "feature unavailable" rather than failing.
    """
