"""
Fingerprint loader — loads project type fingerprints from YAML.

The bundled catalog lives at ``ionkit/core/data/fingerprints.yml``.
Entries are validated against the ``Fingerprint`` model and keyed by
``ProjectType``; entries for types ionkit does not support are skipped.
"""

from __future__ import annotations

import logging
from functools import cache
from pathlib import Path

import yaml
from pydantic import ValidationError

from ionkit.core.data import DATA_DIR
from ionkit.core.models.fingerprint import Fingerprint
from ionkit.core.models.project import ProjectType

logger = logging.getLogger(__name__)

DEFAULT_CATALOG = DATA_DIR / "fingerprints.yml"


def load_fingerprints(path: Path = DEFAULT_CATALOG) -> dict[ProjectType, Fingerprint]:
    """Load a fingerprint catalog.

    Args:
        path: YAML file mapping project type -> fingerprint rule.

    Returns:
        Fingerprints keyed by project type.  An unreadable or malformed
        catalog yields an empty mapping (nothing will be detected).
    """
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Failed to load fingerprints from %s: %s", path, e)
        return {}

    if not isinstance(data, dict):
        logger.warning("Fingerprint catalog %s is not a mapping, ignoring", path)
        return {}

    fingerprints: dict[ProjectType, Fingerprint] = {}
    for key, raw in data.items():
        try:
            project_type = ProjectType(key)
        except ValueError:
            logger.warning("Unknown project type '%s' in %s, skipping", key, path)
            continue

        try:
            fingerprints[project_type] = Fingerprint.model_validate(raw or {})
        except ValidationError as e:
            logger.warning("Invalid fingerprint for '%s' in %s: %s", key, path, e)

    logger.debug("Loaded %d fingerprints from %s", len(fingerprints), path)
    return fingerprints


@cache
def bundled_fingerprints() -> dict[ProjectType, Fingerprint]:
    """The bundled catalog, loaded once per process."""
    return load_fingerprints(DEFAULT_CATALOG)


def fingerprint_for(project_type: ProjectType) -> Fingerprint:
    """Fingerprint of a project type (an empty, never-matching rule if none)."""
    return bundled_fingerprints().get(project_type, Fingerprint())
