"""
Domain models — project file shapes and resolution results.

All models are re-exported here for convenient access:

    from ionkit.core.models import ProjectConfig, ProjectType, SingleAppResult
"""

from ionkit.core.models.details import (
    MultiAppResult,
    ProjectDetailsError,
    ProjectDetailsErrorCode,
    ProjectDetailsResult,
    SingleAppResult,
    UnknownResult,
)
from ionkit.core.models.fingerprint import Fingerprint
from ionkit.core.models.project import (
    PROJECT_TYPES,
    MultiProjectConfig,
    ProjectConfig,
    ProjectIntegration,
    ProjectType,
    classify_document,
    is_multi_project_config,
    is_project_config,
    pretty_project_name,
)

__all__ = [
    # project.py
    "PROJECT_TYPES",
    # fingerprint.py
    "Fingerprint",
    # details.py
    "MultiAppResult",
    "MultiProjectConfig",
    "ProjectConfig",
    "ProjectDetailsError",
    "ProjectDetailsErrorCode",
    "ProjectDetailsResult",
    "ProjectIntegration",
    "ProjectType",
    "SingleAppResult",
    "UnknownResult",
    "classify_document",
    "is_multi_project_config",
    "is_project_config",
    "pretty_project_name",
]
