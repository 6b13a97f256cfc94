# ============================================================================
# CORE MODULE
# ============================================================================
# EPOCH: 1 - DEPLOYMENT PLANNING
# STATUS: Core module initialization
# PURPOSE: Export contracts, errors and models
# LAST_REVIEWED: 19 OCT 2026
# ============================================================================

from core.contracts import JobLifecycle, JobState, PropertySchemaStyle
from core.errors import (
    DirectorError,
    TemplateNotBound,
    JobIncompatibleSpecs,
    JobPackageCollision,
)
from core.models import (
    ReleaseVersion,
    TemplateModel,
    Template,
    CompiledPackageModel,
    CompiledPackage,
    DiskPool,
    Job,
)

__all__ = [
    # Enums
    "JobLifecycle",
    "JobState",
    "PropertySchemaStyle",
    # Errors
    "DirectorError",
    "TemplateNotBound",
    "JobIncompatibleSpecs",
    "JobPackageCollision",
    # Models
    "ReleaseVersion",
    "TemplateModel",
    "Template",
    "CompiledPackageModel",
    "CompiledPackage",
    "DiskPool",
    "Job",
]
