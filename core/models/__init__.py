# ============================================================================
# MODELS MODULE
# ============================================================================
# EPOCH: 1 - DEPLOYMENT PLANNING
# STATUS: Model exports
# PURPOSE: Central export point for all Pydantic models
# LAST_REVIEWED: 19 OCT 2026
# ============================================================================
"""
Models Module - Central Export Point

All Pydantic models for the job planner. The Job aggregate is imported
last: it depends on the planner algorithms, which depend on the models
above it.
"""

from core.models.release import ReleaseVersion
from core.models.template import TemplateModel, Template
from core.models.compiled_package import CompiledPackageModel, CompiledPackage
from core.models.disk_pool import DiskPool
from core.models.job import Job

__all__ = [
    # Release
    "ReleaseVersion",
    # Templates
    "TemplateModel",
    "Template",
    # Packages
    "CompiledPackageModel",
    "CompiledPackage",
    # Disks
    "DiskPool",
    # Job
    "Job",
]
