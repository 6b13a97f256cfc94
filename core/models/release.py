# ============================================================================
# RELEASE VERSION MODEL
# ============================================================================
# EPOCH: 1 - DEPLOYMENT PLANNING
# STATUS: Core model - Release identity
# PURPOSE: Identify the release version that supplies templates and packages
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: ReleaseVersion
# DEPENDENCIES: pydantic
# ============================================================================
"""
Release Version Model

A release is a versioned bundle of templates and packages. The planner only
needs its identity: which release supplied a template, and whether two
templates came from the same release.
"""

from pydantic import BaseModel, Field


class ReleaseVersion(BaseModel):
    """
    One version of a release.

    Frozen and hashable so it can key the package collision map.
    """
    name: str = Field(..., min_length=1, description="Release name")
    version: str = Field(..., min_length=1, description="Release version")

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return f"{self.name}/{self.version}"


__all__ = ["ReleaseVersion"]
