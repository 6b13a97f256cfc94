# ============================================================================
# COMPILED PACKAGE MODELS
# ============================================================================
# EPOCH: 1 - DEPLOYMENT PLANNING
# STATUS: Core model - Compiled packages delivered to agents
# PURPOSE: Package record and the per-job wrapper exposing its spec
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: CompiledPackageModel, CompiledPackage
# DEPENDENCIES: pydantic
# ============================================================================
"""
Compiled Package Models

A compiled package is a release package built for one stemcell. Jobs
register the compiled packages they were given; the package spec sent to
agents is built from these registrations.
"""

from typing import Any, Dict, Optional
from pydantic import BaseModel, Field


class CompiledPackageModel(BaseModel):
    """Record of one compiled package."""
    name: str = Field(..., min_length=1)
    version: str
    sha1: str
    blobstore_id: str
    dependency_key: Optional[str] = Field(
        default=None,
        description="Fingerprint of the compile-time dependencies"
    )

    model_config = {"frozen": True}

    @property
    def spec(self) -> Dict[str, Any]:
        """Package spec in the shape agents expect."""
        return {
            "name": self.name,
            "version": self.version,
            "sha1": self.sha1,
            "blobstore_id": self.blobstore_id,
        }


class CompiledPackage:
    """
    Wrapper around a compiled package record, owned by one job.

    Accepts anything exposing `name` and a `spec` mapping.
    """

    def __init__(self, model):
        self.model = model
        self.name: str = model.name

    @property
    def spec(self) -> Dict[str, Any]:
        return dict(self.model.spec)

    def __repr__(self) -> str:
        return f"CompiledPackage(name={self.name!r})"


__all__ = ["CompiledPackageModel", "CompiledPackage"]
