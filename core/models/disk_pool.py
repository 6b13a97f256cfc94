# ============================================================================
# DISK POOL MODEL
# ============================================================================
# EPOCH: 1 - DEPLOYMENT PLANNING
# STATUS: Core model - Persistent disk configuration
# PURPOSE: Named persistent disk settings referenced by jobs
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: DiskPool
# DEPENDENCIES: pydantic
# ============================================================================
"""
Disk Pool Model

Jobs reference a disk pool for their persistent disk. Manifests that give
only a `persistent_disk` size get a synthesized pool with a generated name.
"""

from typing import Any, Dict
from pydantic import BaseModel, Field


class DiskPool(BaseModel):
    """Persistent disk settings."""
    name: str = Field(..., min_length=1)
    disk_size: int = Field(default=0, ge=0, description="Disk size in MB")
    cloud_properties: Dict[str, Any] = Field(default_factory=dict)


__all__ = ["DiskPool"]
