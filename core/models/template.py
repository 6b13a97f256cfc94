# ============================================================================
# TEMPLATE MODELS
# ============================================================================
# EPOCH: 1 - DEPLOYMENT PLANNING
# STATUS: Core model - Release templates
# PURPOSE: Persisted template record and the job's reference to it
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: TemplateModel, Template
# DEPENDENCIES: pydantic
# ============================================================================
"""
Template Models

Key concept:
- TemplateModel = RECORD (what one release version persisted for a template)
- Template = REFERENCE (a job's use of a named template from a release)

A Template is created from the manifest with only its name and release.
Once the release version is known it is bound to its TemplateModel, which
supplies version, hashes, log patterns, package names and the property
definitions. Property resolution needs the bound model, which is why
templates are bound before a job's properties.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field

from core.errors import TemplateNotBound
from core.models.release import ReleaseVersion


class TemplateModel(BaseModel):
    """
    Template as persisted for one release version.

    properties is None for templates whose spec file has no `properties`
    section (the older declaration style), and a mapping of property name
    to definition otherwise. A definition may carry a `default`.
    """
    name: str = Field(..., min_length=1)
    version: str = Field(..., description="Template fingerprint/version")
    sha1: str = Field(..., description="Content hash of the template blob")
    blobstore_id: str = Field(..., description="Blob id of the template archive")
    package_names: List[str] = Field(
        default_factory=list,
        description="Packages this template depends on at run time"
    )
    logs: Optional[List[Dict[str, Any]]] = Field(
        default=None,
        description="Log file patterns exposed to the agent"
    )
    properties: Optional[Dict[str, Optional[Dict[str, Any]]]] = Field(
        default=None,
        description="Property definitions keyed by (dotted) property name"
    )

    model_config = {"frozen": True}


class Template(BaseModel):
    """
    A job's reference to one release template.

    Immutable: bind_model() returns a new, bound reference.
    """
    name: str = Field(..., min_length=1)
    release: Optional[ReleaseVersion] = None
    model: Optional[TemplateModel] = None

    model_config = {"frozen": True}

    def bind_model(self, model: TemplateModel) -> "Template":
        """Return a copy of this reference bound to its persisted model."""
        return self.model_copy(update={"model": model})

    @property
    def is_bound(self) -> bool:
        return self.model is not None

    def _bound_model(self) -> TemplateModel:
        if self.model is None:
            raise TemplateNotBound(f"Template `{self.name}' is not bound to a model")
        return self.model

    @property
    def version(self) -> str:
        return self._bound_model().version

    @property
    def sha1(self) -> str:
        return self._bound_model().sha1

    @property
    def blobstore_id(self) -> str:
        return self._bound_model().blobstore_id

    @property
    def logs(self) -> Optional[List[Dict[str, Any]]]:
        return self._bound_model().logs

    @property
    def properties(self) -> Optional[Dict[str, Optional[Dict[str, Any]]]]:
        return self._bound_model().properties

    @property
    def package_names(self) -> List[str]:
        return self._bound_model().package_names


__all__ = ["TemplateModel", "Template"]
