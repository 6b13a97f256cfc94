# ============================================================================
# JOB SPEC PROJECTION
# ============================================================================
# EPOCH: 1 - DEPLOYMENT PLANNING
# STATUS: Planner - Agent-facing projections
# PURPOSE: Build the job spec and package spec sent to each instance
# LAST_REVIEWED: 19 OCT 2026
# ============================================================================
"""
Job Spec Projection

The job spec lists every template bound to the job, in order. It also
carries the legacy single-template fields, mirrored from the first
template, because older agents only understand one template per job.

The package spec is limited to packages the templates actually depend on
at run time, so agents are never sent packages they will not use.
"""

import logging
from typing import Any, Dict, List, Mapping, Sequence

from core.errors import DirectorError
from core.models.compiled_package import CompiledPackage
from core.models.template import Template

logger = logging.getLogger(__name__)


def _require_templates(templates: Sequence[Template], what: str) -> None:
    if not templates:
        raise DirectorError(f"Can't build {what} before parsing job templates")


def template_entry(template: Template) -> Dict[str, Any]:
    """One `templates` entry; `logs` only when the template declares some."""
    entry = {
        "name": template.name,
        "version": template.version,
        "sha1": template.sha1,
        "blobstore_id": template.blobstore_id,
    }
    if template.logs:
        entry["logs"] = template.logs
    return entry


def build_job_spec(name: str, templates: Sequence[Template]) -> Dict[str, Any]:
    """
    Build the job spec for agents.

    Raises:
        DirectorError: no templates to source the legacy fields from
    """
    _require_templates(templates, "job spec")

    entries = [template_entry(template) for template in templates]
    first = entries[0]
    result: Dict[str, Any] = {
        "name": name,
        "templates": entries,
        # Legacy single-template fields
        "template": first["name"],
        "version": first["version"],
        "sha1": first["sha1"],
        "blobstore_id": first["blobstore_id"],
    }
    if "logs" in first:
        result["logs"] = first["logs"]

    return result


def run_time_dependencies(templates: Sequence[Template]) -> List[str]:
    """Package names the templates depend on, de-duplicated, first seen first."""
    names: Dict[str, None] = {}
    for template in templates:
        for package_name in template.package_names:
            names.setdefault(package_name, None)
    return list(names)


def build_package_spec(
    packages: Mapping[str, CompiledPackage],
    templates: Sequence[Template],
) -> Dict[str, Dict[str, Any]]:
    """
    Package specs keyed by name, for run-time dependencies only.

    Raises:
        DirectorError: no templates to compute dependencies from
    """
    _require_templates(templates, "package spec")

    dependencies = set(run_time_dependencies(templates))
    excluded = [name for name in packages if name not in dependencies]
    if excluded:
        logger.debug(f"Leaving unused packages out of package spec: {excluded}")

    return {
        name: package.spec
        for name, package in packages.items()
        if name in dependencies
    }


__all__ = [
    "template_entry",
    "build_job_spec",
    "run_time_dependencies",
    "build_package_spec",
]
