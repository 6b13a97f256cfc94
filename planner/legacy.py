# ============================================================================
# LEGACY JOB SPEC CONVERSION
# ============================================================================
# EPOCH: 1 - DEPLOYMENT PLANNING
# STATUS: Planner - Backward compatibility
# PURPOSE: Upgrade single-template job specs to the multi-template format
# LAST_REVIEWED: 19 OCT 2026
# ============================================================================
"""
Legacy Job Spec Conversion

Agents that predate template co-location report a job spec with a single
`template`/`version`/`sha1`/`blobstore_id` and no `templates` list.
Converting the reported spec lets the comparison against the desired spec
treat both shapes the same way.

An agent never runs more than one legacy-format template, so the
converted spec always has exactly one `templates` entry.
"""

from typing import Any, Dict, Mapping


def is_legacy_spec(job_spec: Mapping[str, Any]) -> bool:
    """A spec is legacy iff it has no `templates` key."""
    return "templates" not in job_spec


def convert_from_legacy_spec(job_spec: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Return job_spec in the multi-template format.

    New-format specs come back unchanged. The input mapping is never
    mutated, so converting the result again is a no-op.
    """
    if not is_legacy_spec(job_spec):
        return dict(job_spec)

    template = {
        "name": job_spec.get("template"),
        "version": job_spec.get("version"),
        "sha1": job_spec.get("sha1"),
        "blobstore_id": job_spec.get("blobstore_id"),
    }
    converted = dict(job_spec)
    converted["templates"] = [template]
    return converted


__all__ = ["is_legacy_spec", "convert_from_legacy_spec"]
