# ============================================================================
# PACKAGE COLLISION DETECTION
# ============================================================================
# EPOCH: 1 - DEPLOYMENT PLANNING
# STATUS: Planner - Co-location validation
# PURPOSE: Reject jobs whose templates pull same-named packages from different releases
# LAST_REVIEWED: 19 OCT 2026
# ============================================================================
"""
Package Collision Detection

Co-located templates may come from different releases. An instance has one
package directory per package name, so two distinct packages with the same
name cannot be installed side by side. This is caught while binding the
plan, before anything is deployed.

Only the first two releases supplying a package are reported, in the order
they were first seen.
"""

from typing import Dict, Optional, Sequence

from core.errors import JobPackageCollision
from core.logging import get_logger, log_checkpoint
from core.models.release import ReleaseVersion
from core.models.template import Template

logger = get_logger(__name__)


def releases_by_package_name(
    templates: Sequence[Template],
) -> Dict[str, Dict[Optional[ReleaseVersion], None]]:
    """
    Map package name -> releases supplying it.

    Inner dicts are used as insertion-ordered sets.
    """
    result: Dict[str, Dict[Optional[ReleaseVersion], None]] = {}
    for template in templates:
        for package_name in template.package_names:
            result.setdefault(package_name, {})[template.release] = None
    return result


def _qualified(release: Optional[ReleaseVersion], name: str) -> str:
    return f"{release.name}/{name}" if release is not None else name


def _first_template_from(
    templates: Sequence[Template],
    release: Optional[ReleaseVersion],
    package_name: str,
) -> Optional[Template]:
    return next(
        (t for t in templates if t.release == release and package_name in t.package_names),
        None,
    )


def validate_package_names_do_not_collide(
    job_name: Optional[str],
    templates: Sequence[Template],
) -> None:
    """
    Raise if two releases supply a same-named package to this job.

    Raises:
        JobPackageCollision: naming the job, the first two releases, one
            template from each, and the package
    """
    for package_name, releases in releases_by_package_name(templates).items():
        if len(releases) < 2:
            continue

        release1, release2 = list(releases)[:2]
        template1 = _first_template_from(templates, release1, package_name)
        template2 = _first_template_from(templates, release2, package_name)

        logger.warning(
            f"Package `{package_name}' supplied by {len(releases)} releases in job `{job_name}'"
        )
        raise JobPackageCollision(
            f"Package name collision detected in job `{job_name}': "
            f"template `{_qualified(release1, template1.name)}' depends on package `{_qualified(release1, package_name)}', "
            f"template `{_qualified(release2, template2.name)}' depends on `{_qualified(release2, package_name)}'. "
            "Cannot currently collocate two packages with identical names from separate releases."
        )

    log_checkpoint("package_names_validated", {"job": job_name, "templates": len(templates)})


__all__ = [
    "releases_by_package_name",
    "validate_package_names_do_not_collide",
]
