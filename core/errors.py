# ============================================================================
# ERROR TAXONOMY
# ============================================================================
# EPOCH: 1 - DEPLOYMENT PLANNING
# STATUS: Foundation - Planner exceptions
# PURPOSE: Named errors raised while binding a job spec
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: DirectorError, TemplateNotBound, JobIncompatibleSpecs, JobPackageCollision
# ============================================================================
"""
Error classes for the job planner.

All of these are fatal to the current deployment plan construction and are
raised at the point of detection. Nothing here is retried; the caller decides
whether to abort the plan or keep reporting errors for other jobs.

- DirectorError: director-internal fault (a precondition was violated)
- JobIncompatibleSpecs: user-facing, templates mix property styles
- JobPackageCollision: user-facing, two releases supply the same package

Network reservation failures are raised by the network collaborator and
propagate unchanged.
"""


class DirectorError(Exception):
    """
    Base exception for the planner.

    Raised directly for precondition violations, e.g. asking for a job
    spec before any template has been parsed.
    """
    pass


class TemplateNotBound(DirectorError):
    """A model-backed template attribute was read before binding."""
    pass


class JobIncompatibleSpecs(DirectorError):
    """
    Co-located templates disagree on property declaration style.

    Commonly caused by co-locating jobs from releases with different
    spec file conventions.
    """
    pass


class JobPackageCollision(DirectorError):
    """Two releases supply a same-named package to one job."""
    pass


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "DirectorError",
    "TemplateNotBound",
    "JobIncompatibleSpecs",
    "JobPackageCollision",
]
