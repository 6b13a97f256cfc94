# ============================================================================
# BASE CONTRACTS & ENUMS
# ============================================================================
# EPOCH: 1 - DEPLOYMENT PLANNING
# STATUS: Foundation - Core enums for the job planner
# PURPOSE: Define lifecycle, state and property-schema enums
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: JobLifecycle, JobState, PropertySchemaStyle
# DEPENDENCIES: enum
# ============================================================================
"""
Base contracts for the deployment job planner.

These values cross boundaries:
- Manifest (the `lifecycle` and `state` keys of a job)
- Database (persisted instance state)
- Agent (the job spec sent to each node)
"""

from enum import Enum


# ============================================================================
# JOB ENUMS
# ============================================================================

class JobLifecycle(str, Enum):
    """
    How a job runs.

    SERVICE jobs are started on every deploy and kept running.
    ERRAND jobs are run on demand.
    """
    SERVICE = "service"
    ERRAND = "errand"


class JobState(str, Enum):
    """
    Desired state of a job (or one of its instances).

    STARTED, STOPPED and DETACHED are real states: they persist and
    reflect the target instance state.

    RECREATE and RESTART are virtual: both set the target instance
    state to STARTED and add a spec modifier downstream
    (recreate replaces the VM, restart bounces the processes).
    """
    STARTED = "started"
    STOPPED = "stopped"
    DETACHED = "detached"
    RECREATE = "recreate"
    RESTART = "restart"

    def is_virtual(self) -> bool:
        """Check if this state never persists."""
        return self in (JobState.RECREATE, JobState.RESTART)

    def persisted_state(self) -> "JobState":
        """State written to the database for this target state."""
        if self.is_virtual():
            return JobState.STARTED
        return self


class PropertySchemaStyle(str, Enum):
    """
    Property declaration style across the templates of one job.

    Declaration style is all-or-nothing per release version, so a job
    whose templates disagree is an authoring error.
    """
    UNSCHEMED = "unschemed"      # No template declares properties
    SCHEMED = "schemed"          # Every template declares properties
    CONFLICTING = "conflicting"  # Some do, some don't


VALID_LIFECYCLE_PROFILES = [lifecycle.value for lifecycle in JobLifecycle]
DEFAULT_LIFECYCLE_PROFILE = JobLifecycle.SERVICE.value
VALID_JOB_STATES = [state.value for state in JobState]


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "JobLifecycle",
    "JobState",
    "PropertySchemaStyle",
    "VALID_LIFECYCLE_PROFILES",
    "DEFAULT_LIFECYCLE_PROFILE",
    "VALID_JOB_STATES",
]
