# ============================================================================
# CONFIGURATION DEFAULTS
# ============================================================================
# EPOCH: 1 - DEPLOYMENT PLANNING
# STATUS: Core - Default configuration values
# PURPOSE: Centralized defaults for job planning and logging
# LAST_REVIEWED: 19 OCT 2026
# ============================================================================
"""
Configuration Defaults

Defaults for the job planner, overridable via environment variables.

Design:
- Immutable dataclasses for defaults
- Environment variable overrides
- Type-safe access
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from core.contracts import DEFAULT_LIFECYCLE_PROFILE, JobLifecycle


@dataclass(frozen=True)
class PlannerDefaults:
    """
    Defaults for job planning.

    default_lifecycle applies to jobs whose manifest omits `lifecycle`.
    property_separator splits property names into nested paths.
    """
    default_lifecycle: str = DEFAULT_LIFECYCLE_PROFILE
    property_separator: str = "."

    def lifecycle(self) -> JobLifecycle:
        """Default lifecycle as an enum member."""
        return JobLifecycle(self.default_lifecycle)

    @classmethod
    def from_env(cls) -> "PlannerDefaults":
        """Create from environment variables."""
        return cls(
            default_lifecycle=os.getenv("PLANNER_DEFAULT_LIFECYCLE", DEFAULT_LIFECYCLE_PROFILE),
            property_separator=os.getenv("PLANNER_PROPERTY_SEPARATOR", "."),
        )


@dataclass(frozen=True)
class LoggingDefaults:
    """Defaults for log output."""
    level: str = "INFO"
    json_output: bool = False

    @classmethod
    def from_env(cls) -> "LoggingDefaults":
        """Create from environment variables."""
        return cls(
            level=os.getenv("LOG_LEVEL", "INFO"),
            json_output=os.getenv("LOG_FORMAT", "").lower() == "json",
        )


# ============================================================================
# GLOBAL DEFAULTS INSTANCE
# ============================================================================

@dataclass
class Defaults:
    """Container for all default configurations."""
    planner: PlannerDefaults = field(default_factory=PlannerDefaults)
    logging: LoggingDefaults = field(default_factory=LoggingDefaults)

    @classmethod
    def from_env(cls) -> "Defaults":
        """Create all defaults from environment variables."""
        return cls(
            planner=PlannerDefaults.from_env(),
            logging=LoggingDefaults.from_env(),
        )


_defaults: Optional[Defaults] = None


def get_defaults() -> Defaults:
    """Get global defaults instance."""
    global _defaults
    if _defaults is None:
        _defaults = Defaults.from_env()
    return _defaults


def reset_defaults() -> None:
    """Reset defaults (for testing)."""
    global _defaults
    _defaults = None


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "PlannerDefaults",
    "LoggingDefaults",
    "Defaults",
    "get_defaults",
    "reset_defaults",
]
