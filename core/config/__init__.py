# ============================================================================
# CONFIGURATION MODULE
# ============================================================================
# EPOCH: 1 - DEPLOYMENT PLANNING
# STATUS: Core - Configuration and defaults
# PURPOSE: Centralized configuration management
# LAST_REVIEWED: 19 OCT 2026
# ============================================================================
"""
Configuration Module

Provides centralized configuration and defaults for the job planner.
"""

from core.config.defaults import (
    PlannerDefaults,
    LoggingDefaults,
    Defaults,
    get_defaults,
    reset_defaults,
)

__all__ = [
    "PlannerDefaults",
    "LoggingDefaults",
    "Defaults",
    "get_defaults",
    "reset_defaults",
]
