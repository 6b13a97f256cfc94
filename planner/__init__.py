# ============================================================================
# PLANNER
# ============================================================================
# EPOCH: 1 - DEPLOYMENT PLANNING
# STATUS: Core - Job binding algorithms
# PURPOSE: Spec projection, property resolution, collision checks, binding
# LAST_REVIEWED: 19 OCT 2026
# ============================================================================
"""
Planner Components

- spec: job spec and package spec projections
- legacy: single-template spec upgrade
- properties: property filtering with declared defaults
- collisions: cross-release package name checks
- binding: VM allocation and network reservation drivers
- interfaces: collaborator protocols

The functions here are stateless; the Job aggregate holds the state and
delegates to them.
"""

from planner.legacy import is_legacy_spec, convert_from_legacy_spec
from planner.spec import (
    template_entry,
    build_job_spec,
    run_time_dependencies,
    build_package_spec,
)
from planner.properties import (
    lookup_property,
    copy_property,
    classify_property_style,
    extract_template_properties,
    filter_properties,
)
from planner.collisions import (
    releases_by_package_name,
    validate_package_names_do_not_collide,
)
from planner.binding import (
    instance_description,
    bind_unallocated_vms,
    bind_instance_networks,
)

__all__ = [
    # Legacy
    "is_legacy_spec",
    "convert_from_legacy_spec",
    # Spec
    "template_entry",
    "build_job_spec",
    "run_time_dependencies",
    "build_package_spec",
    # Properties
    "lookup_property",
    "copy_property",
    "classify_property_style",
    "extract_template_properties",
    "filter_properties",
    # Collisions
    "releases_by_package_name",
    "validate_package_names_do_not_collide",
    # Binding
    "instance_description",
    "bind_unallocated_vms",
    "bind_instance_networks",
]
