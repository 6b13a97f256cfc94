# ============================================================================
# PROPERTY RESOLUTION
# ============================================================================
# EPOCH: 1 - DEPLOYMENT PLANNING
# STATUS: Planner - Job property filtering
# PURPOSE: Reduce deployment-wide properties to what a job's templates declare
# LAST_REVIEWED: 19 OCT 2026
# ============================================================================
"""
Property Resolution

A deployment manifest carries one property tree for all jobs. Each job gets
the subset its templates declare, with declared defaults filling the gaps.

Declaration style is all-or-nothing per release version:
    UNSCHEMED   no template declares properties -> whole tree, unfiltered
    SCHEMED     every template declares         -> declared subset
    CONFLICTING some do, some don't             -> JobIncompatibleSpecs

Property names are dotted paths into nested mappings ("nats.port").
Templates are applied in order, so a later template's value for a
property replaces an earlier one.
"""

import copy
import logging
from typing import Any, Dict, Mapping, Optional, Sequence

from core.contracts import PropertySchemaStyle
from core.errors import DirectorError, JobIncompatibleSpecs
from core.models.template import Template

logger = logging.getLogger(__name__)


# ============================================================================
# DOTTED PATH HELPERS
# ============================================================================

def lookup_property(
    collection: Optional[Mapping[str, Any]],
    name: str,
    separator: str = ".",
) -> Any:
    """
    Value at dotted path `name`, or None.

    Returns None when a segment is missing or a non-mapping value is
    traversed before the last segment.
    """
    current: Any = collection
    for key in name.split(separator):
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
        if current is None:
            return None
    return current


def copy_property(
    dst: Dict[str, Any],
    src: Optional[Mapping[str, Any]],
    name: str,
    default: Any = None,
    separator: str = ".",
) -> None:
    """
    Copy the value at dotted path `name` from src into dst.

    Intermediate mappings are created in dst as needed. When src has no
    value for the path, `default` is written instead.
    """
    keys = name.split(separator)
    value = lookup_property(src, name, separator)

    dst_ref = dst
    for key in keys[:-1]:
        if not isinstance(dst_ref.get(key), dict):
            dst_ref[key] = {}
        dst_ref = dst_ref[key]

    dst_ref[keys[-1]] = copy.deepcopy(default if value is None else value)


# ============================================================================
# RESOLUTION
# ============================================================================

def classify_property_style(templates: Sequence[Template]) -> PropertySchemaStyle:
    """Classify how a set of templates declares properties."""
    declared = [template.properties is not None for template in templates]
    if not any(declared):
        return PropertySchemaStyle.UNSCHEMED
    if all(declared):
        return PropertySchemaStyle.SCHEMED
    return PropertySchemaStyle.CONFLICTING


def extract_template_properties(
    templates: Sequence[Template],
    collection: Optional[Mapping[str, Any]],
    separator: str = ".",
) -> Dict[str, Any]:
    """Copy every declared property (or its default) in template order."""
    result: Dict[str, Any] = {}

    for template in templates:
        for name, definition in (template.properties or {}).items():
            default = (definition or {}).get("default")
            copy_property(result, collection, name, default, separator)

    return result


def filter_properties(
    job_name: Optional[str],
    templates: Sequence[Template],
    collection: Optional[Mapping[str, Any]],
    separator: str = ".",
) -> Any:
    """
    Properties required by the templates of one job.

    Args:
        job_name: Job name, for error messages
        templates: Templates bound to their models
        collection: Deployment-wide property tree

    Returns:
        The collection itself (UNSCHEMED) or the declared subset (SCHEMED)

    Raises:
        DirectorError: templates have not been parsed yet
        JobIncompatibleSpecs: templates mix declaration styles
    """
    if not templates:
        raise DirectorError("Can't extract job properties before parsing job templates")

    style = classify_property_style(templates)
    logger.debug(f"Job `{job_name}' property style: {style.value}")

    if style is PropertySchemaStyle.UNSCHEMED:
        return collection

    if style is PropertySchemaStyle.SCHEMED:
        return extract_template_properties(templates, collection, separator)

    raise JobIncompatibleSpecs(
        f"Job `{job_name}' has specs with conflicting property definition styles between"
        " its job spec templates.  This may occur if colocating jobs, one of which has a spec file including"
        " `properties' and one which doesn't."
    )


__all__ = [
    "lookup_property",
    "copy_property",
    "classify_property_style",
    "extract_template_properties",
    "filter_properties",
]
