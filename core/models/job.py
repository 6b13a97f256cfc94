# ============================================================================
# JOB MODEL
# ============================================================================
# EPOCH: 1 - DEPLOYMENT PLANNING
# STATUS: Core model - Deployment job aggregate
# PURPOSE: One job of a deployment plan and its bindings
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: Job
# DEPENDENCIES: pydantic
# ============================================================================
"""
Job Model

A Job is one named unit of a deployment plan: one or more release templates
instantiated across a set of instances.

Lifecycle:
    1. Constructed empty by the deployment plan (no templates, no packages)
    2. Templates and compiled packages added as parsing/binding proceeds
    3. Templates bound to their models, then properties bound (once)
    4. Instances bound to VMs and networks (once per deployment run)
    5. spec() / package_spec() read by the instance update pipeline

The deployment and release are held as weak references: the plan owns the
job, not the other way round.
"""

import uuid
import weakref
from typing import Any, Callable, Dict, List, Mapping, Optional
from pydantic import BaseModel, Field, PrivateAttr

from core.config import get_defaults
from core.contracts import JobLifecycle, JobState
from core.errors import DirectorError
from core.logging import get_logger, log_checkpoint, log_context
from core.models.compiled_package import CompiledPackage
from core.models.disk_pool import DiskPool
from core.models.release import ReleaseVersion
from core.models.template import Template, TemplateModel
from planner import binding, collisions, legacy
from planner import properties as property_resolution
from planner import spec as spec_projection
from planner.interfaces import CompiledPackageSource, JobSpecParser

logger = get_logger(__name__)


def _default_lifecycle() -> JobLifecycle:
    return get_defaults().planner.lifecycle()


def _generate_id() -> str:
    return str(uuid.uuid4())


def _weak(obj: Any) -> Optional[weakref.ref]:
    return weakref.ref(obj) if obj is not None else None


class Job(BaseModel):
    """
    A deployment job - the aggregate root of one job's bindings.

    state and instance_states are validated on assignment, and
    instance_state() coerces what it reads, so it only ever returns a
    JobState member.
    """

    model_config = {"arbitrary_types_allowed": True, "validate_assignment": True}

    # Identity
    name: Optional[str] = None
    canonical_name: Optional[str] = None

    # Classification and desired state
    lifecycle: JobLifecycle = Field(default_factory=_default_lifecycle)
    state: JobState = Field(default=JobState.STARTED)
    instance_states: Dict[int, JobState] = Field(
        default_factory=dict,
        description="Per-instance state overrides, keyed by instance index"
    )

    # Configuration references
    resource_pool: Any = None
    persistent_disk_pool: Optional[DiskPool] = None
    default_network: Any = None
    update: Any = None

    # Owned
    templates: List[Template] = Field(default_factory=list)
    packages: Dict[str, CompiledPackage] = Field(default_factory=dict)

    # Referenced
    instances: List[Any] = Field(default_factory=list)
    unneeded_instances: List[Any] = Field(default_factory=list)

    # Properties
    all_properties: Optional[Dict[str, Any]] = Field(
        default=None,
        description="All properties available to the job (deployment-wide)"
    )
    properties: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Properties the job's templates need; set by bind_properties()"
    )

    _deployment_ref: Optional[weakref.ref] = PrivateAttr(default=None)
    _release_ref: Optional[weakref.ref] = PrivateAttr(default=None)
    _id_generator: Optional[Callable[[], str]] = PrivateAttr(default=None)

    def __init__(
        self,
        deployment: Any = None,
        id_generator: Optional[Callable[[], str]] = None,
        **data: Any,
    ):
        super().__init__(**data)
        self._deployment_ref = _weak(deployment)
        self._id_generator = id_generator

    # =========================================================================
    # CONSTRUCTION
    # =========================================================================

    @classmethod
    def parse(
        cls,
        deployment: Any,
        job_spec: Mapping[str, Any],
        parser_factory: Callable[..., JobSpecParser],
        event_log: Any = None,
        logger: Any = None,
    ) -> "Job":
        """Build a Job from its manifest section using an external parser."""
        parser = parser_factory(deployment, event_log, logger)
        return parser.parse(job_spec)

    @staticmethod
    def is_legacy_spec(job_spec: Mapping[str, Any]) -> bool:
        return legacy.is_legacy_spec(job_spec)

    @staticmethod
    def convert_from_legacy_spec(job_spec: Mapping[str, Any]) -> Dict[str, Any]:
        """Upgrade an agent-reported spec to the multi-template format."""
        return legacy.convert_from_legacy_spec(job_spec)

    # =========================================================================
    # BACK-REFERENCES
    # =========================================================================

    @property
    def deployment(self) -> Any:
        """Owning deployment plan, or None once it has been discarded."""
        return self._deployment_ref() if self._deployment_ref else None

    @property
    def release(self) -> Optional[ReleaseVersion]:
        return self._release_ref() if self._release_ref else None

    def bind_release(self, release: Optional[ReleaseVersion]) -> None:
        self._release_ref = _weak(release)

    # =========================================================================
    # BUILDER STEPS
    # =========================================================================

    def bind_template_models(self, models: Mapping[str, TemplateModel]) -> None:
        """
        Bind every template to its persisted model, keyed by template name.

        Raises:
            DirectorError: a template has no model
        """
        bound = []
        for template in self.templates:
            model = models.get(template.name)
            if model is None:
                raise DirectorError(
                    f"Job `{self.name}' template `{template.name}' has no model to bind to"
                )
            bound.append(template.bind_model(model))
        self.templates = bound

    def use_compiled_package(self, compiled_package_model: CompiledPackageSource) -> CompiledPackage:
        """Register a compiled package with this job, replacing one of the same name."""
        compiled_package = CompiledPackage(compiled_package_model)
        self.packages[compiled_package.name] = compiled_package
        logger.debug(f"Job `{self.name}' registered compiled package `{compiled_package.name}'")
        return compiled_package

    def use_persistent_disk(self, disk_size: int) -> DiskPool:
        """Translate a bare persistent disk size into a disk pool."""
        generate_id = self._id_generator or _generate_id
        disk_pool = DiskPool(name=generate_id(), disk_size=disk_size)
        self.persistent_disk_pool = disk_pool
        return disk_pool

    def set_instance_state(self, index: int, state: Any) -> None:
        self.instance_states = {**self.instance_states, index: JobState(state)}

    # =========================================================================
    # PROJECTIONS
    # =========================================================================

    def spec(self) -> Dict[str, Any]:
        """Job spec sent to every instance's agent."""
        return spec_projection.build_job_spec(self.name, self.templates)

    def package_spec(self) -> Dict[str, Dict[str, Any]]:
        """Package specs, indexed by name, for packages the templates run with."""
        return spec_projection.build_package_spec(self.packages, self.templates)

    def instance(self, index: int) -> Any:
        # Negative indices are out of range, not counted from the end
        if 0 <= index < len(self.instances):
            return self.instances[index]
        return None

    def instance_state(self, index: int) -> JobState:
        # In-place writes to instance_states bypass assignment validation
        return JobState(self.instance_states.get(index, self.state))

    def starts_on_deploy(self) -> bool:
        return self.lifecycle == JobLifecycle.SERVICE

    def can_run_as_errand(self) -> bool:
        return self.lifecycle == JobLifecycle.ERRAND

    # =========================================================================
    # BINDING
    # =========================================================================

    def filter_properties(self, collection: Optional[Mapping[str, Any]]) -> Any:
        """Properties required by the templates included in this job."""
        separator = get_defaults().planner.property_separator
        return property_resolution.filter_properties(self.name, self.templates, collection, separator)

    def bind_properties(self) -> Any:
        """
        Extract the properties this job needs.

        Decoupled from parsing because property definitions come from the
        template models, so templates must be bound first.
        """
        with log_context(job=self.name, operation="bind_properties"):
            self.properties = self.filter_properties(self.all_properties)
            log_checkpoint("properties_bound", {"templates": len(self.templates)})
        return self.properties

    def validate_package_names_do_not_collide(self) -> None:
        with log_context(job=self.name, operation="validate_packages"):
            collisions.validate_package_names_do_not_collide(self.name, self.templates)

    def bind_unallocated_vms(self) -> None:
        with log_context(job=self.name, operation="bind_vms"):
            binding.bind_unallocated_vms(self.instances)

    def bind_instance_networks(self) -> int:
        """Reserve networks for every instance; returns reservations requested."""
        deployment = self.deployment
        if deployment is None:
            raise DirectorError(f"Job `{self.name}' has no deployment to reserve networks from")

        with log_context(job=self.name, operation="bind_networks"):
            return binding.bind_instance_networks(self.name, self.instances, deployment)


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = ["Job"]
