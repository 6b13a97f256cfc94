# ============================================================================
# INSTANCE BINDING
# ============================================================================
# EPOCH: 1 - DEPLOYMENT PLANNING
# STATUS: Planner - VM and network binding
# PURPOSE: Trigger VM allocation, state sync and network reservations per instance
# LAST_REVIEWED: 19 OCT 2026
# ============================================================================
"""
Instance Binding

Runs once per deployment run, after the job's instances are known. The
allocation, sync and reservation work itself belongs to the instance and
network services; this module only drives them in the right order.

Reservations already marked reserved are skipped, so a binding pass that
failed part way can be run again without reserving twice. Reservation
errors are not caught here.
"""

from typing import Optional, Sequence

from core.logging import get_logger, log_checkpoint, log_context
from planner.interfaces import Deployment, Instance

logger = get_logger(__name__)


def instance_description(job_name: Optional[str], index: int) -> str:
    """Human-readable instance name used in reservation requests."""
    return f"`{job_name}/{index}'"


def bind_unallocated_vms(instances: Sequence[Instance]) -> None:
    """
    Allocate VMs and sync instance state, instance by instance.

    Allocation can assign a VM that is not persisted yet, so the sync for
    an instance always runs after its allocation.
    """
    for instance in instances:
        instance.bind_unallocated_vm()
        instance.sync_state_with_db()

    logger.debug(f"Bound VMs for {len(instances)} instances")


def bind_instance_networks(
    job_name: Optional[str],
    instances: Sequence[Instance],
    deployment: Deployment,
) -> int:
    """
    Reserve every unreserved network reservation of every instance.

    When the instance already has a VM, the new reservation is handed to
    it immediately.

    Returns:
        Number of reservations requested
    """
    requested = 0

    for instance in instances:
        description = instance_description(job_name, instance.index)
        with log_context(instance=f"{job_name}/{instance.index}"):
            for net_name, reservation in instance.network_reservations.items():
                if reservation.reserved:
                    logger.debug(f"Reservation on `{net_name}' already held, skipping")
                    continue

                network = deployment.network(net_name)
                network.reserve(reservation, description)
                requested += 1

                if instance.vm is not None:
                    instance.vm.use_reservation(reservation)

    log_checkpoint("networks_bound", {"job": job_name, "reservations": requested})
    return requested


__all__ = [
    "instance_description",
    "bind_unallocated_vms",
    "bind_instance_networks",
]
