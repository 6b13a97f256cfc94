# ============================================================================
# COLLABORATOR INTERFACES
# ============================================================================
# EPOCH: 1 - DEPLOYMENT PLANNING
# STATUS: Planner - External contracts
# PURPOSE: Structural types for the services the planner calls into
# LAST_REVIEWED: 19 OCT 2026
# ============================================================================
"""
Collaborator Interfaces

The planner triggers work in services it does not own: network reservation,
VM allocation, state sync with the database, manifest parsing. These
protocols describe only the surface the planner uses.
"""

from typing import Any, Dict, Mapping, Optional, Protocol


class NetworkReservation(Protocol):
    reserved: bool


class VM(Protocol):
    def use_reservation(self, reservation: NetworkReservation) -> None: ...


class Network(Protocol):
    def reserve(self, reservation: NetworkReservation, description: str) -> None:
        """Reserve capacity; raises when the network is full or the reservation is invalid."""
        ...


class Deployment(Protocol):
    name: str

    def network(self, name: str) -> Network: ...


class Instance(Protocol):
    index: int
    vm: Optional[VM]
    network_reservations: Dict[str, NetworkReservation]

    def bind_unallocated_vm(self) -> None: ...

    def sync_state_with_db(self) -> None: ...


class CompiledPackageSource(Protocol):
    name: str
    spec: Mapping[str, Any]


class JobSpecParser(Protocol):
    def parse(self, job_spec: Mapping[str, Any]) -> Any: ...


__all__ = [
    "NetworkReservation",
    "VM",
    "Network",
    "Deployment",
    "Instance",
    "CompiledPackageSource",
    "JobSpecParser",
]
