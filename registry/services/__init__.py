"""Service layer: access gate, record registry and their deployment."""

from registry.services.access_gate import AccessGate
from registry.services.record_registry import RecordRegistry
from registry.services.deployment import deploy_registry

__all__ = [
    "AccessGate",
    "RecordRegistry",
    "deploy_registry",
]
