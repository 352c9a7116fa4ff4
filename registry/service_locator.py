"""Service locator for the deployed registry."""

from typing import Optional

from registry.services.record_registry import RecordRegistry

_record_registry: Optional[RecordRegistry] = None


def set_record_registry(registry: Optional[RecordRegistry]):
    """Set global record registry instance"""
    global _record_registry
    _record_registry = registry


def get_record_registry() -> RecordRegistry:
    """Get global record registry instance, deploying it on first use"""
    global _record_registry
    if _record_registry is None:
        from registry import config
        from registry.services.deployment import deploy_registry

        _record_registry = deploy_registry(config.OPERATOR_ADDRESS)
    return _record_registry
