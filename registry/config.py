"""Configuration settings for the Registry server."""

import os

from common.constants import DEFAULT_REGISTRY_PORT


DATABASE_PATH = os.environ.get("SCRIBE_DATABASE_PATH", "/app/data/registry.db")

REGISTRY_HOST = os.environ.get("SCRIBE_REGISTRY_HOST", "0.0.0.0")

REGISTRY_PORT = int(os.environ.get("SCRIBE_REGISTRY_PORT", str(DEFAULT_REGISTRY_PORT)))

# Hex address of the operator allowed to pause the registry. Recorded on first deployment.
OPERATOR_ADDRESS = os.environ.get("SCRIBE_OPERATOR_ADDRESS")
