"""
Shared contracts configuration.
"""
import os

# Package settings
SERVICE_NAME = "flingoos-shared"
PACKAGE_VERSION = "0.1.0"

# JSON Schema metadata for exported contracts
SCHEMA_BASE_URI = os.getenv(
    "SCHEMA_BASE_URI",
    f"https://schemas.flingoos.com/shared/v{PACKAGE_VERSION}/",
)

# Usage logging
USAGE_LOGGING_ENABLED = os.getenv("USAGE_LOGGING_ENABLED", "true").lower() not in ("0", "false", "no")
DEFAULT_USAGE_SERVICE = os.getenv("USAGE_SERVICE", "admin-panel")
