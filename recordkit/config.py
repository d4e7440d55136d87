"""Environment-driven settings for recordkit.

Values are read once at import time, the same way the rest of the package
expects plain module constants.
"""

import os

# Format used when an export destination has no recognised suffix ("json" or "yaml")
EXPORT_FORMAT = os.environ.get("RECORDKIT_EXPORT_FORMAT", "json").lower()

# Root logger level for the CLI; --verbose overrides it with DEBUG
LOG_LEVEL = os.environ.get("RECORDKIT_LOG_LEVEL", "WARNING").upper()

# Default parent directory for generated project skeletons
SCAFFOLD_DIR = os.environ.get("RECORDKIT_SCAFFOLD_DIR", ".")
