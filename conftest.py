"""Global pytest configuration."""

import os
import tempfile

# Set DATABASE_URL for tests before any imports
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
# Relative tenant descriptors never land in the working tree
os.environ.setdefault("TENANT_STORE_DIR", tempfile.gettempdir())
