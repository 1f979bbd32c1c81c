"""Shared test setup.

JWT_SECRET must be in the environment before app.config is imported.
"""

import os

os.environ.setdefault("JWT_SECRET", "test-secret")
