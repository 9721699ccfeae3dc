"""Root conftest: shared test configuration."""

import os

# Tests must not pick up a developer's .env overrides for these
os.environ.setdefault("API_TOKEN", "valid-token-example")
os.environ.setdefault("SEED_EXAMPLE_USERS", "false")
os.environ.setdefault("RECLAIM_USERNAMES", "false")
os.environ.setdefault("LOG_FORMAT", "text")
