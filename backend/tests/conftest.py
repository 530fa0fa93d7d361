"""Root conftest: shared test configuration."""

import os

# Human-readable logs in test output; demo records on unless a test opts out
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("SEED_DEMO_DATA", "true")
