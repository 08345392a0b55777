"""Root conftest — shared test configuration."""

import os

# app.main reads settings at import time; never point tests at a real database
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///:memory:",
)
