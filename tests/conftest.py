"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports and points the
settings at SQLite before any application module is imported.
"""

import os
import sys
from pathlib import Path

# Must be set before app.config builds the global settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "testing"
os.environ["ACCOUNT_HOOK_SECRET"] = "test-hook-secret"
os.environ["GEMINI_API_KEY"] = "test-gemini-key"

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))
