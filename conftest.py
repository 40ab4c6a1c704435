"""
Root conftest.py for the Garden Console project.

Makes each service's ``app`` package importable when tests are run from
the repository root without an editable install.
"""

import sys
from pathlib import Path


def pytest_configure(config):
    """
    Add every service directory to sys.path.

    Services each ship an ``app`` package, so only directories that
    contain one are added.
    """
    root_dir = Path(__file__).parent

    for service_path in sorted((root_dir / "services").iterdir()):
        if (service_path / "app").is_dir() and str(service_path) not in sys.path:
            sys.path.insert(0, str(service_path))
