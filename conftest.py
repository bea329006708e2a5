"""
Root conftest.py for the todo service repository.

Puts the service directory on sys.path so tests can import the ``app``
package without installing it first.
"""

import sys
from pathlib import Path

SERVICE_DIR = Path(__file__).parent / "services" / "todo-service"


def pytest_configure(config):
    """
    Configure pytest to add the service directory to sys.path.

    Skipped when it is already there (e.g. after ``pip install -e .``).
    """
    service_path = str(SERVICE_DIR)
    if service_path not in sys.path:
        sys.path.insert(0, service_path)
