"""
Pytest configuration for the songbook examples test suite.

This module puts the project root on the Python path so tests can import
``src.album`` and ``src.services`` without installing the project.
"""
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))
