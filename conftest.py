"""Pytest configuration — ensures the project root (api.py, main.py) is importable."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))
