"""
Pytest configuration file.

Puts scripts/ and the repo root on sys.path so that 'import spellgen',
'import build_data' and 'import fetch_from_gsheets' work without installing.
"""
import sys
from pathlib import Path

repo_root = Path(__file__).parent.parent
for p in (repo_root, repo_root / "scripts"):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))
