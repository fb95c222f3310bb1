import sys
from pathlib import Path

# chartpilot relies on PEP 604 unions and pydantic v2.
if sys.version_info < (3, 10):
    raise RuntimeError(f"chartpilot tests need Python 3.10+, found {sys.version.split()[0]}")

SRC_DIR = str(Path(__file__).resolve().parent / "src")

# Lets a plain checkout run the suite without `pip install -e .`.
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)
