"""Top-level package for the TN Academy exam toolkit.

Provides subpackages:
- tn_toolkit.core – data models, schema validation, serialization
- tn_toolkit.layout – deterministic exam-layout randomization and replay
- tn_toolkit.grading – attempt auto-scoring
- tn_toolkit.placement – placement recommendation
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        for line in pyproject.read_text(encoding="utf-8").splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.3.0"
                return line.split("=")[1].strip().strip('"').strip("'")

    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("tn-toolkit")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__copyright__ = "Copyright 2026 TN Academy. All rights reserved."
__all__: list[str] = ["__version__"]
