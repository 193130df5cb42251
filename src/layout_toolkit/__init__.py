"""Top-level package for the layout toolkit.

Provides subpackages:
- layout_toolkit.core – node and entity models, validation, errors, file helpers
- layout_toolkit.converter – flat document <-> entity model conversion
"""

def _get_version() -> str:
    """Get version from importlib.metadata (installed) or pyproject.toml (dev)."""
    from importlib.metadata import PackageNotFoundError, version as pkg_version
    from pathlib import Path

    try:
        return pkg_version("layout-toolkit")
    except PackageNotFoundError:
        pass

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        for line in pyproject.read_text(encoding="utf-8").splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.1.0"
                return line.split("=")[1].strip().strip('"').strip("'")

    return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
