"""Top-level package for the Artwork Browser.

Provides subpackages:
- artwork_browser.core – immutable artwork and page models
- artwork_browser.api – paginated artwork API client
- artwork_browser.selection – cross-page selection controller
- artwork_browser.gui – PySide6 app
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            content = pyproject.read_text()
            for line in content.splitlines():
                if line.strip().startswith("version"):
                    # Parse: version = "0.1.0"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass

    try:
        from importlib.metadata import version as pkg_version, PackageNotFoundError
        return pkg_version("artwork-browser")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
