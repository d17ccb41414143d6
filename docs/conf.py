"""Sphinx configuration for the hostlist-resolver API reference."""

import sys
from importlib.metadata import PackageNotFoundError, version as _dist_version
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

try:
    release = _dist_version("hostlist-resolver")
except PackageNotFoundError:
    release = "0.1.0"
version = ".".join(release.split(".")[:2])

project = "hostlist-resolver"
author = "hostlist-resolver developers"

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.intersphinx",
    "sphinx.ext.napoleon",
    "sphinx_autodoc_typehints",
]

# Docstrings use the NumPy "Parameters / Returns / Raises" layout.
napoleon_google_docstring = False
napoleon_use_rtype = False

# psutil is only needed at runtime; aiohttp is imported lazily already.
autodoc_mock_imports = ["psutil"]
autodoc_member_order = "bysource"
autodoc_default_options = {"members": True, "undoc-members": False}
typehints_fully_qualified = False

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "aiohttp": ("https://docs.aiohttp.org/en/stable", None),
    "psutil": ("https://psutil.readthedocs.io/en/latest", None),
}

exclude_patterns = ["_build"]
html_theme = "alabaster"
html_theme_options = {"description": "DNS or static host lists to peer addresses"}
