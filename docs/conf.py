"""Sphinx configuration for xhtmlchardet documentation."""

import xhtmlchardet

project = "xhtmlchardet"
copyright = "2025, xhtmlchardet contributors"
author = "xhtmlchardet contributors"
release = xhtmlchardet.__version__
version = ".".join(release.split(".")[:2])

# api.rst is written with autodoc directives; code samples get a copy button.
extensions = [
    "sphinx.ext.autodoc",
    "sphinx_copybutton",
]

exclude_patterns = ["_build"]

html_theme = "furo"
html_title = f"xhtmlchardet {release}"

autodoc_member_order = "bysource"
autodoc_typehints = "description"
