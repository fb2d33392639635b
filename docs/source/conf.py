"""Sphinx documentation configuration for intervalle."""

from __future__ import annotations

import sys
from pathlib import Path

# -- Project information -----------------------------------------------------

project = "intervalle"
copyright = "2026, intervalle contributors"
author = "intervalle contributors"

# -- General configuration ---------------------------------------------------

# src layout
REPO_ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(REPO_ROOT / "src"))

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
]

exclude_patterns: list[str] = []

autodoc_member_order = "bysource"
napoleon_google_docstring = True

# -- Options for HTML output -------------------------------------------------

html_theme = "furo"
