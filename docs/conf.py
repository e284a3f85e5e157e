"""Configuration file for the Sphinx documentation builder."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

project = 'Bells'
copyright = '2026'
release = '1.2'


# -- General configuration ---------------------------------------------------

extensions = [
    'sphinx.ext.todo',
    'sphinx.ext.autodoc',  # Core library for html generation from docstrings
    'sphinx_copybutton'
]

todo_include_todos = True

exclude_patterns = ['_build', 'Thumbs.db', '.DS_Store']

language = 'ru'


# -- Options for HTML output -------------------------------------------------

html_theme = 'sphinx_book_theme'
highlight_language = "python3"
