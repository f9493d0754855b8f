# Configuration file for the Sphinx documentation builder.
# https://www.sphinx-doc.org/en/master/usage/configuration.html

project = 'PyMatrix'
copyright = '2026, SGCX'
author = 'Hai-Shuo'
version = '0.1.0'
release = '0.1.0'

# -- General configuration ---------------------------------------------------

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.napoleon',
    'sphinx.ext.doctest',
    'sphinx.ext.intersphinx',
]

# Docstrings use Google style (Args/Returns/Raises)
napoleon_google_docstrings = True
napoleon_numpy_docstrings = False

# Autodoc settings
autodoc_member_order = 'bysource'
autodoc_typehints = 'description'

# Doctest examples in docstrings assume Matrix is in scope
doctest_global_setup = 'from pymatrix import Matrix, convert\nfrom pymatrix.linalg import *'

exclude_patterns = ['_build', 'DESIGN.md', 'SPEC_FULL.md', 'spec.md']

# -- Options for HTML output -------------------------------------------------

html_theme = 'alabaster'
html_title = 'PyMatrix API Reference'

# -- Intersphinx configuration -----------------------------------------------

intersphinx_mapping = {
    'python': ('https://docs.python.org/3', None),
    'numpy': ('https://numpy.org/doc/stable/', None),
}
