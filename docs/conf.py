# Sphinx configuration for the phase-field material point API docs.

import os
import sys

sys.path.insert(0, os.path.abspath('../src'))

project = 'Phase-Field Material Point Framework'
copyright = '2024, GraFEA Team'
author = 'GraFEA Team'
release = '0.1.0'
version = '0.1.0'

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.autosummary',
    'sphinx.ext.napoleon',
    'sphinx.ext.mathjax',
    'sphinx.ext.intersphinx',
]

autosummary_generate = True

# Google style Args/Returns
napoleon_google_docstring = True
napoleon_numpy_docstring = False
napoleon_include_init_with_doc = True

autodoc_default_options = {
    'members': True,
    'member-order': 'bysource',
    'show-inheritance': True,
}
autodoc_typehints = 'description'
autodoc_mock_imports = ['numpy', 'scipy', 'matplotlib']

intersphinx_mapping = {
    'python': ('https://docs.python.org/3', None),
    'numpy': ('https://numpy.org/doc/stable/', None),
    'scipy': ('https://docs.scipy.org/doc/scipy/', None),
}

exclude_patterns = ['_build']
master_doc = 'index'

html_theme = 'sphinx_rtd_theme'
