import os
import sys

sys.path.insert(0, os.path.abspath('../../src'))

project = 'anymonad'
copyright = '2026, anymonad contributors'
author = 'anymonad contributors'
version = ''
release = '0.1.0'
source_suffix = ['.rst', '.md']
master_doc = 'index'
extensions = ['myst_parser', 'sphinx.ext.autodoc', 'sphinx_autodoc_typehints', 'sphinx_rtd_theme']
html_theme = 'sphinx_rtd_theme'
