# Configuration file for the Sphinx documentation builder.

import os
import sys

sys.path.insert(0, os.path.abspath('../ros2_ws/src/minimal_publisher'))

# -- Project information -----------------------------------------------------

project = 'minimal_publisher'
copyright = '2026, Sachit Raheja'
author = 'Sachit Raheja'
release = '0.1.0'

# -- General configuration ---------------------------------------------------

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.napoleon',
    'sphinx.ext.viewcode',
    'sphinx.ext.autosummary',
    'sphinx.ext.doctest',
    'sphinx_copybutton',
]

# Only available inside a sourced ROS 2 environment
autodoc_mock_imports = [
    "rclpy",
    "std_msgs",
]

autosummary_generate = True
napoleon_numpy_docstring = True

templates_path = ['_templates']
exclude_patterns = ['_build', 'Thumbs.db', '.DS_Store']

# -- Options for HTML output -------------------------------------------------

html_theme = 'furo'
html_theme_options = {
    "navigation_with_keys": True,
}

copybutton_prompt_text = r'>>> |\.\.\. '
copybutton_prompt_is_regexp = True
