"""Pytest configuration: add the plugin directory to sys.path."""

import sys
import os

# lets the suite run from a plain checkout, without `pip install -e .`
plugin_dir = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
    "ortho-quad",
)
sys.path.insert(0, plugin_dir)
