"""
HTML fragments rendered on the server for the web client.
"""

from .renderer import render_comment_skeleton_list  # noqa: F401
