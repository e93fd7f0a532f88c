"""
Server-rendered HTML fragments (Jinja2).

Fragments are static markup swapped into the web client while real data
loads; they take no request input.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape


TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"

COMMENT_SKELETON_ROWS = 3
PULSE_CLASSES = "animate-pulse rounded-full bg-white/10"


@lru_cache(maxsize=1)
def get_environment() -> Environment:
    """Shared Jinja2 environment; templates are cached after first load."""
    return Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=select_autoescape(["html"]),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )


# PUBLIC_INTERFACE
def render_comment_skeleton_list() -> str:
    """
    Render the loading placeholder for a comment thread.

    Three rows, each shaped like a comment: avatar circle, two header bars,
    two body lines and two action-bar bars.
    """
    template = get_environment().get_template("comments/skeleton_list.html")
    return template.render(rows=COMMENT_SKELETON_ROWS, pulse=PULSE_CLASSES)
