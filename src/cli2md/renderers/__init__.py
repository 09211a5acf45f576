#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers turning command specification trees into documents."""

from cli2md.renderers.arguments import ArgumentFormatter
from cli2md.renderers.base import BaseRenderer
from cli2md.renderers.markdown import MarkdownRenderer, group_arguments, write_linked_pages

__all__ = [
    "ArgumentFormatter",
    "BaseRenderer",
    "MarkdownRenderer",
    "group_arguments",
    "write_linked_pages",
]
