#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for cli2md renderers.

Options are frozen dataclasses. Derive modified copies with
``create_updated`` rather than mutating an instance.
"""

from __future__ import annotations

from cli2md.options.base import BaseRendererOptions, CloneFrozenMixin
from cli2md.options.markdown import MarkdownRendererOptions

__all__ = [
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "MarkdownRendererOptions",
]
