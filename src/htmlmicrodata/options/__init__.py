#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for htmlmicrodata."""

from htmlmicrodata.options.base import CloneFrozenMixin
from htmlmicrodata.options.microdata import MicrodataOptions

__all__ = ["CloneFrozenMixin", "MicrodataOptions"]
