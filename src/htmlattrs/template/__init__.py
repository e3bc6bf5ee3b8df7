"""Compiled template objects ready for rendering."""

from htmlattrs.template.core import Template

__all__ = ["Template"]
