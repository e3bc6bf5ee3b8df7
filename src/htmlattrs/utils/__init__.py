"""Shared utilities for htmlattrs."""
