"""
Input scanning utilities.

This package discovers markdown articles and extracts their titles.
"""

from .scanner import extract_title, scan_directory

__all__ = ["extract_title", "scan_directory"]
