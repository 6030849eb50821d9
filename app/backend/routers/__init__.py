"""
Routers package for FastAPI endpoints.

Organized by domain:
- comparison: Comparison table view, sorting, filtering and export
- upload: Batch upload and extraction
"""

from . import comparison, upload

__all__ = ["comparison", "upload"]
