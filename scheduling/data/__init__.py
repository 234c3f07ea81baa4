"""
Data loading and parsing module.

This package handles catalog file I/O and record parsing.
"""

from .catalog import Catalog
from .loader import CatalogLoader
from .parser import CourseRecordParser

__all__ = ["Catalog", "CatalogLoader", "CourseRecordParser"]
