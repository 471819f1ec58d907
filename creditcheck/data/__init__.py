"""
Data loading and record handling.

This package handles all file I/O, schema validation at the load
boundary, and the pure helpers that edit a record collection.
"""

from .loader import DataLoader
from .records import bulk_update_status, remove_record, update_record

__all__ = ["DataLoader", "bulk_update_status", "remove_record", "update_record"]
