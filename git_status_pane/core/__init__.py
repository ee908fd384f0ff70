"""Core status pane assembly."""

from .status_builder import StatusBuilder, create_status_section_rows, create_log_section_rows

__all__ = ["StatusBuilder", "create_status_section_rows", "create_log_section_rows"]
