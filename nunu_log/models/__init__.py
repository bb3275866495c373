"""Application models package."""

from nunu_log.models.time_entry import ENTRY_TYPES, INPUT_METHODS, TimeEntry

__all__ = ["TimeEntry", "ENTRY_TYPES", "INPUT_METHODS"]
