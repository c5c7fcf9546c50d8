"""TaskDesk CLI - local task tracking and article browsing."""

__version__ = "0.1.0"
