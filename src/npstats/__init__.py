"""npstats - task and tag statistics for NotePlan notes."""

__version__ = "1.8.1"
