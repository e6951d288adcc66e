"""Cloud Source Repositories change events → Slack."""

__version__ = "0.1.0"
