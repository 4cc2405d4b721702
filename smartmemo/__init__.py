"""SmartMemo backend: HTTP client commands for the SmartMemo desktop UI."""

__version__ = "0.1.0"
