"""
clickupcom - ClickUp from your terminal.

This CLI talks to the ClickUp REST API and covers:
- Teams, spaces, folders and lists
- Tasks (list, inspect, create, update, delete)
- Time tracking (entries, start/stop timer)
- Local configuration of the API key
"""

__version__ = "1.0.0"
__app_name__ = "clickupcom"
