"""KatlaSport warehouse management API."""
