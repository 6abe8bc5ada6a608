"""HTTP routes of the Flight Reports API, mounted under ``/api``."""
