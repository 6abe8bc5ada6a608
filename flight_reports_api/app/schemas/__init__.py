"""
Pydantic schema definitions for API payloads.

Flights and reports each define their own models.  The same models
are used for HTTP responses and for the JSON documents persisted on
disk, so the wire format and the file format never drift apart.
"""
