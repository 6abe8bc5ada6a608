"""
Application package initializer.

The service is split into a few small pieces: ``core`` holds
configuration, logging, storage helpers and domain errors;
``schemas`` holds the pydantic models exchanged over HTTP and
written to disk; ``services`` owns the flight catalog and the report
store; ``api`` exposes the HTTP routes.  ``main`` assembles them.
"""
