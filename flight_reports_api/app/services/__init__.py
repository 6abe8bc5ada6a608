"""Service layer: the read-only flight catalog and the report store."""
