"""Configuration, logging, storage and error primitives."""
