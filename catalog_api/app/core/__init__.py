"""Configuration, logging, database access and error types."""
