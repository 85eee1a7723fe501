"""Core configuration, database, security and observability."""
