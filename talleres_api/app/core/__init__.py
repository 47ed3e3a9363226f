"""Settings, logging, error handling and the in-memory store."""
