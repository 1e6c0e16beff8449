"""Infrastructure layer - logging and factory registry."""
