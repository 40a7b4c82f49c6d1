"""Domain modules for best."""
