"""Infrastructure helpers shared across best modules."""
