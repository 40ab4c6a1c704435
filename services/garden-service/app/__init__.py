"""Garden Console plant catalog service."""
