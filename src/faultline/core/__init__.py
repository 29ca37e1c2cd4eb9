"""Core failure handling engine."""
