"""Core classification, configuration and logging for shufflepolicy."""
