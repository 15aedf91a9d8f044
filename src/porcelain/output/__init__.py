"""Reporters for decoded status summaries."""
