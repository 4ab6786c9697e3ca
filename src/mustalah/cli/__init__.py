"""Command-line interface for Mustalah."""
