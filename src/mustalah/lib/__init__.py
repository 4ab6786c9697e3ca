"""Core library: markdown parsing, validation rules and shared utilities."""
