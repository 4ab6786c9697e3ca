"""Pydantic models for terms, index artifacts, validation results and config."""
