"""Click commands for the mustalah CLI."""
