"""Data models for requests and validation results."""
