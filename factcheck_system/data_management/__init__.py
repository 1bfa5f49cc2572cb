"""Data models for content analysis results."""
