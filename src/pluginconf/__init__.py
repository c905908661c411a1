"""Versioned, file-backed plugin configuration."""
