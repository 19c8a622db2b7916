"""Application services and settings."""
