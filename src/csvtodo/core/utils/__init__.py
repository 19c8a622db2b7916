"""Shared helpers for the core layer."""
