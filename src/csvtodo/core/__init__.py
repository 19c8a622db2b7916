"""Core domain, protocols and utilities for csvtodo."""
