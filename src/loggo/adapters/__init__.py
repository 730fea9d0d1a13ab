"""Adapters – bridges that feed foreign event sources into a loggo Logger."""
