"""Shared infrastructure: distance engine, configuration, logging."""
