"""Shared infrastructure: config, storage providers, logging, CLI."""
