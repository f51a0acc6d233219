"""Markup adapters over presentation view models."""
