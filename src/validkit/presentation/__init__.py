"""Presentation layer: fluent validation API."""
