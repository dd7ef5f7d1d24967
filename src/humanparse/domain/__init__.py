"""Domain layer — value types, calendar math, and literal parsers.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
