"""Day scaffolding layer.

This module creates per-day files and registers the day in the dispatch file.
It is the only layer that writes into the puzzle repository.
"""
