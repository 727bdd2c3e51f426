"""In-memory data model.

This module holds measures, areas, and the area collection,
with filter evaluation and text rendering helpers.
"""
