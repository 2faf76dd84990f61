"""Formatting core - layout, content preparation, rendering."""
