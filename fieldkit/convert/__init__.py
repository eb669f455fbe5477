"""Conversion helpers shared by the scalar field types."""
