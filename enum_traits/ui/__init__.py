"""Rendering adapter: enum fields as select/radio widget contexts."""
