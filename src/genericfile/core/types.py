"""Core type definitions."""

from typing import NewType

# Normalized path string (e.g., "/public/reports", "s3://bucket/key")
# Distinct from raw user input, which may still need parsing
SerializedPath = NewType("SerializedPath", str)
