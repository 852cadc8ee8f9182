"""Data model: value types and constants."""
