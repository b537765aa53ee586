"""Base model building blocks."""
