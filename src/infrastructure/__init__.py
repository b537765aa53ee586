"""Infrastructure: logging and wire serialization."""
