"""Oracle Cloud Infrastructure service models."""
