"""Service model families built on the hydration core."""
