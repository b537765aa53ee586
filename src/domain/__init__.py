"""Model layer: declarations, hydration and polymorphic resolution."""
