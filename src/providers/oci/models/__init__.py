"""OCI response models, grouped by service."""
