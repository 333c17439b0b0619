"""Application entrypoints for LifePath."""
