"""Source-file loading and import resolution."""
