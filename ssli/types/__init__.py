"""Value model and environment types for ssli."""
