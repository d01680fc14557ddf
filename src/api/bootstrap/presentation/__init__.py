"""Bootstrap presentation layer."""
