"""Session presentation layer."""
