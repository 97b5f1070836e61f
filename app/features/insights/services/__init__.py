"""Services for the insights feature."""
