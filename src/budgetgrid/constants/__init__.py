"""Static definitions shared across the package."""
