"""Registry V2 API operations."""
