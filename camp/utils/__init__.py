"""Small runtime helpers shared across the service."""
