"""Command line interface for ulid-uuid."""
