"""API package containing the dependency helpers and versioned routes."""
