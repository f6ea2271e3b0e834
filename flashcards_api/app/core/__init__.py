"""Configuration, database, security and HTTP plumbing."""
