"""Configuration layer — settings, config file discovery, and logging setup."""
