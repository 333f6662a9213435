"""Core layer: result types, errors, configuration and DI container."""
