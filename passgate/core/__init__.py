"""Core package: configuration, constants, errors, result types and container."""
