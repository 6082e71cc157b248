"""Configuration: settings, constants and logging setup."""
