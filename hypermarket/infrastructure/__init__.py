"""Infrastructure - settings and logging setup."""
