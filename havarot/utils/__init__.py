"""Helper modules: Hebrew character tables, correction passes and logging setup."""
