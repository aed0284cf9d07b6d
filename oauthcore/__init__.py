"""OAuth 2.0 building blocks: constants, errors, models, token generators, redirect and permission checks."""

__version__ = "0.1.0"

__all__ = ["access", "constants", "errors", "generates", "models", "permission", "redirect"]