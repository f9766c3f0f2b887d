from .theme import generate_zed_theme

__all__ = ["generate_zed_theme"]
