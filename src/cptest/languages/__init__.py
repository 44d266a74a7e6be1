"""Supported languages and the commands that build and run them."""
from .catalog import LANGUAGES, Language, LanguageSpec, detect_language
from .toolchain import Toolchain

__all__ = [
    "LANGUAGES",
    "Language",
    "LanguageSpec",
    "Toolchain",
    "detect_language",
]
