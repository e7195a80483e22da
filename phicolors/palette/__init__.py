from .generator import generate_hues, generate_palette
from .harmony import generate_harmony, resolve_palette
from .loader import load_palette, load_palette_json

__all__ = [
    "generate_hues",
    "generate_palette",
    "generate_harmony",
    "resolve_palette",
    "load_palette",
    "load_palette_json",
]
