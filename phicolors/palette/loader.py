import json
import math
from numbers import Real

from ..color import HSLColor, create_color
from .generator import MAX_COMPLEMENTARY


def _read_hsl(entry):
    """Return the HSLColor stored under entry["hsl"], or None if it is malformed."""
    if not isinstance(entry, dict):
        return None
    hsl = entry.get("hsl")
    if not isinstance(hsl, dict):
        return None

    values = []
    for key in ("h", "s", "l"):
        value = hsl.get(key)
        # bool is an int subclass but never a valid channel
        if isinstance(value, bool) or not isinstance(value, Real):
            return None
        # json.loads maps NaN, Infinity and overflowing literals to nan/inf
        try:
            if not math.isfinite(value):
                return None
        except OverflowError:
            return None
        values.append(value)
    return HSLColor(*values)


def parse_palette(data):
    """Rebuild a palette from its decoded JSON form.

    Colors are re-derived from their "hsl" objects; stored rgb/hex are ignored.

    Returns:
        list of FullColor, or None if the document is not a valid palette
    """
    if not isinstance(data, list) or not data:
        return None
    if len(data) - 1 > MAX_COMPLEMENTARY:
        return None

    palette = []
    for entry in data:
        hsl = _read_hsl(entry)
        if hsl is None:
            return None
        palette.append(create_color(hsl))
    return palette


def load_palette_json(text):
    """Parse a palette from a JSON string, returning None when it is malformed."""
    try:
        data = json.loads(text)
    except (TypeError, ValueError):
        return None
    return parse_palette(data)


def load_palette(json_path):
    """Load a palette JSON file.

    Args:
        json_path: Path to palette JSON file

    Returns:
        list of FullColor, or None if the file is not a valid palette
    """
    # Bytes go straight to json.loads so bad encodings surface as ValueError
    with open(json_path, "rb") as f:
        return load_palette_json(f.read())
