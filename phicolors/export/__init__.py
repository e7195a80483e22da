from .html_preview import create_html_preview
from .image import export_swatch_sheet
from .json_export import export_json, palette_filename
from .report import generate_contrast_report, print_color_map, print_palette
from .tokens import export_tokens

__all__ = [
    "create_html_preview",
    "export_swatch_sheet",
    "export_json",
    "palette_filename",
    "generate_contrast_report",
    "print_color_map",
    "print_palette",
    "export_tokens",
]
