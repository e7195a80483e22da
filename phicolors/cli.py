import argparse
import os

from .color import HSLColor, color_from_rgb, hex_to_rgb
from .contrast import DEFAULT_TARGET_RATIO
from .export import (
    create_html_preview,
    export_json,
    export_swatch_sheet,
    export_tokens,
    generate_contrast_report,
    palette_filename,
    print_color_map,
    print_palette,
)
from .palette import generate_palette, load_palette, resolve_palette
from .palette.extract import extract_base_color
from .palette.generator import DEFAULT_BASE, DEFAULT_COUNT, MAX_COMPLEMENTARY
from .palette.harmony import CURRENT, HARMONIES, NONE
from .theme import ROLES, assign_roles, override_role


def _number(value):
    number = float(value)
    return int(number) if number.is_integer() else number


def build_parser():
    parser = argparse.ArgumentParser(
        description="Generate golden-ratio color palettes and theme tokens from a base color"
    )
    parser.add_argument(
        "--hsl",
        nargs=3,
        type=_number,
        metavar=("H", "S", "L"),
        help=f"Base color as hue (0-360), saturation and lightness (0-100). "
        f"Default: {DEFAULT_BASE.h} {DEFAULT_BASE.s} {DEFAULT_BASE.l}",
    )
    parser.add_argument("--hex", help="Base color as a hex string (#rgb or #rrggbb)")
    parser.add_argument(
        "--from-image",
        metavar="IMAGE",
        help="Use the dominant color of an image as the base color",
    )
    parser.add_argument(
        "--from-palette",
        metavar="JSON",
        help="Load a saved palette JSON file instead of generating one",
    )
    parser.add_argument(
        "--count", "-n",
        type=int,
        default=DEFAULT_COUNT,
        help=f"Number of complementary colors (0-{MAX_COMPLEMENTARY}, default: {DEFAULT_COUNT})",
    )
    parser.add_argument(
        "--no-auto-adjust",
        action="store_true",
        help="Keep complementary colors at the base lightness instead of correcting contrast",
    )
    parser.add_argument(
        "--target",
        type=float,
        default=DEFAULT_TARGET_RATIO,
        help=f"Target contrast ratio against the base (default: {DEFAULT_TARGET_RATIO})",
    )
    parser.add_argument(
        "--harmony",
        choices=(CURRENT, NONE) + HARMONIES,
        default=CURRENT,
        help="Map a harmony of the base color instead of the generated palette",
    )
    parser.add_argument(
        "--role",
        action="append",
        default=[],
        metavar="ROLE=HEX",
        help=f"Override a theme role, may be repeated. Roles: {', '.join(ROLES)}",
    )
    parser.add_argument(
        "--output", "-o",
        metavar="DIR",
        default=".",
        help="Output directory (default: current directory)",
    )
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    # Validate arguments
    sources = [
        s for s in (args.hsl, args.hex, args.from_image, args.from_palette) if s is not None
    ]
    if len(sources) > 1:
        parser.error("Use only one of --hsl, --hex, --from-image and --from-palette")
    if not 0 <= args.count <= MAX_COMPLEMENTARY:
        parser.error(f"--count must be between 0 and {MAX_COMPLEMENTARY}")
    if args.target < 1:
        parser.error("--target must be a contrast ratio of at least 1")

    if args.from_palette is not None:
        palette = _load_saved_palette(parser, args.from_palette)
    else:
        palette = generate_palette(
            _base_color(parser, args),
            args.count,
            auto_adjust=not args.no_auto_adjust,
            target_ratio=args.target,
        )

    active = resolve_palette(palette, args.harmony)
    color_map = assign_roles(active)
    for override in args.role:
        role, _, hex_value = override.partition("=")
        updated = override_role(color_map, role.strip(), hex_value.strip())
        if updated is None:
            parser.error(f"Invalid role override: {override}")
        color_map = updated

    _export(args, palette, active, color_map)


def _load_saved_palette(parser, palette_path):
    if not os.path.isfile(palette_path):
        parser.error(f"Palette file not found: {palette_path}")

    print(f"Loading palette: {palette_path}")
    palette = load_palette(palette_path)
    if palette is None:
        parser.error(f"Invalid palette file: {palette_path}")
    return palette


def _base_color(parser, args):
    if args.hsl is not None:
        return HSLColor(*args.hsl)

    if args.hex is not None:
        rgb = hex_to_rgb(args.hex)
        if rgb is None:
            parser.error(f"Invalid hex color: {args.hex}")
        return color_from_rgb(rgb).hsl

    if args.from_image is not None:
        if not os.path.isfile(args.from_image):
            parser.error(f"Image not found: {args.from_image}")
        print(f"Analyzing: {args.from_image}")
        return extract_base_color(args.from_image)

    return DEFAULT_BASE


def _export(args, palette, active, color_map):
    """Print the palette and write every export next to each other."""
    output_dir = args.output
    os.makedirs(output_dir, exist_ok=True)

    print_palette(active)
    print_color_map(color_map)
    report, issues = generate_contrast_report(active, color_map, args.target)
    print("\n" + report)

    base_hex = palette[0].hex.lstrip("#")
    json_path = os.path.join(output_dir, palette_filename(palette, "json"))
    png_path = os.path.join(output_dir, palette_filename(palette, "png"))
    html_path = os.path.join(output_dir, f"phicolors-preview-{base_hex}.html")
    report_path = os.path.join(output_dir, f"phicolors-report-{base_hex}.txt")

    export_json(palette, json_path)
    export_swatch_sheet(palette, png_path)
    token_paths = export_tokens(color_map, output_dir, f"phicolors-theme-{base_hex}")
    create_html_preview(active, color_map, html_path)
    with open(report_path, "w") as f:
        f.write(report)

    print("\n" + "=" * 60)
    print("Exported:")
    for path in [json_path, png_path, *token_paths, html_path, report_path]:
        print(f"  - {path}")
    if args.harmony not in (CURRENT, NONE):
        print(f"\nTheme mapped from the {args.harmony} harmony")
    print(f"Contrast issues: {len(issues)}")
    print("=" * 60)


if __name__ == "__main__":
    main()
