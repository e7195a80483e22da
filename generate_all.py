#!/usr/bin/env python3
"""
Generate palettes and theme tokens for every image and saved palette.
Consolidates theme token files into out/themes/ folder.
"""

import argparse
import shutil
import subprocess
from pathlib import Path

TOKEN_SUFFIXES = (".css", ".scss", ".tokens.json")


def main():
    parser = argparse.ArgumentParser(
        description="Generate palettes and theme tokens from images and palette JSON files"
    )
    parser.add_argument(
        "--target",
        type=float,
        default=None,
        help="Override the contrast target for palettes generated from images",
    )
    parser.add_argument(
        "--harmony",
        default=None,
        help="Map every theme from this harmony instead of the generated palette",
    )
    args = parser.parse_args()

    root = Path(__file__).parent
    images_dir = root / "images"
    palettes_dir = root / "palettes"
    out_dir = root / "out"
    themes_dir = out_dir / "themes"

    # Create themes directory
    themes_dir.mkdir(parents=True, exist_ok=True)

    # Supported image extensions
    image_extensions = {".png", ".jpg", ".jpeg"}

    images = []
    if images_dir.exists():
        images = [f for f in images_dir.iterdir() if f.suffix.lower() in image_extensions]

    palettes = []
    if palettes_dir.exists():
        palettes = [f for f in palettes_dir.iterdir() if f.suffix.lower() == ".json"]

    if not images and not palettes:
        print(f"No images in {images_dir} or palettes in {palettes_dir}")
        return

    print(f"Found {len(images)} images and {len(palettes)} palettes to process\n")

    jobs = [(path, "--from-image") for path in sorted(images)]
    jobs += [(path, "--from-palette") for path in sorted(palettes)]

    for source_path, source_flag in jobs:
        name = source_path.stem
        name_out_dir = out_dir / name

        print(f"{'=' * 60}")
        print(f"Generating from {source_path.name}")
        print(f"{'=' * 60}")

        cmd = [
            "uv",
            "run",
            "phicolors",
            source_flag,
            str(source_path),
            "-o",
            str(name_out_dir),
        ]
        if args.target is not None and source_flag == "--from-image":
            cmd.extend(["--target", str(args.target)])
        if args.harmony is not None:
            cmd.extend(["--harmony", args.harmony])

        result = subprocess.run(cmd, cwd=root)

        if result.returncode != 0:
            print(f"Error generating {name}")
            continue

        _copy_tokens(name_out_dir, name, themes_dir)
        print()

    print(f"{'=' * 60}")
    print("Done! All theme tokens consolidated in:")
    print(f"  {themes_dir}")
    print(f"{'=' * 60}")


def _copy_tokens(name_out_dir, name, themes_dir):
    """Copy generated token files to the consolidated themes directory, renamed after the source."""
    for token_file in sorted(name_out_dir.glob("phicolors-theme-*")):
        for suffix in TOKEN_SUFFIXES:
            if token_file.name.endswith(suffix):
                target = themes_dir / f"{name}{suffix}"
                shutil.copy(token_file, target)
                print(f"Copied {token_file.name} to {target}")


if __name__ == "__main__":
    main()
