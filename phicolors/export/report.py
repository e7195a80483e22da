from ..color import contrast_ratio, format_hsl, format_rgb, hex_to_rgb
from ..contrast import AA_RATIO, AAA_RATIO
from .html_preview import TEXT_PAIRS


def _grade(ratio):
    if ratio >= AAA_RATIO:
        return "AAA"
    if ratio >= AA_RATIO:
        return "AA"
    return "-"


def generate_contrast_report(palette, color_map, target_ratio=AA_RATIO):
    """Generate a contrast report for a palette and its theme mapping.

    Returns:
        tuple: (report text, list of (name, hex, achieved, required) issues)
    """
    report = []
    report.append("=" * 70)
    report.append("CONTRAST REPORT")
    report.append("=" * 70)
    if palette:
        base = palette[0]
        report.append(f"Base:   {base.hex}  {format_hsl(base.hsl)}  {format_rgb(base.rgb)}")
    else:
        report.append("Base:   (empty palette)")
    report.append(f"Target: {target_ratio}:1")

    issues = []

    report.append(f"\nCOMPLEMENTARY vs BASE (min: {target_ratio}:1)")
    report.append("-" * 50)
    for i, color in enumerate(palette[1:], start=1):
        ratio = contrast_ratio(color.rgb, base.rgb)
        status = "✓" if ratio >= target_ratio else "✗ FAIL"
        if ratio < target_ratio:
            issues.append((f"color {i}", color.hex, ratio, target_ratio))
        report.append(
            f"  color {i:<8} {color.hex}  {ratio:5.2f}:1  {_grade(ratio):3}  {status}"
        )

    report.append(f"\nTHEME TEXT (min: {AA_RATIO}:1)")
    report.append("-" * 50)
    for fg_role, bg_role in TEXT_PAIRS:
        fg = color_map[fg_role]
        bg = color_map[bg_role]
        ratio = contrast_ratio(hex_to_rgb(fg), hex_to_rgb(bg))
        name = f"{fg_role} on {bg_role}"
        status = "✓" if ratio >= AA_RATIO else "✗ FAIL"
        if ratio < AA_RATIO:
            issues.append((name, fg, ratio, AA_RATIO))
        report.append(f"  {name:34} {fg} / {bg}  {ratio:5.2f}:1  {_grade(ratio):3}  {status}")

    report.append("\n" + "=" * 70)
    if issues:
        report.append(f"ISSUES FOUND: {len(issues)}")
        for name, hex_val, achieved, required in issues:
            report.append(f"  - {name}: {hex_val} has {achieved:.1f}:1, needs {required}:1")
    else:
        report.append("ALL COLORS PASS CONTRAST REQUIREMENTS ✓")
    report.append("=" * 70)

    return "\n".join(report), issues


def print_palette(palette):
    """Print palette info"""
    if not palette:
        print("\nEmpty palette")
        return
    base = palette[0]

    print("\n" + "=" * 60)
    print("PHICOLORS PALETTE")
    print("=" * 60)

    for i, color in enumerate(palette):
        name = "base" if i == 0 else f"color {i}"
        contrast = contrast_ratio(color.rgb, base.rgb)
        print(
            f"  {name:8} {color.hex}  {format_hsl(color.hsl):20} "
            f"{format_rgb(color.rgb):18} (contrast: {contrast:.1f}:1)"
        )


def print_color_map(color_map):
    print("\nTHEME ROLES:")
    for role, hex_value in color_map.items():
        print(f"  {role:18} {hex_value}")
