from .color import color_from_hex, contrast_ratio
from .schemes.tables import BRIGHT_ROLES, ROLES

DEFAULT_MIN_CONTRAST = 4.5


def generate_readability_report(colors, min_contrast=DEFAULT_MIN_CONTRAST, name=None):
    """Generate a readability report of every role against the background"""
    bg = color_from_hex(colors["background"])

    report = []
    report.append("=" * 70)
    report.append("READABILITY REPORT" + (f": {name}" if name else ""))
    report.append("=" * 70)
    report.append(
        f"Background:       {bg.hex} (L: {bg.hsl.l * 100:.1f}%, S: {bg.hsl.s * 100:.1f}%)"
    )
    report.append("")

    # Black roles sit next to the background by convention, so they are listed
    # but never counted as failures.
    categories = [
        ("FOREGROUND", ["foreground"]),
        ("TERMINAL BASE", list(ROLES)),
        ("TERMINAL BRIGHT", list(BRIGHT_ROLES)),
    ]

    issues = []

    for cat_name, keys in categories:
        report.append(f"\n{cat_name} (min: {min_contrast}:1)")
        report.append("-" * 50)
        for key in keys:
            if key not in colors:
                continue
            c = color_from_hex(colors[key])
            cr_bg = contrast_ratio(c.luminance, bg.luminance)
            exempt = key in ("black", "bright_black")

            if cr_bg >= min_contrast:
                status = "✓"
            elif exempt:
                status = "-"
            else:
                status = "✗ FAIL"
                issues.append((key, c.hex, cr_bg, min_contrast))

            report.append(f"  {key:16} {c.hex}  vs bg: {cr_bg:4.1f}:1  {status}")

    report.append("\n" + "=" * 70)
    if issues:
        report.append(f"ISSUES FOUND: {len(issues)}")
        for key, hex_val, achieved, required in issues:
            report.append(
                f"  - {key}: {hex_val} has {achieved:.1f}:1, needs {required}:1"
            )
    else:
        report.append("ALL COLORS PASS CONTRAST REQUIREMENTS ✓")
    report.append("=" * 70)

    return "\n".join(report), issues


def print_palette(colors, name=None):
    """Print palette info"""
    bg = color_from_hex(colors["background"])

    print("\n" + "=" * 60)
    print(f"THEME PALETTE{f': {name}' if name else ''}")
    print("=" * 60)

    categories = [
        ("PRIMARY", ["background", "foreground", "selection_background"]),
        ("TERMINAL (Normal)", list(ROLES)),
        ("TERMINAL (Bright)", list(BRIGHT_ROLES)),
    ]

    for cat_name, keys in categories:
        print(f"\n{cat_name}:")
        for key in keys:
            if key in colors:
                c = color_from_hex(colors[key])
                contrast = contrast_ratio(c.luminance, bg.luminance)
                print(f"  {key:20} {c.hex}  (contrast: {contrast:.1f}:1)")
