import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from .color import ensure_palette_contrast
from .config import load_config
from .errors import ThemeGeneratorError
from .export import (
    create_html_preview,
    create_image_preview,
    create_theme_content,
    export_json,
    save_theme,
)
from .naming import generate_random_name, variant_prefix
from .randomness import default_source, seeded_source
from .report import generate_readability_report, print_palette
from .schemes import (
    SCHEME_DESCRIPTIONS,
    SCHEME_NAMES,
    generate_color_scheme_with_variant,
    resolve_scheme,
)

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="alacritty-theme-generator",
        description="Generate Alacritty color themes from procedural color schemes",
    )
    parser.add_argument(
        "--scheme", "-s",
        default=None,
        help="Color scheme (default: from config, else 'random'). See --list-schemes",
    )
    parser.add_argument(
        "--name", "-n",
        help="Theme name (default: random name derived from the scheme)",
    )
    parser.add_argument("--dark", action="store_true", help="Generate dark variant")
    parser.add_argument("--light", action="store_true", help="Generate light variant")
    parser.add_argument(
        "--output", "-o",
        metavar="DIR",
        default=None,
        help="Output directory (default: themes_dir from config)",
    )
    parser.add_argument(
        "--min-contrast",
        type=float,
        default=None,
        help="Nudge foreground and terminal colors to this contrast ratio against the background",
    )
    parser.add_argument("--json", action="store_true", help="Also export palette JSON")
    parser.add_argument("--html", action="store_true", help="Also export an HTML preview")
    parser.add_argument("--png", action="store_true", help="Also export a PNG swatch preview")
    parser.add_argument(
        "--report", action="store_true", help="Print the readability report"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the generator for reproducible output",
    )
    parser.add_argument(
        "--list-schemes", action="store_true", help="List available schemes and exit"
    )
    parser.add_argument("--config", metavar="PATH", help="Path to settings JSON file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.list_schemes:
        _print_schemes()
        return

    # Validate arguments
    if args.dark and args.light:
        parser.error("cannot specify both --dark and --light")
    if args.min_contrast is not None and args.min_contrast < 1.0:
        parser.error("--min-contrast must be at least 1.0")

    try:
        _run_generate(args)
    except (ThemeGeneratorError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def _print_schemes():
    print("Color Schemes:\n")
    for name in SCHEME_NAMES:
        print(f"  {name:11} - {SCHEME_DESCRIPTIONS[name]}")


def _run_generate(args):
    """Generate one theme and write it plus any requested extras."""
    config = load_config(args.config)
    if args.output:
        config = replace(config, themes_dir=Path(args.output))
    logger.debug("settings: %s", config.to_dict())

    scheme = resolve_scheme(args.scheme or config.default_scheme)
    source = seeded_source(args.seed) if args.seed is not None else default_source()
    output_dir = Path(config.themes_dir)
    min_contrast = (
        args.min_contrast if args.min_contrast is not None else config.min_contrast
    )

    variant = "dark" if args.dark else "light" if args.light else None
    print(f"Generating {scheme} theme" + (f" ({variant} variant)" if variant else ""))

    colors = generate_color_scheme_with_variant(
        scheme, dark=args.dark, light=args.light, source=source
    )
    if min_contrast is not None:
        colors = ensure_palette_contrast(colors, min_contrast)

    name = args.name or generate_random_name(
        variant_prefix(scheme, dark=args.dark, light=args.light), source
    )

    output_dir.mkdir(parents=True, exist_ok=True)
    exported = []

    theme_path = save_theme(
        create_theme_content(colors, scheme, name), config.theme_path(name)
    )
    exported.append(theme_path)

    if args.json:
        json_path = output_dir / f"{name}.json"
        export_json(colors, json_path, scheme=scheme, name=name, variant=variant)
        exported.append(json_path)

    if args.html:
        html_path = output_dir / f"{name}.html"
        create_html_preview(colors, html_path, name, scheme=scheme)
        exported.append(html_path)

    if args.png:
        png_path = output_dir / f"{name}.png"
        create_image_preview(colors, png_path)
        exported.append(png_path)

    if args.verbose or args.report:
        print_palette(colors, name=name)
    if args.report:
        report, _ = generate_readability_report(
            colors, min_contrast=min_contrast or 4.5, name=name
        )
        print("\n" + report)

    print("\n" + "=" * 60)
    print(f"Generated theme: {name}")
    print("Exported:")
    for path in exported:
        print(f"  - {path}")
    print("=" * 60)
    logger.debug("exported %d files to %s", len(exported), output_dir)

    return theme_path


if __name__ == "__main__":
    main()
