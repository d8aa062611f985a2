import re
from html import escape

from ..color import color_from_hex, contrast_ratio
from ..schemes.tables import ROLES

PLACEHOLDER_RE = re.compile(r"\{(\w+)\}")

HTML_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <title>{title} - Theme Preview</title>
    <style>
        * { margin: 0; padding: 0; box-sizing: border-box; }
        body {
            font-family: 'SF Mono', 'Fira Code', monospace;
            background: {bg};
            color: {fg};
            padding: 40px;
            min-height: 100vh;
        }
        h1 { margin-bottom: 10px; font-weight: 400; }
        .theme-badge {
            display: inline-block;
            padding: 4px 12px;
            border-radius: 4px;
            font-size: 12px;
            margin-bottom: 30px;
            background: {selection};
            color: {fg};
        }
        h2 {
            margin: 30px 0 15px 0;
            font-weight: 400;
            font-size: 14px;
            text-transform: uppercase;
            letter-spacing: 2px;
        }
        .palette-section {
            display: flex;
            flex-wrap: wrap;
            gap: 15px;
            margin-bottom: 20px;
        }
        .color-card {
            width: 160px;
            border-radius: 8px;
            overflow: hidden;
            background: {selection};
        }
        .color-swatch {
            height: 80px;
            display: flex;
            align-items: center;
            justify-content: center;
            font-size: 14px;
            font-weight: 500;
        }
        .color-info {
            padding: 12px;
            font-size: 11px;
        }
        .color-name {
            font-weight: 600;
            margin-bottom: 4px;
        }
        .color-hex {
            opacity: 0.7;
        }
        .terminal-grid {
            display: grid;
            grid-template-columns: repeat(8, 1fr);
            gap: 10px;
        }
        .terminal-color {
            aspect-ratio: 1;
            border-radius: 6px;
            display: flex;
            flex-direction: column;
            align-items: center;
            justify-content: center;
            font-size: 11px;
            font-weight: 600;
        }
        .preview-box {
            border: 1px solid {selection};
            border-radius: 12px;
            padding: 25px;
            margin-top: 30px;
        }
        .preview-box h3 {
            margin-bottom: 15px;
            font-weight: 400;
        }
    </style>
</head>
<body>
    <h1>{title}</h1>
    <div class="theme-badge">{scheme_label}</div>

    <h2>Primary</h2>
    <div class="palette-section">
        {primary_cards}
    </div>

    <h2>Terminal Colors (0-15)</h2>
    <div class="terminal-grid">
        {terminal_colors}
    </div>

    <div class="preview-box">
        <h3>Terminal Preview</h3>
        <p style="color: {red}">red: Error output</p>
        <p style="color: {green}">green: Success / git additions</p>
        <p style="color: {yellow}">yellow: Warnings / strings</p>
        <p style="color: {blue}">blue: Info / directories</p>
        <p style="color: {magenta}">magenta: Keywords</p>
        <p style="color: {cyan}">cyan: Special</p>
    </div>
</body>
</html>"""


def create_html_preview(colors, output_path, name, scheme=None):
    """Create an HTML preview of a generated theme"""
    background = color_from_hex(colors["background"])

    def text_on(color):
        return "#ffffff" if color.luminance < 0.5 else "#000000"

    def make_card(key):
        color = color_from_hex(colors[key])
        return f"""<div class="color-card">
            <div class="color-swatch" style="background: {color.hex}; color: {text_on(color)}">Aa</div>
            <div class="color-info">
                <div class="color-name">{key}</div>
                <div class="color-hex">{color.hex}</div>
            </div>
        </div>"""

    def make_terminal_color(key):
        color = color_from_hex(colors[key])
        ratio = contrast_ratio(color.luminance, background.luminance)
        return (
            f'<div class="terminal-color" style="background: {color.hex}; '
            f'color: {text_on(color)}">{key}<span>{ratio:.1f}:1</span></div>'
        )

    terminal_grid = [make_terminal_color(role) for role in ROLES]
    terminal_grid += [make_terminal_color(f"bright_{role}") for role in ROLES]

    replacements = {
        "title": escape(name),
        "scheme_label": escape(f"{scheme} scheme" if scheme else "Generated"),
        "bg": colors["background"],
        "fg": colors["foreground"],
        "selection": colors["selection_background"],
        "primary_cards": "\n".join(
            make_card(k) for k in ("background", "foreground", "selection_background")
        ),
        "terminal_colors": "\n".join(terminal_grid),
    }
    for role in ROLES:
        replacements[role] = colors[role]

    # One pass, so substituted text is never scanned for placeholders again.
    html = PLACEHOLDER_RE.sub(
        lambda m: replacements.get(m.group(1), m.group(0)), HTML_TEMPLATE
    )

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(html)
