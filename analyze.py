#!/usr/bin/env python3
"""
Mood analysis pipeline for a reference image.

Extracts a palette, derives a mood suggestion and produces prose and HTML
reports. Three stages: Palette Extraction → Mood Matching → Render
"""

import html as html_lib
from dataclasses import dataclass, field
from typing import Optional

from PIL import Image, ImageDraw

from color_utils import text_color_for_background
from extract_palette import (
    ALPHA_THRESHOLD, MAX_PALETTE_COLORS, QUANTIZE_STEP, SAMPLE_SIZE,
    ImageSource, extract_palette_counts,
)
from mood_engine import (
    DEFAULT_MOOD, ColorStatistics, MoodSuggestion,
    compute_color_statistics, describe_mood, match_mood,
)
from option_catalogs import MOOD_FIELDS, apply_mood, default_options
from prompt_builder import build_prompt


# =============================================================================
# Pipeline
# =============================================================================

@dataclass
class MoodAnalysis:
    """Everything derived from one reference image."""
    palette: list  # Hex strings, most frequent first
    counts: list  # Sampled pixel count per palette entry
    stats: Optional[ColorStatistics]  # None when the palette is empty
    suggestion: MoodSuggestion
    summary: str
    options: dict = field(default_factory=dict)  # Option state with the mood applied

    @property
    def coverage(self) -> list:
        total = sum(self.counts) or 1
        return [count / total for count in self.counts]


def run_pipeline(source: ImageSource,
                 size: int = SAMPLE_SIZE,
                 step: int = QUANTIZE_STEP,
                 max_colors: int = MAX_PALETTE_COLORS,
                 alpha_threshold: int = ALPHA_THRESHOLD) -> MoodAnalysis:
    """Run extraction and mood matching on a reference image.

    Raises:
        FileNotFoundError: If the image file doesn't exist
        DecodeError: If the image can't be decoded
    """
    # Stage 1: Palette Extraction
    ranked = extract_palette_counts(source, size, step, max_colors, alpha_threshold)
    palette = [hex_color for hex_color, _ in ranked]
    counts = [count for _, count in ranked]

    # Stage 2: Mood Matching
    stats = compute_color_statistics(palette)
    suggestion = match_mood(stats) if stats is not None else DEFAULT_MOOD

    return MoodAnalysis(
        palette=palette,
        counts=counts,
        stats=stats,
        suggestion=suggestion,
        summary=describe_mood(suggestion, palette),
        options=apply_mood(default_options(), suggestion),
    )


# =============================================================================
# Stage 3: Render
# =============================================================================

def render(analysis: MoodAnalysis) -> str:
    """Render a plain-text report."""
    lines = []
    suggestion = analysis.suggestion

    lines.append("PALETTE")
    if analysis.palette:
        for hex_color, share in zip(analysis.palette, analysis.coverage):
            lines.append(f"  {hex_color}  {share * 100:5.1f}%")
    else:
        lines.append("  (no opaque pixels)")

    if analysis.stats is not None:
        stats = analysis.stats
        lines.append("")
        lines.append("STATISTICS")
        lines.append(f"  Average lightness:  {stats.avg_lightness:.3f}")
        lines.append(f"  Average saturation: {stats.avg_saturation:.3f}")
        lines.append(f"  Mean hue:           {stats.mean_hue:.1f}°")
        lines.append(f"  Primary hue:        {stats.primary_hue:.1f}°")

    lines.append("")
    lines.append(f"MOOD: {suggestion.name}")
    for category in MOOD_FIELDS:
        label = getattr(suggestion, category)
        value = analysis.options.get(category, '')
        lines.append(f"  {category.replace('_', ' ').title()}: {label} ({value})")
    lines.append(f"  Prompt cue: {suggestion.prompt_cue}")

    lines.append("")
    lines.append(analysis.summary)
    return '\n'.join(lines)


def render_html(analysis: MoodAnalysis, image_path: str) -> str:
    """Render an HTML report with palette swatches and the suggested options."""
    esc = html_lib.escape
    suggestion = analysis.suggestion

    lines = [
        '<!DOCTYPE html>',
        '<html>',
        '<head>',
        '<meta charset="utf-8">',
        f'<title>Mood - {esc(str(image_path))}</title>',
        '<style>',
        'body { font-family: -apple-system, BlinkMacSystemFont, sans-serif; max-width: 900px; margin: 2rem auto; padding: 0 1rem; color: #222; }',
        '.palette-bar { display: flex; height: 80px; border-radius: 8px; overflow: hidden; margin: 1rem 0; }',
        '.swatch { display: flex; align-items: center; justify-content: center; font-family: monospace; font-size: 0.8rem; }',
        '.mood { background: #f4f1ff; border: 1px solid #d6ccff; border-radius: 8px; padding: 1rem; }',
        'table { border-collapse: collapse; margin-top: 1rem; }',
        'td { padding: 0.25rem 1rem 0.25rem 0; }',
        '.empty { color: #888; font-style: italic; }',
        '</style>',
        '</head>',
        '<body>',
        f'<h1>{esc(str(image_path))}</h1>',
        '<h2>Palette</h2>',
    ]

    if analysis.palette:
        lines.append('<div class="palette-bar">')
        for hex_color, share in zip(analysis.palette, analysis.coverage):
            width_pct = max(5, share * 100)  # min 5% for visibility
            text_color = text_color_for_background(hex_color)
            lines.append(f'  <div class="swatch" style="background:{hex_color}; color:{text_color}; '
                         f'flex:{width_pct:.1f}">{hex_color}</div>')
        lines.append('</div>')
    else:
        lines.append('<p class="empty">No opaque pixels found.</p>')

    lines.append('<h2>Mood</h2>')
    lines.append('<div class="mood">')
    lines.append(f'  <strong>{esc(suggestion.name)}</strong>')
    lines.append(f'  <p>{esc(analysis.summary)}</p>')
    lines.append('  <table>')
    for category in MOOD_FIELDS:
        label = getattr(suggestion, category)
        value = analysis.options.get(category, '')
        lines.append(f'    <tr><td>{esc(category.replace("_", " ").title())}</td>'
                     f'<td>{esc(label)}</td><td>{esc(value)}</td></tr>')
    lines.append('  </table>')
    lines.append(f'  <p><em>{esc(suggestion.prompt_cue)}</em></p>')
    lines.append('</div>')

    if analysis.stats is not None:
        stats = analysis.stats
        lines.append('<h2>Statistics</h2>')
        lines.append(f'<p>Lightness {stats.avg_lightness:.2f} · Saturation {stats.avg_saturation:.2f} · '
                     f'Mean hue {stats.mean_hue:.0f}° · Primary hue {stats.primary_hue:.0f}°</p>')

    lines.append('</body>')
    lines.append('</html>')
    return '\n'.join(lines)


def visualize_palette(analysis: MoodAnalysis, output_path: str) -> None:
    """
    Save a swatch strip image of the palette with coverage percentages.

    Args:
        analysis: Result of run_pipeline()
        output_path: Path to save the PNG
    """
    swatch_size = 80
    padding = 10
    text_height = 25
    cols = max(len(analysis.palette), 1)

    img_width = cols * (swatch_size + padding) + padding
    img_height = swatch_size + text_height + 2 * padding

    img = Image.new('RGB', (img_width, img_height), (240, 240, 240))
    draw = ImageDraw.Draw(img)

    for i, (hex_color, share) in enumerate(zip(analysis.palette, analysis.coverage)):
        x = padding + i * (swatch_size + padding)
        y = padding
        draw.rectangle([x, y, x + swatch_size, y + swatch_size], fill=hex_color)

        # Center text under swatch
        text = f"{share * 100:.1f}%"
        bbox = draw.textbbox((0, 0), text)
        text_width = bbox[2] - bbox[0]
        text_x = x + (swatch_size - text_width) // 2
        draw.text((text_x, y + swatch_size + 4), text, fill=(0, 0, 0))

    img.save(output_path)


def suggested_prompt(analysis: MoodAnalysis) -> str:
    """Generation prompt for the default options with this mood applied."""
    return build_prompt(analysis.options, analysis.suggestion.prompt_cue)


# =============================================================================
# CLI
# =============================================================================

def main(argv=None):
    import argparse
    import sys
    from pathlib import Path

    from extract_palette import DecodeError

    parser = argparse.ArgumentParser(
        description='Analyze a reference image and suggest a scene mood.'
    )
    parser.add_argument(
        '--input', '-i',
        required=True,
        help='Path to the image file'
    )
    parser.add_argument(
        '--output', '-o',
        nargs='?',
        const=True,
        default=None,
        help='Write HTML report. Optionally specify path, otherwise auto-names from input.'
    )
    parser.add_argument('--swatch', help='Write a PNG swatch strip to this path')
    parser.add_argument('--prompt', action='store_true',
                        help='Also print the generation prompt with the mood applied')
    parser.add_argument('--size', type=int, default=SAMPLE_SIZE,
                        help=f'Sampling surface side in pixels (default {SAMPLE_SIZE})')
    parser.add_argument('--step', type=int, default=QUANTIZE_STEP,
                        help=f'Quantization step per channel (default {QUANTIZE_STEP})')
    parser.add_argument('--colors', type=int, default=MAX_PALETTE_COLORS,
                        help=f'Maximum palette size (default {MAX_PALETTE_COLORS})')

    args = parser.parse_args(argv)
    image_path = Path(args.input)

    try:
        analysis = run_pipeline(str(image_path), size=args.size, step=args.step, max_colors=args.colors)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except DecodeError as e:
        print(f"Could not analyze reference: {e}", file=sys.stderr)
        sys.exit(1)
    except (OSError, ValueError) as e:
        print(f"Error analyzing image: {e}", file=sys.stderr)
        sys.exit(1)

    # Always print prose to terminal
    print(render(analysis))

    if args.prompt:
        print()
        print(suggested_prompt(analysis))

    try:
        if args.swatch:
            visualize_palette(analysis, args.swatch)
            print(f"\nWrote: {args.swatch}")

        if args.output:
            if args.output is True:
                output_path = image_path.with_name(f"{image_path.stem}-mood.html")
            else:
                output_path = Path(args.output)
            output_path.write_text(render_html(analysis, str(image_path)), encoding='utf-8')
            print(f"\nWrote: {output_path}")
    except OSError as e:
        print(f"Error writing output: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
