#!/usr/bin/env python3
"""
Suggest moods for a folder of reference images.

Writes one HTML mood report per image plus an index.html that lines up
every image's palette and suggested mood, then prints how often each mood
was suggested.
"""

import argparse
import html as html_lib
import sys
from collections import Counter
from pathlib import Path

from analyze import MoodAnalysis, render_html, run_pipeline
from color_utils import text_color_for_background
from extract_palette import MAX_PALETTE_COLORS, QUANTIZE_STEP, SAMPLE_SIZE

IMAGE_EXTENSIONS = {'.jpg', '.jpeg', '.png', '.webp', '.gif', '.bmp'}


def find_images(directory: Path) -> list[Path]:
    """Image files directly inside directory, sorted by name."""
    return sorted(p for p in directory.iterdir()
                  if p.is_file() and p.suffix.lower() in IMAGE_EXTENSIONS)


def report_name(image_path: Path) -> str:
    return f"{image_path.stem}-mood.html"


def count_moods(results: list[tuple[Path, MoodAnalysis]]) -> Counter:
    """Number of images per suggested mood name."""
    return Counter(analysis.suggestion.name for _, analysis in results)


def render_index(results: list[tuple[Path, MoodAnalysis]],
                 failed: list[tuple[str, str]]) -> str:
    """Render an HTML index with one row per analyzed image."""
    esc = html_lib.escape
    lines = [
        '<!DOCTYPE html>',
        '<html>',
        '<head>',
        '<meta charset="utf-8">',
        '<title>Mood index</title>',
        '<style>',
        'body { font-family: -apple-system, BlinkMacSystemFont, sans-serif; max-width: 1100px; margin: 2rem auto; padding: 0 1rem; color: #222; }',
        'table { border-collapse: collapse; width: 100%; }',
        'td, th { padding: 0.4rem 0.75rem; text-align: left; border-bottom: 1px solid #eee; }',
        '.palette { display: flex; height: 28px; min-width: 240px; border-radius: 4px; overflow: hidden; }',
        '.swatch { display: flex; align-items: center; justify-content: center; font-family: monospace; font-size: 0.7rem; }',
        '.empty { color: #888; font-style: italic; }',
        '</style>',
        '</head>',
        '<body>',
        f'<h1>Mood index ({len(results)} images)</h1>',
        '<table>',
        '<tr><th>Image</th><th>Palette</th><th>Mood</th><th>Lighting</th><th>Setting</th></tr>',
    ]

    for image_path, analysis in results:
        suggestion = analysis.suggestion
        lines.append('<tr>')
        lines.append(f'  <td><a href="{esc(report_name(image_path))}">{esc(image_path.name)}</a></td>')
        if analysis.palette:
            lines.append('  <td><div class="palette">')
            for hex_color, share in zip(analysis.palette, analysis.coverage):
                text_color = text_color_for_background(hex_color)
                lines.append(f'    <div class="swatch" style="background:{hex_color}; color:{text_color}; '
                             f'flex:{max(5, share * 100):.1f}">{hex_color}</div>')
            lines.append('  </div></td>')
        else:
            lines.append('  <td class="empty">no opaque pixels</td>')
        lines.append(f'  <td>{esc(suggestion.name)}</td>')
        lines.append(f'  <td>{esc(suggestion.lighting)}</td>')
        lines.append(f'  <td>{esc(suggestion.setting)}</td>')
        lines.append('</tr>')
    lines.append('</table>')

    lines.append('<h2>Moods</h2>')
    lines.append('<ul>')
    for name, count in count_moods(results).most_common():
        lines.append(f'  <li>{esc(name)}: {count}</li>')
    lines.append('</ul>')

    if failed:
        lines.append('<h2>Failed</h2>')
        lines.append('<ul>')
        for name, error in failed:
            lines.append(f'  <li>{esc(name)}: {esc(error)}</li>')
        lines.append('</ul>')

    lines.append('</body>')
    lines.append('</html>')
    return '\n'.join(lines)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Suggest moods for a folder of reference images.'
    )
    parser.add_argument(
        '--input', '-i',
        required=True,
        help='Directory containing images to analyze'
    )
    parser.add_argument(
        '--output', '-o',
        required=True,
        help='Directory for the HTML reports and index.html'
    )
    parser.add_argument('--size', type=int, default=SAMPLE_SIZE,
                        help=f'Sampling surface side in pixels (default {SAMPLE_SIZE})')
    parser.add_argument('--step', type=int, default=QUANTIZE_STEP,
                        help=f'Quantization step per channel (default {QUANTIZE_STEP})')
    parser.add_argument('--colors', type=int, default=MAX_PALETTE_COLORS,
                        help=f'Maximum palette size (default {MAX_PALETTE_COLORS})')

    args = parser.parse_args(argv)

    input_dir = Path(args.input)
    output_dir = Path(args.output)

    if not input_dir.is_dir():
        print(f"Error: Input directory not found: {input_dir}", file=sys.stderr)
        sys.exit(2)

    images = find_images(input_dir)
    if not images:
        print(f"No images found in {input_dir}", file=sys.stderr)
        sys.exit(2)

    output_dir.mkdir(parents=True, exist_ok=True)

    total = len(images)
    results = []
    failed = []

    for i, image_path in enumerate(images, 1):
        try:
            analysis = run_pipeline(str(image_path), size=args.size, step=args.step,
                                    max_colors=args.colors)
            (output_dir / report_name(image_path)).write_text(
                render_html(analysis, str(image_path)), encoding='utf-8')
        except (OSError, ValueError) as e:
            error_msg = f"{type(e).__name__}: {e}"
            print(f"[{i}/{total}] {image_path.name} → ERROR: {error_msg}", file=sys.stderr)
            failed.append((image_path.name, error_msg))
            continue

        print(f"[{i}/{total}] {image_path.name} → {analysis.suggestion.name} "
              f"[{' '.join(analysis.palette) or 'no opaque pixels'}]")
        results.append((image_path, analysis))

    index_path = output_dir / 'index.html'
    index_path.write_text(render_index(results, failed), encoding='utf-8')

    # Summary
    print()
    print(f"Completed: {len(results)}/{total} succeeded")
    for name, count in count_moods(results).most_common():
        print(f"  {name}: {count}")
    print(f"Index: {index_path}")
    if failed:
        print(f"Failed ({len(failed)}):")
        for name, error in failed:
            print(f"  - {name}: {error}")
        sys.exit(1)


if __name__ == '__main__':
    main()
