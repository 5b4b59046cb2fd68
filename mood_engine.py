#!/usr/bin/env python3
"""
Map a palette to one scene "mood" via ordered heuristic rules.

Palette hex colors are converted to HSL and summarized (average saturation,
average lightness, circular mean hue, most saturated sample). The rules in
MOOD_RULES are checked top to bottom and the first match wins; lightness
rules come before hue rules so a very dark blue reads as moody, not coastal.

Every label in a MoodSuggestion is a label in the matching option catalog
(see option_catalogs.py).
"""

from dataclasses import dataclass
from typing import Callable, NamedTuple, Optional, Sequence

import numpy as np
from scipy.stats import circmean

from color_utils import HSL, hex_to_hsl


# =============================================================================
# Constants
# =============================================================================

DARK_LIGHTNESS = 0.30  # avg lightness below this is moody
BRIGHT_LIGHTNESS = 0.78  # avg lightness above this (and desaturated) is airy
CHROMATIC_SATURATION = 0.25  # Below this, hue carries no reliable signal

# Hue bands in degrees (inclusive)
COASTAL_HUES = (190, 250)
BOTANICAL_HUES = (90, 150)
SUNSET_HUE_MAX = 40  # Red wraps around: <= 40 or >= 330
SUNSET_HUE_MIN = 330
EARTHY_HUES = (50, 80)


# =============================================================================
# Data
# =============================================================================

@dataclass(frozen=True)
class MoodSuggestion:
    """A fixed bundle of catalog labels plus a prompt cue."""
    name: str
    lighting: str
    setting: str
    placement_style: str
    placement_camera: str
    prompt_cue: str


@dataclass(frozen=True)
class ColorStatistics:
    """Aggregate HSL statistics over one palette."""
    avg_saturation: float
    avg_lightness: float
    mean_hue: float  # Circular mean, 0-360
    most_saturated: HSL
    primary_hue: float  # Hue used for rule matching
    samples: tuple  # HSL per parsed palette entry


class MoodRule(NamedTuple):
    name: str
    predicate: Callable[[ColorStatistics], bool]
    suggestion: MoodSuggestion


DEFAULT_MOOD = MoodSuggestion(
    name='balanced studio vibes',
    lighting='Natural Light',
    setting='Home Office',
    placement_style='On-White Studio',
    placement_camera='Product Tabletop Rig',
    prompt_cue='Keep the look balanced and true to life with soft, neutral studio tones.',
)

MOODY_EDITORIAL = MoodSuggestion(
    name='moody editorial luxe',
    lighting='Mood Lighting',
    setting='Boutique Hotel',
    placement_style='Luxury Editorial',
    placement_camera='Cinema Camera',
    prompt_cue='Lean into deep shadows and rich contrast for a dramatic, high-end editorial mood.',
)

AIRY_MINIMALIST = MoodSuggestion(
    name='airy minimalist',
    lighting='Overcast',
    setting='Bathroom',
    placement_style='Acrylic Blocks',
    placement_camera='Overhead Rig',
    prompt_cue='Keep the frame bright and airy with pale, desaturated tones and plenty of negative space.',
)

COASTAL_AQUATIC = MoodSuggestion(
    name='coastal & aquatic',
    lighting='Sunny Day',
    setting='Poolside',
    placement_style='Splash Shot',
    placement_camera='Macro Lens',
    prompt_cue='Bring in cool blue and aqua accents with a fresh, waterside feel.',
)

BOTANICAL_LIFESTYLE = MoodSuggestion(
    name='botanical lifestyle',
    lighting='Natural Light',
    setting='Garden Party',
    placement_style='Nature Elements',
    placement_camera='Overhead Rig',
    prompt_cue='Surround the product with lush greenery and organic textures.',
)

SUNSET_GLAMOUR = MoodSuggestion(
    name='sunset glamour',
    lighting='Golden Hour',
    setting='Rooftop',
    placement_style='Luxury Editorial',
    placement_camera='Studio Strobe Setup',
    prompt_cue='Wash the scene in warm sunset pinks and reds with a glamorous glow.',
)

EARTHY_DAYLIGHT = MoodSuggestion(
    name='earthy daylight',
    lighting='Sunny Day',
    setting='Farmer’s Market',
    placement_style='Lifestyle Flatlay',
    placement_camera='Overhead Rig',
    prompt_cue='Use warm golden daylight and earthy, sun-dried textures.',
)


# =============================================================================
# Statistics
# =============================================================================

def parse_palette(palette: Sequence[str]) -> list[HSL]:
    """Convert palette entries to HSL, dropping any that don't parse."""
    samples = []
    for hex_color in palette:
        hsl = hex_to_hsl(hex_color)
        if hsl is not None:
            samples.append(hsl)
    return samples


def circular_mean_hue(hues: Sequence[float]) -> float:
    """Mean of hue angles by unit-vector summation, normalized to [0, 360)."""
    return float(circmean(np.asarray(hues, dtype=np.float64), high=360, low=0)) % 360.0


def compute_color_statistics(palette: Sequence[str]) -> Optional[ColorStatistics]:
    """
    Summarize a palette for rule matching.

    Returns:
        ColorStatistics, or None when no entry parses as a color.
    """
    samples = parse_palette(palette)
    if not samples:
        return None

    avg_saturation = sum(s.s for s in samples) / len(samples)
    avg_lightness = sum(s.l for s in samples) / len(samples)
    mean_hue = circular_mean_hue([s.h for s in samples])

    # max() keeps the first of equal saturations
    most_saturated = max(samples, key=lambda s: s.s)
    if most_saturated.s > CHROMATIC_SATURATION:
        primary_hue = most_saturated.h
    else:
        primary_hue = mean_hue

    return ColorStatistics(
        avg_saturation=avg_saturation,
        avg_lightness=avg_lightness,
        mean_hue=mean_hue,
        most_saturated=most_saturated,
        primary_hue=primary_hue,
        samples=tuple(samples),
    )


# =============================================================================
# Rules
# =============================================================================

def _in_band(hue: float, band: tuple) -> bool:
    return band[0] <= hue <= band[1]


def _is_chromatic(stats: ColorStatistics) -> bool:
    return stats.avg_saturation > CHROMATIC_SATURATION


def is_dark(stats: ColorStatistics) -> bool:
    return stats.avg_lightness < DARK_LIGHTNESS


def is_bright_and_muted(stats: ColorStatistics) -> bool:
    return stats.avg_lightness > BRIGHT_LIGHTNESS and stats.avg_saturation < CHROMATIC_SATURATION


def is_blue(stats: ColorStatistics) -> bool:
    return _in_band(stats.primary_hue, COASTAL_HUES) and _is_chromatic(stats)


def is_green(stats: ColorStatistics) -> bool:
    return _in_band(stats.primary_hue, BOTANICAL_HUES) and _is_chromatic(stats)


def is_red(stats: ColorStatistics) -> bool:
    hue = stats.primary_hue
    return (hue <= SUNSET_HUE_MAX or hue >= SUNSET_HUE_MIN) and _is_chromatic(stats)


def is_yellow(stats: ColorStatistics) -> bool:
    return _in_band(stats.primary_hue, EARTHY_HUES) and _is_chromatic(stats)


MOOD_RULES = (
    MoodRule('dark', is_dark, MOODY_EDITORIAL),
    MoodRule('bright', is_bright_and_muted, AIRY_MINIMALIST),
    MoodRule('blue', is_blue, COASTAL_AQUATIC),
    MoodRule('green', is_green, BOTANICAL_LIFESTYLE),
    MoodRule('red', is_red, SUNSET_GLAMOUR),
    MoodRule('yellow', is_yellow, EARTHY_DAYLIGHT),
)


def match_mood(stats: ColorStatistics, rules: Sequence[MoodRule] = MOOD_RULES) -> MoodSuggestion:
    """Return the suggestion of the first rule that matches, else the default."""
    for rule in rules:
        if rule.predicate(stats):
            return rule.suggestion
    return DEFAULT_MOOD


def suggest_mood(palette: Sequence[str]) -> MoodSuggestion:
    """
    Pick a mood for a palette. Never raises.

    An empty palette, or one with no parseable colors, gives DEFAULT_MOOD.
    """
    stats = compute_color_statistics(palette)
    if stats is None:
        return DEFAULT_MOOD
    return match_mood(stats)


def describe_mood(suggestion: MoodSuggestion, palette: Sequence[str]) -> str:
    """One-line summary for display under the palette swatches."""
    if not palette:
        return (f"No usable colors found, so we kept the {suggestion.name} defaults: "
                f"{suggestion.lighting} in a {suggestion.setting} setting.")
    return (f"Detected a {suggestion.name} palette. Suggested {suggestion.lighting} lighting, "
            f"{suggestion.setting} setting, {suggestion.placement_style} styling "
            f"and a {suggestion.placement_camera} camera.")
