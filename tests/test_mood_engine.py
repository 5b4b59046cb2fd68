import pytest

from color_utils import HSL
from mood_engine import (
    AIRY_MINIMALIST, BOTANICAL_LIFESTYLE, COASTAL_AQUATIC, DEFAULT_MOOD, EARTHY_DAYLIGHT,
    MOOD_RULES, MOODY_EDITORIAL, SUNSET_GLAMOUR, ColorStatistics, circular_mean_hue,
    compute_color_statistics, describe_mood, is_blue, match_mood, suggest_mood,
)
from option_catalogs import CATALOGS, MOOD_FIELDS


def make_stats(lightness, saturation, hue):
    sample = HSL(hue, saturation, lightness)
    return ColorStatistics(
        avg_saturation=saturation,
        avg_lightness=lightness,
        mean_hue=hue,
        most_saturated=sample,
        primary_hue=hue,
        samples=(sample,),
    )


def hue_distance(a, b):
    diff = abs(a - b) % 360
    return min(diff, 360 - diff)


def test_default_bundle_labels():
    assert DEFAULT_MOOD.name == 'balanced studio vibes'
    assert DEFAULT_MOOD.lighting == 'Natural Light'
    assert DEFAULT_MOOD.setting == 'Home Office'
    assert DEFAULT_MOOD.placement_style == 'On-White Studio'
    assert DEFAULT_MOOD.placement_camera == 'Product Tabletop Rig'


@pytest.mark.parametrize('palette', [[], ['nope'], ['#12', '#GGGGGG', ''], ['##0000FF', '#  #0000FF']])
def test_unusable_palette_falls_back_to_default(palette):
    assert compute_color_statistics(palette) is None
    assert suggest_mood(palette) == DEFAULT_MOOD


def test_malformed_entries_are_skipped():
    stats = compute_color_statistics(['zzz', '#0000FF', '#12'])
    assert len(stats.samples) == 1
    assert suggest_mood(['zzz', '#0000FF']) == COASTAL_AQUATIC


def test_circular_mean_wraps_around_zero():
    assert hue_distance(circular_mean_hue([350, 10]), 0) < 1e-6
    assert circular_mean_hue([80, 100]) == pytest.approx(90)


def test_circular_mean_is_normalized():
    for hues in ([350, 340], [359.9, 0.05], [181, 179], [270]):
        mean = circular_mean_hue(hues)
        assert 0 <= mean < 360


def test_palette_hue_average_is_circular():
    # hsl(350, 80%, 50%) and hsl(10, 80%, 50%)
    palette = ['#E61A3C', '#E63C1A']
    stats = compute_color_statistics(palette)

    assert hue_distance(stats.mean_hue, 0) < 1e-6
    # Equal saturation: the first entry is the most saturated
    assert stats.most_saturated == stats.samples[0]
    assert stats.primary_hue == pytest.approx(350)
    assert suggest_mood(palette) == SUNSET_GLAMOUR


def test_statistics_averages():
    stats = compute_color_statistics(['#000000', '#FFFFFF'])
    assert stats.avg_lightness == pytest.approx(0.5)
    assert stats.avg_saturation == 0


def test_primary_hue_falls_back_to_mean_for_muted_palettes():
    stats = compute_color_statistics(['#808080', '#8A7F7F'])
    assert stats.most_saturated.s <= 0.25
    assert stats.primary_hue == stats.mean_hue


def test_primary_hue_uses_most_saturated_sample():
    stats = compute_color_statistics(['#808080', '#0000FF', '#FF0000'])
    assert stats.most_saturated.s == pytest.approx(1.0)
    assert stats.primary_hue == pytest.approx(240)


def test_darkness_wins_over_blue_hue():
    stats = make_stats(lightness=0.2, saturation=0.5, hue=210)
    assert is_blue(stats)
    assert match_mood(stats) == MOODY_EDITORIAL


@pytest.mark.parametrize('lightness,saturation,hue,expected', [
    (0.29, 0.0, 0, MOODY_EDITORIAL),
    (0.30, 0.5, 120, BOTANICAL_LIFESTYLE),
    (0.80, 0.1, 0, AIRY_MINIMALIST),
    (0.78, 0.1, 0, DEFAULT_MOOD),
    (0.80, 0.25, 0, DEFAULT_MOOD),
    (0.78, 0.25, 210, DEFAULT_MOOD),
    (0.5, 0.5, 190, COASTAL_AQUATIC),
    (0.5, 0.5, 250, COASTAL_AQUATIC),
    (0.5, 0.5, 189.5, DEFAULT_MOOD),
    (0.5, 0.5, 90, BOTANICAL_LIFESTYLE),
    (0.5, 0.5, 150, BOTANICAL_LIFESTYLE),
    (0.5, 0.5, 160, DEFAULT_MOOD),
    (0.5, 0.5, 40, SUNSET_GLAMOUR),
    (0.5, 0.5, 330, SUNSET_GLAMOUR),
    (0.5, 0.5, 0, SUNSET_GLAMOUR),
    (0.5, 0.5, 45, DEFAULT_MOOD),
    (0.5, 0.5, 50, EARTHY_DAYLIGHT),
    (0.5, 0.5, 80, EARTHY_DAYLIGHT),
    (0.5, 0.5, 85, DEFAULT_MOOD),
    (0.5, 0.5, 300, DEFAULT_MOOD),
    (0.5, 0.25, 210, DEFAULT_MOOD),
])
def test_rule_table(lightness, saturation, hue, expected):
    assert match_mood(make_stats(lightness, saturation, hue)) == expected


@pytest.mark.parametrize('palette,expected', [
    (['#000080'], MOODY_EDITORIAL),
    (['#FFFFFF', '#F0F0F0'], AIRY_MINIMALIST),
    (['#0000FF'], COASTAL_AQUATIC),
    (['#00FF00'], BOTANICAL_LIFESTYLE),
    (['#FF3366'], SUNSET_GLAMOUR),
    (['#FFFF00'], EARTHY_DAYLIGHT),
    (['#808080'], DEFAULT_MOOD),
])
def test_suggest_mood_from_palettes(palette, expected):
    assert suggest_mood(palette) == expected


def test_rules_are_ordered_lightness_first():
    assert [rule.name for rule in MOOD_RULES] == ['dark', 'bright', 'blue', 'green', 'red', 'yellow']


def test_every_suggestion_label_is_in_its_catalog():
    suggestions = [rule.suggestion for rule in MOOD_RULES] + [DEFAULT_MOOD]
    for suggestion in suggestions:
        for category in MOOD_FIELDS:
            labels = [option.label for option in CATALOGS[category]]
            assert getattr(suggestion, category) in labels, (suggestion.name, category)


def test_describe_mood():
    assert 'coastal & aquatic' in describe_mood(COASTAL_AQUATIC, ['#0000FF'])
    assert 'No usable colors' in describe_mood(DEFAULT_MOOD, [])
