from mood_engine import COASTAL_AQUATIC, DEFAULT_MOOD, MoodSuggestion
from option_catalogs import (
    CATALOGS, LIGHTING_OPTIONS, SETTING_OPTIONS, apply_mood, default_options, resolve_option,
)


def test_resolve_option_by_label():
    assert resolve_option(LIGHTING_OPTIONS, 'Golden Hour') == 'warm, golden hour glow'


def test_resolve_option_falls_back_to_first_entry():
    assert resolve_option(SETTING_OPTIONS, 'Moon Base') == SETTING_OPTIONS[0].value


def test_catalog_labels_are_unique():
    for category, catalog in CATALOGS.items():
        labels = [option.label for option in catalog]
        assert len(labels) == len(set(labels)), category


def test_default_options():
    options = default_options()
    assert set(options) == set(CATALOGS)
    assert options['age_group'] == 'no person'
    assert options['content_style'] == 'ugc'
    assert options['lighting'] == LIGHTING_OPTIONS[0].value


def test_apply_mood_overwrites_mood_fields_only():
    before = default_options()
    before['camera'] = 'shot on a laptop webcam'
    snapshot = dict(before)

    after = apply_mood(before, COASTAL_AQUATIC)

    assert before == snapshot
    assert after['lighting'] == 'bright, direct outdoor sunlight'
    assert after['setting'] == 'a pool deck with lounge chairs and shimmering water'
    assert after['placement_style'] == 'dynamic splash of water or liquid around the product'
    assert after['placement_camera'] == 'shot on a macro lens for crisp product detail'
    assert after['camera'] == 'shot on a laptop webcam'


def test_apply_default_mood():
    options = apply_mood({}, DEFAULT_MOOD)
    assert options == {
        'lighting': 'soft, natural window light',
        'setting': 'a personalized home office desk',
        'placement_style': 'clean white sweep background with soft gradients',
        'placement_camera': 'captured on a tabletop product rig with perfect symmetry',
    }


def test_apply_mood_with_unknown_label_uses_first_entry():
    odd = MoodSuggestion('odd', 'Moonlight', 'Home Office', 'On-White Studio', 'Cinema Camera', '')
    assert apply_mood({}, odd)['lighting'] == LIGHTING_OPTIONS[0].value
