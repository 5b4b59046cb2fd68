"""
Option catalogs for the mockup configurator.

Each catalog is an ordered list of Option(label, value): labels are shown to
the user and used by mood suggestions, values are the phrases that go into
the generation prompt.
"""

from typing import Mapping, NamedTuple, Sequence


class Option(NamedTuple):
    label: str
    value: str


CONTENT_STYLE_OPTIONS = [
    Option('UGC Lifestyle', 'ugc'),
    Option('Product Placement', 'product'),
]

PLACEMENT_STYLE_OPTIONS = [
    Option('Luxury Editorial', 'luxury editorial set with high-end props and reflections'),
    Option('On-White Studio', 'clean white sweep background with soft gradients'),
    Option('Splash Shot', 'dynamic splash of water or liquid around the product'),
    Option('Acrylic Blocks', 'stacked acrylic blocks and geometric props'),
    Option('Lifestyle Flatlay', 'styled flatlay with curated props and textures'),
    Option('Nature Elements', 'organic stones, leaves, and water droplets'),
]

PLACEMENT_CAMERA_OPTIONS = [
    Option('Cinema Camera', 'shot on a cinema camera with cinematic lighting'),
    Option('Macro Lens', 'shot on a macro lens for crisp product detail'),
    Option('Product Tabletop Rig', 'captured on a tabletop product rig with perfect symmetry'),
    Option('Overhead Rig', 'captured from an overhead rig for flatlay precision'),
    Option('Studio Strobe Setup', 'lit with studio strobes and softboxes for glossy highlights'),
]

LIGHTING_OPTIONS = [
    Option('Natural Light', 'soft, natural window light'),
    Option('Sunny Day', 'bright, direct outdoor sunlight'),
    Option('Golden Hour', 'warm, golden hour glow'),
    Option('Overcast', 'diffused, even light from a cloudy sky'),
    Option('Cozy Indoors', 'warm, ambient indoor lamplight'),
    Option('Ring Light', 'direct, flattering ring light, vlogger style'),
    Option('Mood Lighting', 'dim, moody, ambient lighting'),
    Option('Flash Photo', 'direct on-camera flash, creating a candid, party-like feel'),
]

SETTING_OPTIONS = [
    Option('Living Room', 'a cozy, lived-in living room'),
    Option('Kitchen', 'a bright, modern kitchen'),
    Option('Bedroom', 'a stylish, tidy bedroom'),
    Option('Bathroom', 'a clean, minimalist bathroom counter'),
    Option('Home Office', 'a personalized home office desk'),
    Option('Café', 'a trendy, bustling café'),
    Option('Outdoors', 'a natural, outdoor park or garden setting'),
    Option('In the Car', 'the interior of a car, casual and on-the-go'),
    Option('Beach', 'a sunny beach with sand, umbrellas, and ocean breeze'),
    Option('Boutique Hotel', 'a chic boutique hotel room or lobby'),
    Option('Poolside', 'a pool deck with lounge chairs and shimmering water'),
    Option('Garden Party', 'a lush backyard or botanical garden set up for entertaining'),
    Option('Rooftop', 'an urban rooftop terrace with skyline views'),
    Option('Wellness Spa', 'a serene spa setting with steam, plants, and soft towels'),
    Option('Farmer’s Market', 'an open-air market with fresh produce and rustic tables'),
    Option('Mountain Cabin', 'a woodsy cabin interior with natural textures'),
]

PRODUCT_MATERIAL_OPTIONS = [
    Option('Matte Plastic', 'matte plastic'),
    Option('Glossy Plastic', 'glossy plastic'),
    Option('Glass & Liquid', 'transparent glass, may contain liquid'),
    Option('Metal', 'reflective metal'),
    Option('Paper & Cardboard', 'textured paper or cardboard'),
]

ENVIRONMENT_ORDER_OPTIONS = [
    Option('Clean', 'clean, tidy, and organized'),
    Option('Natural', 'natural and realistically lived-in'),
    Option('Casual', 'casually messy, spontaneous and authentic'),
]

AGE_GROUP_OPTIONS = [
    Option('18-25', '18-25'),
    Option('26-35', '26-35'),
    Option('36-45', '36-45'),
    Option('46-60', '46-60'),
    Option('60+', '60+'),
    Option('No Person', 'no person'),
]

PERSON_APPEARANCE_OPTIONS = [
    Option('Regular', 'a regular, everyday appearance'),
    Option('Well-Groomed', 'a well-groomed, put-together appearance'),
    Option('Styled', 'a trendy, styled, influencer-like appearance'),
]

PRODUCT_INTERACTION_OPTIONS = [
    Option('Holding', 'holding it naturally'),
    Option('Using', 'using it'),
    Option('Showing to Camera', 'showing to camera'),
    Option('Unboxing', 'unboxing it'),
    Option('Applying', 'applying it'),
    Option('Placing on Surface', 'placing on surface'),
]

GENDER_OPTIONS = [
    Option('Female', 'female'),
    Option('Male', 'male'),
]

CAMERA_OPTIONS = [
    Option('Smartphone', 'shot on a modern smartphone'),
    Option('Selfie Cam', 'shot on a front-facing selfie camera'),
    Option('DSLR/Mirrorless', 'shot on a professional DSLR/Mirrorless camera with a shallow depth of field'),
    Option('Webcam', 'shot on a laptop webcam'),
    Option('Point & Shoot', 'shot on a digital point-and-shoot camera, flash aesthetic'),
]

ISO_OPTIONS = [
    Option('100', 'ISO 100, no noise, very clean'),
    Option('200', 'ISO 200, clean with great detail'),
    Option('400', 'ISO 400, slight grain, very natural'),
    Option('800', 'ISO 800, noticeable grain, good for low light'),
    Option('1600', 'ISO 1600, prominent grain, documentary style'),
    Option('3200', 'ISO 3200, heavy grain, artistic low light style'),
]

PERSPECTIVE_OPTIONS = [
    Option('Eye-Level', 'eye-level shot'),
    Option('POV', "point-of-view (POV) from the user's perspective"),
    Option('High Angle', 'shot from a high angle, looking down'),
    Option('Low Angle', 'shot from a low angle, looking up'),
    Option('Close-Up', 'a detailed close-up on the product'),
]

ASPECT_RATIO_OPTIONS = [
    Option('16:9 (Widescreen)', '16:9'),
    Option('9:16 (Vertical)', '9:16'),
    Option('1:1 (Square)', '1:1'),
]

SELFIE_TYPE_OPTIONS = [
    Option('None', 'none'),
    Option('Frontal Selfie', 'frontal selfie'),
    Option('From Below', 'selfie taken from below'),
    Option('From Above', 'selfie taken from above'),
    Option('Angled ¾', 'angled 3/4 selfie'),
    Option('Mirror Reflection', 'mirror reflection selfie'),
    Option('Hand-Holding Close-Up', 'close-up shot of a hand holding the product'),
]

ETHNICITY_OPTIONS = [
    Option('African Descent', 'of African descent'),
    Option('Latino', 'Latino'),
    Option('Asian', 'Asian'),
    Option('Caucasian', 'Caucasian'),
    Option('Middle Eastern', 'Middle Eastern'),
    Option('Mixed', 'of mixed ethnicity'),
]

# Option category -> catalog
CATALOGS = {
    'content_style': CONTENT_STYLE_OPTIONS,
    'placement_style': PLACEMENT_STYLE_OPTIONS,
    'placement_camera': PLACEMENT_CAMERA_OPTIONS,
    'lighting': LIGHTING_OPTIONS,
    'setting': SETTING_OPTIONS,
    'product_material': PRODUCT_MATERIAL_OPTIONS,
    'environment_order': ENVIRONMENT_ORDER_OPTIONS,
    'age_group': AGE_GROUP_OPTIONS,
    'person_appearance': PERSON_APPEARANCE_OPTIONS,
    'product_interaction': PRODUCT_INTERACTION_OPTIONS,
    'gender': GENDER_OPTIONS,
    'camera': CAMERA_OPTIONS,
    'iso': ISO_OPTIONS,
    'perspective': PERSPECTIVE_OPTIONS,
    'aspect_ratio': ASPECT_RATIO_OPTIONS,
    'selfie_type': SELFIE_TYPE_OPTIONS,
    'ethnicity': ETHNICITY_OPTIONS,
}

# Option fields a mood suggestion overwrites
MOOD_FIELDS = ('lighting', 'setting', 'placement_style', 'placement_camera')


def resolve_option(catalog: Sequence[Option], label: str) -> str:
    """Value for a label, falling back to the catalog's first entry."""
    for option in catalog:
        if option.label == label:
            return option.value
    return catalog[0].value


def default_options() -> dict:
    """Initial option state: first entry of every catalog, nobody in frame."""
    options = {category: catalog[0].value for category, catalog in CATALOGS.items()}
    options['age_group'] = resolve_option(AGE_GROUP_OPTIONS, 'No Person')
    return options


def apply_mood(options: Mapping[str, str], suggestion) -> dict:
    """
    Overwrite the mood-driven option fields with a suggestion's values.

    Args:
        options: Current option state (category -> value)
        suggestion: MoodSuggestion whose labels are resolved against CATALOGS

    Returns:
        New options dict; the input mapping is left untouched.
    """
    updated = dict(options)
    for category in MOOD_FIELDS:
        updated[category] = resolve_option(CATALOGS[category], getattr(suggestion, category))
    return updated
