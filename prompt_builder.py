"""
Assemble the natural-language generation prompt from resolved option values.
"""

from typing import Mapping, Optional


NO_PERSON = 'no person'
HAND_CLOSE_UP = 'close-up shot of a hand holding the product'

INTERACTION_PHRASES = {
    'holding it naturally': 'holding the product naturally and comfortably.',
    'using it': 'using the product naturally as intended.',
    'showing to camera': 'showing the product close to the camera.',
    'unboxing it': 'unboxing the product with excitement.',
    'applying it': 'applying the product to their skin or body.',
    'placing on surface': 'placing the product carefully on a nearby surface.',
}


def describe_interaction(interaction: str) -> str:
    return INTERACTION_PHRASES.get(
        interaction, f"interacting with the product in a way that is {interaction}."
    )


def _person_clause(options: Mapping[str, str]) -> str:
    clause = (f"The photo features a {options['gender']} person, age {options['age_group']}, "
              f"of {options['ethnicity']} ethnicity, who has a {options['person_appearance']}. ")
    if options['selfie_type'] == HAND_CLOSE_UP:
        return clause + "The shot is a close-up of their hand holding the product naturally. "

    clause += (f"The person is {describe_interaction(options['product_interaction'])} "
               "Their face and upper body are visible, and the interaction looks unposed and authentic. ")
    if options['selfie_type'] != 'none':
        clause += f"The style is a {options['selfie_type']}. "
    return clause


def _ugc_prompt(options: Mapping[str, str]) -> str:
    prompt = (f"Create an ultra-realistic, authentic UGC (User Generated Content) style lifestyle photo "
              f"with a {options['aspect_ratio']} aspect ratio. The photo must look genuine, emotional, "
              f"and cinematic, as if taken by a real person with a {options['camera']}. ")

    prompt += (f"The scene is a {options['setting']}, illuminated by {options['lighting']}. "
               f"The overall environment has a {options['environment_order']} feel. "
               f"The photo is shot from a {options['perspective']}. "
               f"The camera settings should reflect {options['iso']}, creating a natural look. ")

    prompt += (f"The focus is on the provided product, which has a {options['product_material']} finish. "
               "Place this exact product into the scene naturally. Ensure its material, reflections, "
               "and shadows are rendered realistically according to the environment. "
               "Do not alter the product's design or branding. ")

    if options['age_group'] != NO_PERSON:
        prompt += _person_clause(options)
    return prompt


def _placement_prompt(options: Mapping[str, str]) -> str:
    prompt = (f"Create a premium, photorealistic product placement image with a {options['aspect_ratio']} "
              f"aspect ratio. Stage the provided product on a {options['placement_style']}, "
              f"{options['placement_camera']}. ")

    prompt += (f"The backdrop evokes {options['setting']}, illuminated by {options['lighting']}. "
               f"The product has a {options['product_material']} finish; keep its design, label, "
               "and branding exactly as provided, with accurate reflections and contact shadows. ")
    return prompt


def build_prompt(options: Mapping[str, str], mood_cue: Optional[str] = None) -> str:
    """
    Build the generation prompt.

    Args:
        options: Resolved option values keyed by category
        mood_cue: Optional sentence from the active mood suggestion

    Raises:
        KeyError: If a category the prompt needs is missing from options
    """
    placement = options['content_style'] == 'product'
    prompt = _placement_prompt(options) if placement else _ugc_prompt(options)

    if mood_cue:
        prompt += f"Mood direction: {mood_cue.strip()} "

    prompt += "Final image must be high-resolution and free of any watermarks, text, or artificial elements. "
    if placement:
        prompt += "It should read as a polished studio shot ready for a product page."
    else:
        prompt += "It should feel like a captured moment, not a staged ad."
    return prompt
