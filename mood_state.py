"""
Holder for the active mood reference.

Each analysis request gets a generation token from begin(). Only a result
carrying the latest token is applied; older results are discarded, so a
slow analysis of a replaced image can't overwrite the newer mood.
"""

from typing import Optional

from extract_palette import DecodeError, ImageSource, extract_palette
from mood_engine import DEFAULT_MOOD, MoodSuggestion, describe_mood, suggest_mood


ANALYSIS_FAILED_MESSAGE = "Could not analyze the mood reference. Try a different image."


class MoodReference:
    """The current palette and mood suggestion for one configurator session."""

    def __init__(self):
        self.palette: list[str] = []
        self.suggestion: MoodSuggestion = DEFAULT_MOOD
        self.summary: Optional[str] = None
        self.error: Optional[str] = None
        self._generation = 0

    @property
    def generation(self) -> int:
        return self._generation

    def begin(self) -> int:
        """Start a new analysis and return its token."""
        self._generation += 1
        self.error = None
        return self._generation

    def is_current(self, token: int) -> bool:
        return token == self._generation

    def resolve(self, token: int, palette: list[str]) -> bool:
        """
        Apply an extracted palette if the token is still current.

        Returns:
            True if applied, False if the result was stale and dropped.
        """
        if not self.is_current(token):
            return False
        self.palette = list(palette)
        self.suggestion = suggest_mood(self.palette)
        self.summary = describe_mood(self.suggestion, self.palette)
        return True

    def fail(self, token: int, error: Exception) -> bool:
        """Record an advisory message for a failed analysis if still current."""
        if not self.is_current(token):
            return False
        self.palette = []
        self.suggestion = DEFAULT_MOOD
        self.summary = None
        self.error = f"{ANALYSIS_FAILED_MESSAGE} ({error})"
        return True

    def clear(self) -> None:
        """Drop the reference, revert to the default mood, invalidate pending work."""
        self._generation += 1
        self.palette = []
        self.suggestion = DEFAULT_MOOD
        self.summary = None
        self.error = None

    def analyze(self, source: ImageSource, **kwargs) -> bool:
        """
        Extract a palette from source and apply it.

        Decode and read failures become self.error instead of raising.

        Returns:
            True if a palette was applied.
        """
        token = self.begin()
        try:
            palette = extract_palette(source, **kwargs)
        except (DecodeError, OSError) as e:
            self.fail(token, e)
            return False
        return self.resolve(token, palette)
