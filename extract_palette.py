#!/usr/bin/env python3
"""
Extract a small ranked palette of hex colors from a reference image.

The image is drawn into a fixed square surface (an area-weighted downsample),
near-transparent pixels are dropped, channels are quantized into coarse
buckets and the most frequent buckets are returned as hex strings.
"""

import io
from pathlib import Path
from typing import BinaryIO, Union

import numpy as np
from PIL import Image, UnidentifiedImageError

from color_utils import quantize_channels, rgb_to_hex


# =============================================================================
# Constants
# =============================================================================

SAMPLE_SIZE = 64  # Side of the square sampling surface
QUANTIZE_STEP = 32  # Bucket width per channel: (256/32)^3 = 512 buckets max
MAX_PALETTE_COLORS = 5
ALPHA_THRESHOLD = 128  # Pixels below 50% opacity are background

ImageSource = Union[str, Path, bytes, BinaryIO]


class DecodeError(ValueError):
    """The image data could not be decoded into pixels."""


# =============================================================================
# Loading
# =============================================================================

def _sample_pixels(stream: BinaryIO, size: int) -> np.ndarray:
    """Decode an image stream and draw it into a size x size RGBA array."""
    try:
        with Image.open(stream) as img:
            # JPEG decoders can scale down while decoding
            img.draft('RGB', (size, size))
            with img.convert('RGBA') as rgba:
                with rgba.resize((size, size), Image.Resampling.BILINEAR) as surface:
                    return np.array(surface, dtype=np.uint8).reshape(-1, 4)
    except UnidentifiedImageError as e:
        raise DecodeError(f"Could not identify image: {e}") from e
    except (OSError, SyntaxError, Image.DecompressionBombError) as e:
        raise DecodeError(f"Could not decode image: {e}") from e


def load_pixels(source: ImageSource, size: int = SAMPLE_SIZE) -> np.ndarray:
    """
    Read a source image and return its downsampled RGBA pixels.

    Args:
        source: Path, raw bytes, or a binary file object
        size: Side of the square sampling surface

    Returns:
        uint8 array of shape (size * size, 4)

    Raises:
        FileNotFoundError: If a path is given and doesn't exist
        OSError: If the file can't be read
        DecodeError: If the data is not a decodable image
    """
    if isinstance(source, (bytes, bytearray, memoryview)):
        return _sample_pixels(io.BytesIO(bytes(source)), size)

    if isinstance(source, (str, Path)):
        try:
            fh = open(source, 'rb')
        except FileNotFoundError:
            raise FileNotFoundError(f"Image not found: {source}")
        with fh:
            return _sample_pixels(fh, size)

    return _sample_pixels(source, size)


# =============================================================================
# Palette
# =============================================================================

def rank_buckets(pixels: np.ndarray, step: int = QUANTIZE_STEP,
                 alpha_threshold: int = ALPHA_THRESHOLD) -> tuple[np.ndarray, np.ndarray]:
    """
    Quantize opaque pixels and rank their buckets by frequency.

    Args:
        pixels: RGBA array of shape (n, 4)
        step: Quantization step per channel
        alpha_threshold: Minimum alpha for a pixel to count

    Returns:
        Tuple of (buckets, counts): buckets is (k, 3) quantized RGB, counts is (k,).
        Sorted by count descending; equal counts keep first-seen order.
    """
    opaque = pixels[pixels[:, 3] >= alpha_threshold]
    if len(opaque) == 0:
        return np.empty((0, 3), dtype=np.int32), np.empty(0, dtype=np.int64)

    binned = quantize_channels(opaque[:, :3], step)
    unique_bins, first_seen, counts = np.unique(
        binned, axis=0, return_index=True, return_counts=True
    )

    # Primary key: count descending; secondary: first occurrence
    order = np.lexsort((first_seen, -counts))
    return unique_bins[order], counts[order]


def _validate(size: int, step: int, max_colors: int) -> None:
    if size < 1:
        raise ValueError(f"Sample size must be positive, got {size}")
    if not 1 <= step <= 255:
        raise ValueError(f"Quantization step must be in 1..255, got {step}")
    if max_colors < 1:
        raise ValueError(f"max_colors must be positive, got {max_colors}")


def extract_palette_counts(source: ImageSource,
                           size: int = SAMPLE_SIZE,
                           step: int = QUANTIZE_STEP,
                           max_colors: int = MAX_PALETTE_COLORS,
                           alpha_threshold: int = ALPHA_THRESHOLD) -> list[tuple[str, int]]:
    """Extract the palette along with the sampled pixel count of each color."""
    _validate(size, step, max_colors)
    pixels = load_pixels(source, size)
    buckets, counts = rank_buckets(pixels, step, alpha_threshold)
    return [(rgb_to_hex(bucket), int(count))
            for bucket, count in zip(buckets[:max_colors], counts[:max_colors])]


def extract_palette(source: ImageSource,
                    size: int = SAMPLE_SIZE,
                    step: int = QUANTIZE_STEP,
                    max_colors: int = MAX_PALETTE_COLORS,
                    alpha_threshold: int = ALPHA_THRESHOLD) -> list[str]:
    """
    Extract up to max_colors representative colors from an image.

    Every call decodes the source afresh. A fully transparent image gives an
    empty list, which is a valid result rather than an error.

    Returns:
        Hex strings (`#RRGGBB`) ordered by descending pixel frequency.
    """
    return [hex_color for hex_color, _ in
            extract_palette_counts(source, size, step, max_colors, alpha_threshold)]
