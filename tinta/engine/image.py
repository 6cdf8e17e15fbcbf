# Copyright (c) 2026 Tinta
# SPDX-License-Identifier: MIT

"""
Image file decoding.

Turns an image file into the flat RGBA buffer the analyzer consumes.
Requires Pillow (``pip install tinta[image]``).
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import Optional, Union

import numpy as np
from numpy.typing import NDArray

from tinta.engine.analyzer import Seed, extract_colors
from tinta.engine.config import PaletteConfig


def load_rgba(
    image: Union[str, Path],
) -> tuple[NDArray[np.uint8], int, int]:
    """
    Decode an image file to a flat RGBA buffer.

    Applies ICC profile conversion to sRGB if the image has an embedded
    color profile, so extracted colors match what color pickers show.
    Alpha is preserved; images without it come back fully opaque.

    Returns:
        (buffer, width, height) where buffer has shape (width * height * 4,)
    """
    try:
        from PIL import Image
    except ImportError as e:
        raise ImportError(
            "Pillow is required for image loading. "
            "Install with: pip install tinta[image]"
        ) from e

    with Image.open(image) as img:
        img.load()

        if "icc_profile" in img.info:
            try:
                from PIL import ImageCms

                embedded_profile = ImageCms.ImageCmsProfile(
                    io.BytesIO(img.info["icc_profile"])
                )
                srgb_profile = ImageCms.createProfile("sRGB")
                alpha = img.getchannel("A") if "A" in img.getbands() else None

                rgb = img.convert("RGB")
                rgb = ImageCms.profileToProfile(rgb, embedded_profile, srgb_profile)
                if alpha is not None:
                    rgb.putalpha(alpha)
                converted = rgb.convert("RGBA")
            except Exception:
                # If ICC conversion fails, fall back to plain conversion
                converted = img.convert("RGBA")
        else:
            converted = img.convert("RGBA")

        width, height = converted.size
        buffer = np.asarray(converted, dtype=np.uint8).reshape(-1)

    return buffer, width, height


def extract_colors_from_file(
    image: Union[str, Path],
    count: int = 5,
    *,
    config: Optional[PaletteConfig] = None,
    seed: Seed = None,
) -> list[str]:
    """Decode an image file and run :func:`extract_colors` on it."""
    buffer, _, _ = load_rgba(image)
    return extract_colors(buffer, count, config=config, seed=seed)
