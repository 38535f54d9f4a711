# renderer/tone_mapping.py
import numpy as np
from PIL import Image

def clamp_tone_mapping(linear, exposure=1.0, gamma=1.0):
    """
    Scale, clip to [0, 1] and quantize a linear color buffer to 8 bits.
    """
    scaled = np.clip(linear * exposure, 0.0, 1.0)
    if gamma != 1.0:
        scaled = scaled ** (1.0 / gamma)
    return (scaled * 255).round().astype("uint8")

def reinhard_tone_mapping(linear, exposure=1.0, white_point=1.0, gamma=2.2):
    """
    Apply Reinhard tone mapping to a linear radiance image.
    """
    scaled = np.maximum(linear * exposure, 0.0)
    mapped = scaled / (1.0 + scaled / white_point)
    mapped = mapped ** (1.0 / gamma)
    output = (mapped * 255).clip(0, 255).astype("uint8")
    return output

TONE_MAPPERS = {
    "clamp": clamp_tone_mapping,
    "reinhard": reinhard_tone_mapping,
}

def tone_map(linear, mode="clamp", exposure=1.0):
    try:
        mapper = TONE_MAPPERS[mode]
    except KeyError:
        raise ValueError(f"Unknown tone mapping '{mode}', expected one of {sorted(TONE_MAPPERS)}") from None
    return mapper(linear, exposure=exposure)

def save_image(pixels, path):
    """
    Write an (height, width, 3) uint8 buffer to disk; the format follows
    the file extension.
    """
    Image.fromarray(pixels).save(path)
