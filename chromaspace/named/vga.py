"""The 16 VGA / HTML 4 basic colors, pre-computed in every built-in space."""
from .registry import DictNamedColors

# Lab/LCh/XYZ under D65 and the 2° observer; YCbCr is full-range BT.601
VGA_COLORS = {
    "white": {
        "rgb": (255, 255, 255),
        "rgba": (255, 255, 255, 255),
        "cmyk": (0, 0, 0, 0),
        "hsl": (0, 0, 100),
        "hsla": (0, 0, 100, 255),
        "hsv": (0, 0, 100),
        "lab": (100.0, 0.0, 0.0),
        "lch": (100.0, 0.0, 0.0),
        "xyz": (95.047, 100.0, 108.883),
        "ycbcr": (255.0, 128.0, 128.0),
    },
    "silver": {
        "rgb": (192, 192, 192),
        "rgba": (192, 192, 192, 255),
        "cmyk": (0, 0, 0, 24.71),
        "hsl": (0, 0, 75.29),
        "hsla": (0, 0, 75.29, 255),
        "hsv": (0, 0, 75.29),
        "lab": (77.70, 0.0, 0.0),
        "lch": (77.70, 0.0, 0.0),
        "xyz": (50.10, 52.71, 57.39),
        "ycbcr": (192.0, 128.0, 128.0),
    },
    "gray": {
        "rgb": (128, 128, 128),
        "rgba": (128, 128, 128, 255),
        "cmyk": (0, 0, 0, 49.8),
        "hsl": (0, 0, 50.2),
        "hsla": (0, 0, 50.2, 255),
        "hsv": (0, 0, 50.2),
        "lab": (53.59, 0.0, 0.0),
        "lch": (53.59, 0.0, 0.0),
        "xyz": (20.52, 21.59, 23.50),
        "ycbcr": (128.0, 128.0, 128.0),
    },
    "black": {
        "rgb": (0, 0, 0),
        "rgba": (0, 0, 0, 255),
        "cmyk": (0, 0, 0, 100),
        "hsl": (0, 0, 0),
        "hsla": (0, 0, 0, 255),
        "hsv": (0, 0, 0),
        "lab": (0.0, 0.0, 0.0),
        "lch": (0.0, 0.0, 0.0),
        "xyz": (0.0, 0.0, 0.0),
        "ycbcr": (0.0, 128.0, 128.0),
    },
    "red": {
        "rgb": (255, 0, 0),
        "rgba": (255, 0, 0, 255),
        "cmyk": (0, 100, 100, 0),
        "hsl": (0, 100, 50),
        "hsla": (0, 100, 50, 255),
        "hsv": (0, 100, 100),
        "lab": (53.24, 80.09, 67.20),
        "lch": (53.24, 104.55, 39.99),
        "xyz": (41.25, 21.27, 1.93),
        "ycbcr": (76.245, 84.972, 255.0),
    },
    "maroon": {
        "rgb": (128, 0, 0),
        "rgba": (128, 0, 0, 255),
        "cmyk": (0, 100, 100, 49.8),
        "hsl": (0, 100, 25.1),
        "hsla": (0, 100, 25.1, 255),
        "hsv": (0, 100, 50.2),
        "lab": (25.54, 48.05, 38.06),
        "lch": (25.54, 61.30, 38.38),
        "xyz": (8.90, 4.59, 0.42),
        "ycbcr": (38.272, 106.402, 192.0),
    },
    "yellow": {
        "rgb": (255, 255, 0),
        "rgba": (255, 255, 0, 255),
        "cmyk": (0, 0, 100, 0),
        "hsl": (60, 100, 50),
        "hsla": (60, 100, 50, 255),
        "hsv": (60, 100, 100),
        "lab": (97.14, -21.55, 94.48),
        "lch": (97.14, 96.91, 102.85),
        "xyz": (77.00, 92.78, 13.85),
        "ycbcr": (225.93, 0.5, 148.735),
    },
    "olive": {
        "rgb": (128, 128, 0),
        "rgba": (128, 128, 0, 255),
        "cmyk": (0, 0, 100, 49.8),
        "hsl": (60, 100, 25.1),
        "hsla": (60, 100, 25.1, 255),
        "hsv": (60, 100, 50.2),
        "lab": (51.87, -12.93, 56.68),
        "lch": (51.87, 58.14, 102.85),
        "xyz": (16.62, 20.03, 2.99),
        "ycbcr": (113.408, 64.0, 138.408),
    },
    "lime": {
        "rgb": (0, 255, 0),
        "rgba": (0, 255, 0, 255),
        "cmyk": (100, 0, 100, 0),
        "hsl": (120, 100, 50),
        "hsla": (120, 100, 50, 255),
        "hsv": (120, 100, 100),
        "lab": (87.74, -86.18, 83.18),
        "lch": (87.74, 119.78, 136.02),
        "xyz": (35.76, 71.52, 11.92),
        "ycbcr": (149.685, 43.528, 21.235),
    },
    "green": {
        "rgb": (0, 128, 0),
        "rgba": (0, 128, 0, 255),
        "cmyk": (100, 0, 100, 49.8),
        "hsl": (120, 100, 25.1),
        "hsla": (120, 100, 25.1, 255),
        "hsv": (120, 100, 50.2),
        "lab": (46.23, -51.70, 49.90),
        "lch": (46.23, 71.85, 136.02),
        "xyz": (7.72, 15.44, 2.57),
        "ycbcr": (75.136, 85.598, 74.408),
    },
    "aqua": {
        "rgb": (0, 255, 255),
        "rgba": (0, 255, 255, 255),
        "cmyk": (100, 0, 0, 0),
        "hsl": (180, 100, 50),
        "hsla": (180, 100, 50, 255),
        "hsv": (180, 100, 100),
        "lab": (91.11, -48.09, -14.13),
        "lch": (91.11, 50.12, 196.38),
        "xyz": (53.80, 78.73, 106.95),
        "ycbcr": (178.755, 171.028, 0.5),
    },
    "teal": {
        "rgb": (0, 128, 128),
        "rgba": (0, 128, 128, 255),
        "cmyk": (100, 0, 0, 49.8),
        "hsl": (180, 100, 25.1),
        "hsla": (180, 100, 25.1, 255),
        "hsv": (180, 100, 50.2),
        "lab": (48.25, -28.84, -8.48),
        "lch": (48.25, 30.06, 196.38),
        "xyz": (11.61, 17.00, 23.09),
        "ycbcr": (89.728, 149.598, 64.0),
    },
    "blue": {
        "rgb": (0, 0, 255),
        "rgba": (0, 0, 255, 255),
        "cmyk": (100, 100, 0, 0),
        "hsl": (240, 100, 50),
        "hsla": (240, 100, 50, 255),
        "hsv": (240, 100, 100),
        "lab": (32.30, 79.19, -107.86),
        "lch": (32.30, 133.81, 306.29),
        "xyz": (18.04, 7.22, 95.03),
        "ycbcr": (29.07, 255.0, 107.265),
    },
    "navy": {
        "rgb": (0, 0, 128),
        "rgba": (0, 0, 128, 255),
        "cmyk": (100, 100, 0, 49.8),
        "hsl": (240, 100, 25.1),
        "hsla": (240, 100, 25.1, 255),
        "hsv": (240, 100, 50.2),
        "lab": (12.98, 47.51, -64.70),
        "lch": (12.98, 80.27, 306.29),
        "xyz": (3.89, 1.56, 20.51),
        "ycbcr": (14.592, 192.0, 117.592),
    },
    "fuchsia": {
        "rgb": (255, 0, 255),
        "rgba": (255, 0, 255, 255),
        "cmyk": (0, 100, 0, 0),
        "hsl": (300, 100, 50),
        "hsla": (300, 100, 50, 255),
        "hsv": (300, 100, 100),
        "lab": (60.32, 98.23, -60.82),
        "lch": (60.32, 115.57, 328.23),
        "xyz": (59.29, 28.48, 96.96),
        "ycbcr": (105.315, 212.472, 234.765),
    },
    "purple": {
        "rgb": (128, 0, 128),
        "rgba": (128, 0, 128, 255),
        "cmyk": (0, 100, 0, 49.8),
        "hsl": (300, 100, 25.1),
        "hsla": (300, 100, 25.1, 255),
        "hsv": (300, 100, 50.2),
        "lab": (29.78, 58.94, -36.50),
        "lch": (29.78, 69.33, 328.23),
        "xyz": (12.80, 6.15, 20.93),
        "ycbcr": (52.864, 170.402, 181.592),
    },
}


class VGANamedColors(DictNamedColors):
    """The 16 VGA colors (white, silver, gray, black, red, maroon, ...)."""

    def __init__(self) -> None:
        super().__init__(VGA_COLORS)
