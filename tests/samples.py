# RGB (0..255) -> HSL / HSV (hue in degrees, the rest in percent)
samples_rgb_hsl = {
    (255, 0, 0): (0.0, 100.0, 50.0),
    (51, 102, 153): (210.0, 50.0, 40.0),
    (255, 255, 255): (0.0, 0.0, 100.0),
    (0, 0, 0): (0.0, 0.0, 0.0),
    (128, 128, 0): (60.0, 100.0, 25.098),
    (0, 128, 128): (180.0, 100.0, 25.098),
    (255, 100, 50): (14.634, 100.0, 59.804),
}

samples_rgb_hsv = {
    (255, 0, 0): (0.0, 100.0, 100.0),
    (51, 102, 153): (210.0, 66.667, 60.0),
    (255, 255, 255): (0.0, 0.0, 100.0),
    (0, 0, 0): (0.0, 0.0, 0.0),
    (128, 128, 0): (60.0, 100.0, 50.196),
    (0, 0, 255): (240.0, 100.0, 100.0),
    (255, 100, 50): (14.634, 80.392, 100.0),
}

samples_rgb_cmyk = {
    (255, 0, 0): (0.0, 100.0, 100.0, 0.0),
    (0, 0, 0): (0.0, 0.0, 0.0, 100.0),
    (255, 255, 255): (0.0, 0.0, 0.0, 0.0),
    (128, 0, 0): (0.0, 100.0, 100.0, 49.804),
    (255, 100, 50): (0.0, 60.784, 80.392, 0.0),
}

# Round-trip inputs spread over the cube
samples_rgb = [
    (0, 0, 0),
    (255, 255, 255),
    (255, 0, 0),
    (0, 255, 0),
    (0, 0, 255),
    (12, 200, 99),
    (250, 128, 7),
    (51, 102, 153),
    (128, 128, 128),
    (199, 21, 133),
    (1, 2, 3),
]
