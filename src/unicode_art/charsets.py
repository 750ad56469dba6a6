# Density ramps, darkest first. The classic renderer indexes these by
# brightness, so index 0 is picked for black and the last entry for white.
STANDARD = "$@B%8&WM#*oahkbdpqwmZO0QLCJUYXzcvunxrjft/|()1{}[]?-_+~<>i!lI;:,\"^`'. "
LEVELS_23 = "MWNXK0Okxdolc:;,'...   "
LEVELS_19 = "BBQROHETI)7ri=+;:,."
LEVELS_16 = "#8XOHLTI)i=+;:,."
LEVELS_10 = "@%#*+=-:. "

# Density digits consumed by the subpixel glyph matcher: '3' is full ink.
LEVELS_4 = "3210"

BRAILLE_BASE = 0x2800
UPPER_HALF_BLOCK = "▀"
