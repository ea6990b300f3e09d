# No dependencies

# Bit layout of a packed color, most significant byte first: 0xAARRGGBB
ALPHA_SHIFT = 24
RED_SHIFT = 16
GREEN_SHIFT = 8
BLUE_SHIFT = 0

CHANNEL_MASK = 0xFF
VALUE_MASK = 0xFFFFFFFF

CHANNEL_MAX = 255
ALPHA_OPAQUE = 0xFF
ALPHA_HIDDEN = 0x00

HUE_360 = 360
HUE_SECTORS = 6
