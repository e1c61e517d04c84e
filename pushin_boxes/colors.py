"""The game's palette as RGBA tuples."""

PRIMARY = (245, 210, 70, 255)
PRIMARY_DARK = (225, 190, 50, 255)
SECONDARY = (108, 255, 91, 255)
LIGHT = (255, 255, 255, 255)
DARK = (0, 0, 0, 255)
TRANSPARENT = (0, 0, 0, 0)