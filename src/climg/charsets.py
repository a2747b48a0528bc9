# Shade blocks U+2591-U+2593 bracketed by blank and full block, lightest first
SHADES = " ░▒▓█"
