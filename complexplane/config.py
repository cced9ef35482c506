# ───────────────────────── CONFIGURATION ──────────────────────────────────── #
from decimal import ROUND_HALF_EVEN

DEFAULT_FRACTION_DIGITS = 4        # fraction digits shown by the display forms
ROUNDING                = ROUND_HALF_EVEN
MAX_INTEGER_DIGITS      = 310      # a finite double never has more than 309
