"""Word tables for spelling integers in English.

All tables are immutable tuples indexed by small integers. ``SCALE_NAMES[p]``
names ``1000 ** p``; index 0 is a placeholder and never appears in output.
"""

ONES: tuple[str, ...] = (
    "zero",
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
    "ten",
    "eleven",
    "twelve",
    "thirteen",
    "fourteen",
    "fifteen",
    "sixteen",
    "seventeen",
    "eighteen",
    "nineteen",
)

TENS: tuple[str, ...] = (
    "zero",
    "ten",
    "twenty",
    "thirty",
    "forty",
    "fifty",
    "sixty",
    "seventy",
    "eighty",
    "ninety",
)

# Short-scale names up to centillion (10**303)
SCALE_NAMES: tuple[str, ...] = (
    "zero",
    "thousand",
    "million",
    "billion",
    "trillion",
    "quadrillion",
    "quintillion",
    "sextillion",
    "septillion",
    "octillion",
    "nonillion",
    "decillion",
    "undecillion",
    "duodecillion",
    "tredecillion",
    "quattuordecillion",
    "quindecillion",
    "sexdecillion",
    "septendecillion",
    "octodecillion",
    "novemdecillion",
    "vigintillion",
    "unvigintillion",
    "duovigintillion",
    "trevigintillion",
    "quattuorvigintillion",
    "quinvigintillion",
    "sexvigintillion",
    "septenvigintillion",
    "octovigintillion",
    "novemvigintillion",
    "trigintillion",
    "untrigintillion",
    "duotrigintillion",
    "tretrigintillion",
    "quattuortrigintillion",
    "quintrigintillion",
    "sextrigintillion",
    "septentrigintillion",
    "octotrigintillion",
    "novemtrigintillion",
    "quadragintillion",
    "unquadragintillion",
    "duoquadragintillion",
    "trequadragintillion",
    "quattuorquadragintillion",
    "quinquadragintillion",
    "sexquadragintillion",
    "septenquadragintillion",
    "octoquadragintillion",
    "novemquadragintillion",
    "quinquagintillion",
    "unquinquagintillion",
    "duoquinquagintillion",
    "trequinquagintillion",
    "quattuorquinquagintillion",
    "quinquinquagintillion",
    "sexquinquagintillion",
    "septenquinquagintillion",
    "octoquinquagintillion",
    "novemquinquagintillion",
    "sexagintillion",
    "unsexagintillion",
    "duosexagintillion",
    "tresexagintillion",
    "quattuorsexagintillion",
    "quinsexagintillion",
    "sexsexagintillion",
    "septsexagintillion",
    "octosexagintillion",
    "novemsexagintillion",
    "septuagintillion",
    "unseptuagintillion",
    "duoseptuagintillion",
    "treseptuagintillion",
    "quattuorseptuagintillion",
    "quinseptuagintillion",
    "sexseptuagintillion",
    "septseptuagintillion",
    "octoseptuagintillion",
    "novemseptuagintillion",
    "octogintillion",
    "unoctogintillion",
    "duooctogintillion",
    "treoctogintillion",
    "quattuoroctogintillion",
    "quinoctogintillion",
    "sexoctogintillion",
    "septoctogintillion",
    "octooctogintillion",
    "novemoctogintillion",
    "nonagintillion",
    "unnonagintillion",
    "duononagintillion",
    "trenonagintillion",
    "quattuornonagintillion",
    "quinnonagintillion",
    "sexnonagintillion",
    "septnonagintillion",
    "octononagintillion",
    "novemnonagintillion",
    "centillion",
)

# Largest supported magnitude is one below 1000 ** len(SCALE_NAMES), i.e. 10**306 - 1
MAX_SUPPORTED_DIGITS: int = 3 * len(SCALE_NAMES)

# The only English number-word whose length equals its value
FIXED_POINT_WORD: str = "four"

# Guard for the spell-and-count loop. Every start in range settles in well
# under ten transforms; the guard only trips on a broken word table.
DEFAULT_MAX_ITERATIONS: int = 100
