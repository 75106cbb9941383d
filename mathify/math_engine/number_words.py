"""
mathify/math_engine/number_words.py
Display helpers shared by the topic generators: number words, ordinals,
thousands separators, fractions and multiple-choice option lists.
"""
from decimal import ROUND_HALF_UP, Decimal
from math import gcd
from typing import Callable, Iterable, List, Tuple

ONES = [
    "zero", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
    "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen",
    "seventeen", "eighteen", "nineteen",
]
TENS = ["", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety"]
ORDINAL_SUFFIX = {1: "st", 2: "nd", 3: "rd"}


def number_to_words(n: int) -> str:
    if n < 20:
        return ONES[n]
    if n < 100:
        tens, ones = divmod(n, 10)
        return TENS[tens] if ones == 0 else f"{TENS[tens]}-{ONES[ones]}"
    if n < 1000:
        hundreds, rest = divmod(n, 100)
        if rest == 0:
            return f"{ONES[hundreds]} hundred"
        return f"{ONES[hundreds]} hundred {number_to_words(rest)}"
    return with_commas(n)


def ordinal(n: int) -> str:
    if 11 <= (n % 100) <= 13:
        return f"{n}th"
    return f"{n}{ORDINAL_SUFFIX.get(n % 10, 'th')}"


def with_commas(n) -> str:
    return f"{n:,}"


def simplify(num: int, den: int) -> Tuple[int, int]:
    if den == 0:
        return num, den
    common = gcd(abs(num), abs(den))
    return num // common, den // common


def fraction_text(num: int, den: int) -> str:
    return str(num) if den == 1 else f"{num}/{den}"


def distinct_options(
    correct: str,
    wrong: Iterable[str],
    filler: Callable[[int], str],
    size: int = 4,
) -> List[str]:
    """
    Correct option first, then unique wrong options; `filler(k)` supplies
    extra distractors (k = 1, 2, ...) until `size` options exist.
    """
    options = [correct]
    for opt in wrong:
        if len(options) == size:
            break
        if opt not in options:
            options.append(opt)
    k = 1
    while len(options) < size and k <= 100:
        opt = filler(k)
        if opt not in options:
            options.append(opt)
        k += 1
    return options


def round_decimal(value, places: int = 0) -> float:
    """Half-up rounding to `places` decimals; 2.45 -> 2.5, never banker's rounding."""
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    quantum = Decimal(1).scaleb(-places)
    return float(value.quantize(quantum, rounding=ROUND_HALF_UP))


def fraction_value(num: int, den: int, places: int = 2) -> float:
    return round_decimal(Decimal(num) / Decimal(den), places)
