"""
Unit tests for the category generators, each driven directly with a
GenerationContext so every family is checked in isolation.
"""
import re
from decimal import ROUND_HALF_UP, Decimal
from fractions import Fraction

import pytest

from mathify.math_engine.context import GenerationContext
from mathify.math_engine.number_words import number_to_words, ordinal
from mathify.math_engine.outcome_dispatch import DEFAULT_RULE, resolve_rule
from mathify.math_engine.seeding import Seed
from mathify.math_engine.topics import data, geometry, measurement, number_sense, operations, patterns
from mathify.math_engine.topics.problem_solving import generate_problem_solving

SEEDS = range(0, 5000, 97)
NUMBER_RE = re.compile(r"\d+")


def ctx(grade=1, outcome="", index=0, seed=0, attempt=0, slot=0):
    return GenerationContext(grade=grade, outcome=outcome, index=index, slot=slot, seed=Seed(seed), attempt=attempt)


def ints(text):
    return [int(n) for n in NUMBER_RE.findall(text.replace(",", ""))]


class TestDispatch:

    @pytest.mark.parametrize("category,outcome,rule", [
        ("Operations", "add numbers up to 100", "addition"),
        ("Operations", "find the difference of two numbers", "subtraction"),
        ("Operations", "use the order of operations", "gemdas"),
        ("Operations", "mixed operations practice", "four_operations"),
        ("Number Sense", "identify factors and multiples of whole numbers", "number_recognition"),
        ("Number Sense", "identify factors and multiples", "factors_multiples"),
        ("Number Sense", "compare numbers", "compare_order"),
        ("Geometry", "find the circumference of a circle", "circle"),
        ("Measurement", "measure the mass of objects", "mass"),
        ("Measurement", "measure objects", "measure"),
        ("Data", "describe the probability", "probability"),
        ("Problem Solving", "", "word_problem"),
        ("patterns", "extend a pattern", "pattern"),
    ])
    def test_first_matching_rule_wins(self, category, outcome, rule):
        assert resolve_rule(category, outcome)[0] == rule

    def test_unknown_category_and_unmatched_outcome_use_default(self):
        assert resolve_rule("Music", "addition") is DEFAULT_RULE
        assert resolve_rule("Data", "nothing relevant") is DEFAULT_RULE
        assert resolve_rule(None, None) is DEFAULT_RULE

    def test_default_generator_scales_with_grade(self):
        q = DEFAULT_RULE[2](ctx(grade=3, outcome="whatever", seed=123))
        a, b = ints(q.question)
        assert a <= 500 and b <= 500
        assert q.correct_answer == a + b


class TestOperations:

    def test_subtraction_never_negative(self):
        for grade in range(1, 7):
            for s in SEEDS:
                q = operations.generate_subtraction(ctx(grade, "subtraction", seed=s))
                a, b = ints(q.question)
                assert q.correct_answer == a - b >= 0

    def test_explicit_limit_overrides_grade(self):
        for s in SEEDS:
            q = operations.generate_addition(ctx(4, "add numbers up to 1,000", seed=s))
            a, b = ints(q.question)
            assert a + b <= 1000

    def test_multiplication_uses_tables_from_outcome(self):
        for s in SEEDS:
            q = operations.generate_multiplication(ctx(3, "multiplication tables for 2, 3, 4, 5, 10", seed=s))
            table, multiplier = ints(q.question)
            assert table in (2, 3, 4, 5, 10)
            assert 1 <= multiplier <= 12
            assert q.correct_answer == table * multiplier

    def test_division_is_exact(self):
        for grade in (1, 2, 3):
            for s in SEEDS:
                q = operations.generate_division(ctx(grade, "division", seed=s))
                product, table = ints(q.question)
                assert product % table == 0
                assert q.correct_answer == product // table

    def test_gemdas_exponent_form(self):
        q = operations.generate_gemdas(ctx(6, "gemdas with exponents", index=3, seed=17))
        assert "²" in q.question
        a, b, c = ints(q.question)
        assert q.correct_answer == a * a + b * c

    def test_gemdas_forms_rotate(self):
        texts = {operations.generate_gemdas(ctx(5, "gemdas", index=i, seed=4)).question for i in range(3)}
        assert len(texts) == 3

    def test_four_operations_by_slot(self):
        symbols = ["+", "-", "×", "÷"]
        for slot, symbol in enumerate(symbols):
            q = operations.generate_four_operations(ctx(3, "four operations", slot=slot, seed=10))
            assert f" {symbol} " in q.question


class TestNumberSense:

    def test_grade_one_recognition_uses_words(self):
        for s in SEEDS:
            q = number_sense.generate_number_recognition(ctx(1, "recognize numbers up to 100", seed=s))
            (num,) = ints(q.question)
            assert 1 <= num <= 100
            assert q.options[0] == number_to_words(num)

    def test_recognition_respects_explicit_limit(self):
        for s in SEEDS:
            q = number_sense.generate_number_recognition(ctx(2, "represent numbers up to 10,000", seed=s))
            (num,) = ints(q.question)
            assert num <= 10000

    def test_ordinal(self):
        for s in SEEDS:
            q = number_sense.generate_ordinal(ctx(2, "ordinal numbers up to 20th", seed=s))
            (position,) = ints(q.question)
            assert 1 <= position <= 20
            assert q.options[0] == ordinal(position)
            assert len(set(q.options)) == 4

    def test_grade_one_fraction_has_single_correct_answer(self):
        for i in range(4):
            q = number_sense.generate_fraction(ctx(1, "fractions", index=i))
            assert q.correct_answer == 0
            assert len(set(q.options)) == 4

    def test_simplest_form(self):
        for s in SEEDS:
            q = number_sense.generate_fraction(ctx(3, "simplify fractions", seed=s))
            num, den = ints(q.question)
            value = Fraction(num, den)
            expected = str(value.numerator) if value.denominator == 1 else f"{value.numerator}/{value.denominator}"
            assert q.options[0] == expected
            assert len(set(q.options)) == 4

    def test_fraction_denominators_from_outcome(self):
        for s in SEEDS:
            q = number_sense.generate_fraction(ctx(4, "fractions with denominators 3, 9", seed=s))
            _, den = ints(q.question)
            assert den in (3, 9)

    def test_fraction_to_decimal_rounds_half_up(self):
        for s in SEEDS:
            q = number_sense.generate_fraction(ctx(4, "convert fractions to decimals", seed=s))
            num, den, _ = ints(q.question)
            expected = (Decimal(num) / Decimal(den)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
            assert q.correct_answer == float(expected)

    def test_decimal_families(self):
        seen = set()
        for i in range(4):
            q = number_sense.generate_decimal(ctx(5, "decimals", index=i, seed=33))
            seen.add(q.question.split(" ")[0])
            assert q.type == "number"
        assert {"Write", "Round", "What"} <= seen

    def test_decimal_rounding(self):
        q = number_sense.generate_decimal(ctx(4, "decimals", index=1, seed=12))
        value = Decimal(re.search(r"Round (\d+\.\d+)", q.question).group(1))
        assert q.correct_answer == float(value.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))

    def test_odd_even(self):
        for i, target in enumerate(["even", "odd"]):
            for s in SEEDS:
                q = number_sense.generate_odd_even(ctx(2, "odd and even", index=i, seed=s))
                assert target in q.question
                parity = 0 if target == "even" else 1
                values = [int(o) for o in q.options]
                assert values[0] % 2 == parity
                assert all(v % 2 != parity for v in values[1:])

    def test_factor_choice(self):
        for s in SEEDS:
            q = number_sense.generate_factors_multiples(ctx(4, "factors", index=0, seed=s))
            (n,) = ints(q.question)
            values = [int(o) for o in q.options]
            assert n % values[0] == 0
            assert all(n % v for v in values[1:])

    def test_gcf_and_lcm(self):
        q = number_sense.generate_factors_multiples(ctx(5, "factors", index=1, seed=21))
        x, y = ints(q.question)
        assert "greatest common factor" in q.question
        assert x % q.correct_answer == 0 and y % q.correct_answer == 0

        q = number_sense.generate_factors_multiples(ctx(5, "multiples", index=1, seed=21))
        x, y = ints(q.question)
        assert "least common multiple" in q.question
        assert q.correct_answer % x == 0 and q.correct_answer % y == 0

    def test_prime_choice(self):
        q = number_sense.generate_factors_multiples(ctx(5, "prime numbers", seed=8))
        assert int(q.options[0]) in number_sense.PRIMES
        assert all(int(o) in number_sense.COMPOSITES for o in q.options[1:])

    def test_ratio_simplest_form(self):
        for s in SEEDS:
            q = number_sense.generate_ratio_proportion(ctx(6, "ratio", seed=s))
            a, b = ints(q.question)
            p, r = (int(x) for x in q.options[0].split(":"))
            assert Fraction(p, r) == Fraction(a, b)
            assert len(set(q.options)) == 4

    def test_percent_is_whole_number(self):
        for s in SEEDS:
            q = number_sense.generate_ratio_proportion(ctx(6, "percentage", seed=s))
            pct, whole = ints(q.question)
            assert q.correct_answer * 100 == pct * whole

    def test_proportion(self):
        q = number_sense.generate_ratio_proportion(ctx(6, "proportion", seed=99))
        n, total, m = ints(q.question)
        assert q.correct_answer == total // n * m

    def test_compare(self):
        for i, pick in enumerate([max, min]):
            q = number_sense.generate_compare(ctx(3, "compare numbers", index=i, seed=55))
            values = [int(o.replace(",", "")) for o in q.options]
            assert values[0] == pick(values)

    def test_place_value(self):
        for s in SEEDS:
            q = number_sense.generate_place_value(ctx(4, "place value", seed=s))
            place = re.search(r"in the (.+) place", q.question).group(1)
            n = ints(q.question.split(" of ")[-1])[0]
            position = number_sense.PLACE_NAMES.index(place)
            assert q.correct_answer == (n // 10 ** position) % 10 * 10 ** position


class TestGeometry:

    def test_area_variants(self):
        q = geometry.generate_area(ctx(4, "area of a triangle", seed=7))
        base, height = ints(q.question)
        assert q.correct_answer == base * height / 2

        q = geometry.generate_area(ctx(4, "area of a trapezoid", seed=7))
        b1, b2, h = ints(q.question)
        assert q.correct_answer == (b1 + b2) * h / 2

    def test_side_lengths_scale_with_grade(self):
        for s in SEEDS:
            q = geometry.generate_area(ctx(1, "area", seed=s))
            assert all(v <= 10 for v in ints(q.question))

    def test_triangle_perimeter_is_a_real_triangle(self):
        for s in SEEDS:
            q = geometry.generate_perimeter(ctx(5, "perimeter of a triangle", seed=s))
            a, b, c = ints(q.question)
            assert a + b > c and a + c > b and b + c > a
            assert q.correct_answer == a + b + c

    def test_angle_classification(self):
        for s in SEEDS:
            q = geometry.generate_angle(ctx(4, "angles", index=0, seed=s))
            (deg,) = ints(q.question)
            kind = q.options[0].split()[0]
            expected = "Acute" if deg < 90 else "Right" if deg == 90 else "Obtuse" if deg < 180 else "Straight"
            assert kind == expected

    def test_missing_angle(self):
        q = geometry.generate_angle(ctx(4, "angles", index=2, seed=13))
        a, b = ints(q.question)
        assert q.correct_answer == 180 - a - b > 0

    def test_circle(self):
        q = geometry.generate_circle(ctx(5, "circumference of a circle", seed=3))
        r = ints(q.question)[0]
        expected = (2 * Decimal("3.14") * r).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        assert q.correct_answer == int(expected)

        q = geometry.generate_circle(ctx(5, "area of a circle", seed=3))
        expected = (Decimal("3.14") * r * r).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        assert q.correct_answer == int(expected)

        q = geometry.generate_circle(ctx(5, "diameter", seed=3))
        assert q.correct_answer == 2 * r

    def test_transformation_answer_matches_description(self):
        for i, (name, description) in enumerate(geometry.TRANSFORMATIONS):
            q = geometry.generate_transformation(ctx(4, "transformations", index=i))
            assert description in q.question
            assert q.options[0] == name

    def test_shape_sides(self):
        q = geometry.generate_shape(ctx(1, "shapes", index=0))
        assert q.question == "How many sides does a circle have?"
        assert q.correct_answer == 0


class TestMeasurement:

    def test_grade_one_money_stays_within_100(self):
        for i in range(3):
            for s in SEEDS:
                q = measurement.generate_money(ctx(1, "money", index=i, seed=s))
                assert 0 <= q.correct_answer <= 100
                assert all(v <= 100 for v in ints(q.question))

    def test_quarter_hour_has_one_correct_option(self):
        q = measurement.generate_time(ctx(1, "tell time", index=4, seed=6))
        assert "quarter past" in q.question
        assert sum("quarter past" in o for o in q.options) == 1
        assert not any(":15" in o for o in q.options)

    def test_calendar_units(self):
        q = measurement.generate_time(ctx(1, "time", index=1, seed=6))
        (n,) = ints(q.question)
        assert int(q.options[0]) == 7 * n
        assert len(set(q.options)) == 4

    def test_clock_reading_has_period_context(self):
        for i in range(2):
            for s in SEEDS:
                q = measurement.generate_time(ctx(3, "tell time in hours and minutes", index=i, seed=s))
                hour, minute = ints(q.question)[:2]
                assert 0 <= minute <= 59
                correct = q.options[0]
                if "morning" in q.question:
                    assert correct.endswith("a.m.")
                else:
                    assert correct.endswith("p.m.")
                assert not any(":60" in o for o in q.options)
                assert len(set(q.options)) == 4

    def test_elapsed_minutes(self):
        q = measurement.generate_time(ctx(4, "elapsed time", seed=19))
        h1, m1, h2, m2 = ints(q.question)
        assert q.correct_answer == (h2 * 60 + m2) - (h1 * 60 + m1) >= 0

    def test_non_standard_length(self):
        q = measurement.generate_length(ctx(1, "length", index=1, seed=25))
        longer, shorter = ints(q.question)
        assert q.correct_answer == longer - shorter > 0

    def test_length_conversion(self):
        q = measurement.generate_length(ctx(3, "convert cm to meters", seed=40))
        a, b = ints(q.question)[:2]
        expected = (Decimal(a + b) / 100).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
        assert q.correct_answer == float(expected)

    def test_mass_and_capacity_conversions(self):
        q = measurement.generate_mass(ctx(4, "convert kilograms to grams", seed=2))
        kg, grams = ints(q.question)
        assert q.correct_answer == kg * 1000 + grams

        q = measurement.generate_volume(ctx(4, "liters and milliliters", seed=2))
        (liters,) = ints(q.question)
        assert q.correct_answer == liters * 1000

    def test_box_volume(self):
        q = measurement.generate_volume(ctx(5, "volume", seed=14))
        l, w, h = ints(q.question)
        assert q.correct_answer == l * w * h


class TestData:

    def test_pictograph_counts(self):
        q = data.generate_data(ctx(1, "pictograph", index=1, seed=9))
        a, b = ints(q.question)
        assert q.correct_answer == a + b

    def test_bar_graph_difference(self):
        q = data.generate_data(ctx(3, "bar graph difference", seed=9))
        a, b = ints(q.question)
        assert q.correct_answer == b - a > 0

    def test_probability(self):
        for s in SEEDS:
            q = data.generate_probability(ctx(5, "probability", seed=s))
            total, favorable = ints(q.question)
            assert 0 < favorable < total
            assert q.options[0] == f"{favorable}/{total}"
            assert len(set(q.options)) == 4


class TestPatterns:

    def test_repeating_emoji_choice(self):
        q = patterns.generate_pattern(ctx(1, "patterns", index=0))
        assert q.type == "multiple-choice"
        assert q.options[0] == "🔴"
        assert len(set(q.options)) == 4

    def test_repeating_number(self):
        q = patterns.generate_pattern(ctx(1, "patterns", index=4))
        assert q.correct_answer == 2

    def test_arithmetic_sequences_stay_positive(self):
        for grade in range(2, 7):
            for i in range(2):
                for s in SEEDS:
                    q = patterns.generate_pattern(ctx(grade, "extend patterns", index=i, seed=s))
                    seq = ints(q.question)
                    step = seq[1] - seq[0]
                    assert all(seq[k + 1] - seq[k] == step for k in range(3))
                    assert q.correct_answer == seq[-1] + step
                    assert q.correct_answer > 0

    def test_doubling(self):
        q = patterns.generate_pattern(ctx(4, "doubling patterns", seed=3))
        seq = ints(q.question)
        assert q.correct_answer == seq[-1] * 2


class TestProblemSolving:

    def test_grade_one_stays_within_100(self):
        for i in range(9):
            for s in SEEDS:
                q = generate_problem_solving(ctx(1, "", index=i, seed=s))
                assert 0 <= q.correct_answer <= 100

    def test_grade_three_adds_groups(self):
        texts = [generate_problem_solving(ctx(3, "word problems", index=i, seed=5)).question for i in range(6)]
        assert any("bags with" in t for t in texts)
        assert any("shared equally" in t for t in texts)

    def test_sharing_is_exact(self):
        q = generate_problem_solving(ctx(4, "word problems", index=5, seed=31))
        total, friends = ints(q.question)
        assert q.correct_answer * friends == total
