"""
mathify/core/coverage.py: Outcome dispatch coverage report.
Lists, per category, the ordered rules the question engine tries.
"""
from mathify.math_engine.outcome_dispatch import DEFAULT_RULE, DISPATCH_TABLE, default_outcome


def coverage_report():
    categories = []
    for category, rules in DISPATCH_TABLE.items():
        categories.append({
            "category": category,
            "rules": [
                {
                    "name": name,
                    "keywords": list(getattr(predicate, "keywords", ())),
                    "generator": generator.__name__,
                }
                for name, predicate, generator in rules
            ],
        })

    rule_count = sum(len(c["rules"]) for c in categories)
    return {
        "total_categories": len(categories),
        "rule_count": rule_count,
        "default": {
            "name": DEFAULT_RULE[0],
            "generator": DEFAULT_RULE[2].__name__,
            "outcomes": [default_outcome(1), default_outcome(2)],
        },
        "categories": categories,
    }
