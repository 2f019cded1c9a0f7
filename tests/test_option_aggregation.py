import json
import os
import unittest
from types import SimpleNamespace

# Ensure settings can be initialized in test environments
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")

from app.services.ui_projection import aggregate_options


def option_row(option_key, value, label, *, product=None, parent_value=None):
    return SimpleNamespace(
        option_key=option_key,
        value=value,
        label=label,
        product=product,
        parent_value=parent_value,
    )


def dump(groups):
    return [g.model_dump(mode="json", by_alias=True, exclude_unset=True) for g in groups]


class OptionAggregationTests(unittest.TestCase):
    def test_rows_with_same_key_collapse_into_one_group(self):
        rows = [option_row("city", "TPE", "Taipei"), option_row("city", "NYC", "New York")]
        self.assertEqual(
            dump(aggregate_options(rows)),
            [
                {
                    "key": "city",
                    "options": [
                        {"value": "TPE", "label": "Taipei"},
                        {"value": "NYC", "label": "New York"},
                    ],
                }
            ],
        )

    def test_groups_follow_first_occurrence_and_entries_keep_source_order(self):
        rows = [
            option_row("size", "S", "Small"),
            option_row("color", "red", "Red"),
            option_row("size", "M", "Medium"),
            option_row("shape", "sq", "Square"),
            option_row("color", "blue", "Blue"),
            option_row("size", "L", "Large"),
        ]
        out = dump(aggregate_options(rows))
        self.assertEqual([g["key"] for g in out], ["size", "color", "shape"])
        self.assertEqual([o["value"] for o in out[0]["options"]], ["S", "M", "L"])
        self.assertEqual([o["value"] for o in out[1]["options"]], ["red", "blue"])
        self.assertEqual(len({g["key"] for g in out}), len(out))

    def test_optional_product_and_parent_value_are_sparse(self):
        rows = [
            option_row("district", "XINYI", "Xinyi", parent_value="TPE"),
            option_row("district", "DAAN", "Da'an", product="widgetA"),
            option_row("district", "ZUOYING", "Zuoying", product="", parent_value=""),
        ]
        entries = dump(aggregate_options(rows))[0]["options"]
        self.assertEqual(entries[0], {"value": "XINYI", "label": "Xinyi", "parentValue": "TPE"})
        self.assertEqual(entries[1], {"value": "DAAN", "label": "Da'an", "product": "widgetA"})
        self.assertEqual(entries[2], {"value": "ZUOYING", "label": "Zuoying"})

    def test_empty_input_yields_no_groups(self):
        self.assertEqual(aggregate_options([]), [])

    def test_aggregation_is_deterministic(self):
        rows = [option_row("k%d" % (i % 7), str(i), "L%d" % i) for i in range(200)]
        first = json.dumps(dump(aggregate_options(rows)))
        second = json.dumps(dump(aggregate_options(rows)))
        self.assertEqual(first, second)
        self.assertEqual(sum(len(g["options"]) for g in json.loads(first)), 200)
