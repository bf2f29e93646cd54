"""Unit tests for intent filter aggregation."""

from apkscope.core.intents import aggregate_intent_filters, summarize_intent_filter
from apkscope.models.manifest import IntentFilterInfo
from tests.conftest import ANDROID_NS_DECL


def _filters(parse_xml, body: str):
    root = parse_xml(f"<activity {ANDROID_NS_DECL}>{body}</activity>")
    return list(root.iter("intent-filter"))


class TestIntentAggregation:
    """Tests for aggregate_intent_filters."""

    def test_actions_without_category(self, parse_xml):
        filters = _filters(
            parse_xml,
            """<intent-filter>
                 <action android:name="a1"/>
                 <action android:name="a2"/>
               </intent-filter>""",
        )
        [intent] = aggregate_intent_filters(filters)
        assert intent.to_report() == {"actions": ["a1", "a2"]}

    def test_category_only(self, parse_xml):
        filters = _filters(
            parse_xml,
            '<intent-filter><category android:name="c"/></intent-filter>',
        )
        [intent] = aggregate_intent_filters(filters)
        assert intent.to_report() == {"category": "c"}
        assert intent.actions is None

    def test_empty_filter_is_dropped(self, parse_xml):
        filters = _filters(
            parse_xml,
            "<intent-filter><!-- comment -->text<data/></intent-filter>",
        )
        assert aggregate_intent_filters(filters) == ()
        assert summarize_intent_filter(filters[0]) is None

    def test_last_category_wins(self, parse_xml):
        filters = _filters(
            parse_xml,
            """<intent-filter>
                 <category android:name="first"/>
                 <action android:name="a"/>
                 <category android:name="second"/>
               </intent-filter>""",
        )
        [intent] = aggregate_intent_filters(filters)
        assert intent == IntentFilterInfo(actions=("a",), category="second")

    def test_duplicate_actions_are_kept_in_order(self, parse_xml):
        filters = _filters(
            parse_xml,
            """<intent-filter>
                 <action android:name="b"/>
                 <action android:name="a"/>
                 <action android:name="b"/>
               </intent-filter>""",
        )
        [intent] = aggregate_intent_filters(filters)
        assert intent.actions == ("b", "a", "b")

    def test_only_direct_children_count(self, parse_xml):
        filters = _filters(
            parse_xml,
            """<intent-filter>
                 <data><action android:name="nested"/></data>
               </intent-filter>""",
        )
        assert aggregate_intent_filters(filters) == ()

    def test_unprefixed_name_attribute(self, parse_xml):
        filters = _filters(
            parse_xml,
            '<intent-filter><action name="plain"/></intent-filter>',
        )
        [intent] = aggregate_intent_filters(filters)
        assert intent.actions == ("plain",)

    def test_document_order_is_preserved(self, sample_tree):
        intents = aggregate_intent_filters(sample_tree.iter("intent-filter"))
        assert [intent.to_report() for intent in intents] == [
            {
                "actions": ["android.intent.action.MAIN"],
                "category": "android.intent.category.LAUNCHER",
            },
            {
                "actions": [
                    "android.intent.action.BOOT_COMPLETED",
                    "android.intent.action.QUICKBOOT_POWERON",
                ],
            },
        ]
