"""Aggregation of `intent-filter` declarations into action/category summaries."""

from collections.abc import Iterable
from functools import reduce
from typing import NamedTuple

from lxml import etree

from apkscope.core.tree import element_children, get_attribute, tag_name
from apkscope.models.manifest import IntentFilterInfo


class _FilterState(NamedTuple):
    actions: tuple[str, ...] = ()
    category: str | None = None


def _fold_child(state: _FilterState, child: etree._Element) -> _FilterState:
    name = get_attribute(child, "name")
    if name is None:
        return state

    tag = tag_name(child)
    if tag == "action":
        return state._replace(actions=state.actions + (name,))
    if tag == "category":
        # Last category wins
        return state._replace(category=name)
    return state


def summarize_intent_filter(node: etree._Element) -> IntentFilterInfo | None:
    """Summarize one filter, or return None if it declares nothing."""
    state = reduce(_fold_child, element_children(node), _FilterState())
    if not state.actions and state.category is None:
        return None
    return IntentFilterInfo(
        actions=state.actions or None,
        category=state.category,
    )


def aggregate_intent_filters(
    nodes: Iterable[etree._Element],
) -> tuple[IntentFilterInfo, ...]:
    """Summarize intent filters in document order, dropping empty ones.

    Args:
        nodes: `intent-filter` elements.

    Returns:
        One IntentFilterInfo per filter that has at least one action or
        a category.
    """
    summaries = (summarize_intent_filter(node) for node in nodes)
    return tuple(summary for summary in summaries if summary is not None)
