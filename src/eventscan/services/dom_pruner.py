"""Detail-card noise removal."""

from __future__ import annotations

from dataclasses import dataclass

from ..parsing.document import MarkupNode


@dataclass(frozen=True)
class PruneRules:
    title_selector: str = ".card-block__title"
    border_selector: str = ".card-border"
    copy_link_label: str = "copy link"
    button_selectors: tuple[str, ...] = ("a.btn", "button")
    image_selectors: tuple[str, ...] = ("img", ".text-center")


class DomPruner:
    """Processing layer component: strip non-content nodes from a detail card.

    Rules:
    - Mutates the given card in place (detaches subtrees)
    - A missing target is not an error
    """

    def __init__(self, rules: PruneRules | None = None):
        self._rules = rules or PruneRules()

    @property
    def rules(self) -> PruneRules:
        return self._rules

    def prune(self, card: MarkupNode) -> None:
        rules = self._rules

        for selector in (rules.title_selector, rules.border_selector):
            found = card.select_one(selector)
            if found is not None:
                found.remove()

        # "Copy link" anchors live inside their own wrapper; drop the wrapper too.
        for anchor in card.select("a[aria-label]"):
            label = (anchor.get_attribute("aria-label") or "").lower()
            if rules.copy_link_label not in label:
                continue
            wrapper = anchor.parent
            if wrapper is not None and wrapper != card:
                wrapper.remove()
            else:
                anchor.remove()

        for selector_group in (rules.button_selectors, rules.image_selectors):
            for el in card.select(", ".join(selector_group)):
                el.remove()


def prune_card(card: MarkupNode, rules: PruneRules | None = None) -> None:
    DomPruner(rules).prune(card)
