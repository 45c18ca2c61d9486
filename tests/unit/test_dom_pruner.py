from __future__ import annotations

from eventscan.parsing.document import SoupDocumentParser
from eventscan.services.dom_pruner import DomPruner, PruneRules, prune_card
from eventscan.services.text_extractor import extract_text

_CARD = """
<div class="card-block">
  <h1 class="card-block__title">Spring Mixer</h1>
  <div class="card-border"></div>
  <div class="share">
    <a aria-label="Copy Link to this event" href="#">Copy</a>
    <span>Share with friends</span>
  </div>
  <p>Join us for free pizza!</p>
  <a class="btn btn-primary" href="/rsvp">RSVP</a>
  <button type="button">Register</button>
  <div class="text-center"><img src="/flyer.png" alt="Flyer"></div>
  <p>Bring a friend.</p>
</div>
"""


def _card(html: str = _CARD):
    root = SoupDocumentParser("html.parser").parse(html)
    card = root.select_one(".card-block")
    assert card is not None
    return root, card


def test_prune_removes_non_content_nodes() -> None:
    _, card = _card()
    DomPruner().prune(card)

    assert card.select_one(".card-block__title") is None
    assert card.select_one(".card-border") is None
    assert card.select_one(".share") is None
    assert card.select("button, a.btn, img, .text-center") == []
    assert extract_text(card) == "Join us for free pizza!\n\nBring a friend."


def test_prune_without_targets_is_a_no_op() -> None:
    _, card = _card('<div class="card-block"><p>Only text</p></div>')
    prune_card(card)
    assert extract_text(card) == "Only text"


def test_copy_link_directly_in_card_removes_only_anchor() -> None:
    root, card = _card('<div class="card-block"><a aria-label="copy link" href="#">c</a><p>Body</p></div>')
    prune_card(card)
    assert root.select_one(".card-block") is not None
    assert extract_text(card) == "Body"


def test_plain_links_are_kept() -> None:
    _, card = _card('<div class="card-block"><p>See <a aria-label="Website" href="/x">site</a></p></div>')
    prune_card(card)
    assert extract_text(card) == "See\n\nsite"


def test_custom_rules() -> None:
    _, card = _card('<div class="card-block"><p class="promo">Ad</p><p>Body</p></div>')
    prune_card(card, PruneRules(image_selectors=(".promo",)))
    assert extract_text(card) == "Body"
