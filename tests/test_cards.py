import pytest

from machine.cards import Card, Deck, EmptyDeckError, build_deck, cards_to_labels, parse_cards, parse_label

from .helpers import fixed_deck


def test_card_validation_rejects_invalid_labels():
    with pytest.raises(ValueError, match="Invalid rank"):
        Card("1", "H")
    with pytest.raises(ValueError, match="Invalid suit"):
        Card("A", "X")
    with pytest.raises(ValueError, match="Invalid card label"):
        parse_label("10H")


def test_card_ordinals_follow_rank_order():
    assert Card("2", "D").ordinal == 0
    assert Card("T", "C").ordinal == 8
    assert Card("A", "S").ordinal == 12
    assert str(Card("Q", "H")) == "Q♥"
    assert parse_label("th") == Card("T", "H")


def test_build_deck_holds_every_card_once():
    deck = build_deck(seed=7)
    cards = list(deck)
    assert len(deck) == 52
    assert len(set(cards)) == 52


def test_build_deck_is_reproducible_from_seed():
    assert list(build_deck(seed=3)) == list(build_deck(seed=3))
    assert list(build_deck(seed=3)) != list(build_deck(seed=4))


def test_draw_top_and_return_to_bottom():
    deck = fixed_deck(["AS", "KD", "2C"])
    top = deck.draw_top()
    assert top == Card("A", "S")
    deck.return_to_bottom(top)
    assert cards_to_labels(list(deck)) == ["KD", "2C", "AS"]
    assert deck.peek(2) == parse_cards(["KD", "2C"])


def test_draw_from_empty_deck_raises():
    deck = Deck()
    with pytest.raises(EmptyDeckError, match="empty deck"):
        deck.draw_top()
    deck.initialize()
    for _ in range(52):
        deck.draw_top()
    with pytest.raises(EmptyDeckError):
        deck.draw_top()
    with pytest.raises(EmptyDeckError, match="Cannot preview"):
        deck.peek()


def test_reshuffle_keeps_the_same_cards():
    deck = build_deck(seed=11)
    before = sorted(cards_to_labels(list(deck)))
    deck.reshuffle()
    assert sorted(cards_to_labels(list(deck))) == before
