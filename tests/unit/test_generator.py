"""Unit tests for card generation."""

from textwrap import dedent

import pytest
from pydantic import ValidationError

from speechcards.cards.generator import CardGenerator, flatten_bullets, generate_cards, number_cards
from speechcards.models.card import BulletItem, SpeechCard
from speechcards.outline.node import OutlineNode
from speechcards.outline.parser import parse


def cards_for(text, **kwargs):
    return generate_cards(parse(text).nodes, **kwargs)


class TestGenerateCards:
    """Tests for generate_cards."""

    def test_empty_outline(self):
        assert generate_cards([]) == []

    def test_single_root_leaf(self):
        """Test that a lone root is a card with no breadcrumb."""
        cards = cards_for("Topic")

        assert len(cards) == 1
        assert cards[0].topic == "Topic"
        assert cards[0].breadcrumb == ()
        assert not cards[0].has_bullets

    def test_only_leaves_become_cards(self, drawing_outline):
        """Test that structural nodes feed breadcrumbs instead of cards."""
        cards = cards_for(drawing_outline)

        assert [card.topic for card in cards] == [
            "1 point perspective",
            "2 point perspective",
            "Warm vs cool colors",
        ]

    def test_breadcrumb_path(self, drawing_outline):
        cards = cards_for(drawing_outline)

        assert cards[0].breadcrumb == ("How to draw", "Understanding perspective")
        assert cards[2].breadcrumb == ("How to draw", "Color theory")

    def test_full_path(self, drawing_outline):
        cards = cards_for(drawing_outline)

        assert cards[0].full_path == "How to draw > Understanding perspective > 1 point perspective"

    def test_depth_three_collapses_into_bullets(self):
        """Test that a depth-2 node with children becomes one bulleted card."""
        text = "Speech\n   Intro\n      Hook\n         Start with a question\n         Surprising fact"
        cards = cards_for(text)

        assert len(cards) == 1
        card = cards[0]
        assert card.topic == "Hook"
        assert card.breadcrumb == ("Speech", "Intro")
        assert [bullet.text for bullet in card.bullets] == ["Start with a question", "Surprising fact"]
        assert all(bullet.indent_level == 0 for bullet in card.bullets)
        assert card.has_bullets

    def test_nested_bullets_have_indent_levels(self, speech_outline):
        """Test that bullet indent is relative to the card topic."""
        cards = cards_for(speech_outline)

        assert [card.topic for card in cards] == ["Hook", "Thesis", "Point one", "Point two"]
        point_two = cards[3]
        assert [(bullet.text, bullet.indent_level) for bullet in point_two.bullets] == [
            ("Evidence", 0),
            ("Study from 2020", 1),
        ]

    def test_leaf_at_depth_two_has_no_bullets(self, speech_outline):
        """Test that depth alone does not make a bulleted card."""
        thesis = cards_for(speech_outline)[1]

        assert thesis.topic == "Thesis"
        assert thesis.bullets == ()

    def test_root_level_leaves_between_sections(self):
        """Test that shallow leaves next to sections get empty breadcrumbs."""
        cards = cards_for("Opening\nMain\n   Point\nClosing")

        assert [(card.breadcrumb, card.topic) for card in cards] == [
            ((), "Opening"),
            (("Main",), "Point"),
            ((), "Closing"),
        ]

    def test_cards_are_numbered(self, speech_outline):
        """Test ordinal and total on every card."""
        cards = cards_for(speech_outline)

        for i, card in enumerate(cards):
            assert card.ordinal == i + 1
            assert card.total == len(cards)

    def test_custom_structural_depth(self, drawing_outline):
        """Test collapsing one level earlier."""
        cards = cards_for(drawing_outline, max_structural_depth=2)

        assert [card.topic for card in cards] == ["Understanding perspective", "Color theory"]
        assert len(cards[0].bullets) == 2

    def test_header_document(self):
        """Test cards from a header-based outline."""
        markdown = dedent(
            """\
            # Talk
            ## Opening
            - Greeting
            ## Close
            - Thanks"""
        )
        cards = cards_for(markdown)

        assert [(card.breadcrumb, card.topic) for card in cards] == [
            (("Talk", "Opening"), "Greeting"),
            (("Talk", "Close"), "Thanks"),
        ]

    def test_every_node_is_represented(self, speech_outline):
        """Test that every outline with nodes yields at least one card."""
        result = parse(speech_outline)
        cards = generate_cards(result.nodes)

        bullets = sum(len(card.bullets) for card in cards)
        breadcrumb_nodes = 3  # Speech, Intro, Body
        assert len(cards) + bullets + breadcrumb_nodes == result.total_nodes

    def test_generator_object(self, drawing_outline):
        generator = CardGenerator(max_structural_depth=2)

        assert len(generator.generate(parse(drawing_outline).nodes)) == 2


class TestHelpers:
    """Tests for bullet flattening and numbering."""

    def test_flatten_bullets_document_order(self):
        node = OutlineNode("Topic")
        first = node.add_child("First")
        first.add_child("First child")
        node.add_child("Second")

        assert [(b.text, b.indent_level) for b in flatten_bullets(node)] == [
            ("First", 0),
            ("First child", 1),
            ("Second", 0),
        ]

    def test_number_cards_returns_copies(self):
        """Test that numbering leaves the input untouched."""
        original = [SpeechCard(topic="A"), SpeechCard(topic="B")]

        numbered = number_cards(original)

        assert [(card.ordinal, card.total) for card in numbered] == [(1, 2), (2, 2)]
        assert original[0].ordinal == 0
        assert numbered[0] is not original[0]

    def test_renumber_after_filtering(self, drawing_outline):
        """Test that numbering is reassigned when the list changes."""
        cards = cards_for(drawing_outline)[1:]

        renumbered = number_cards(cards)

        assert [card.ordinal for card in renumbered] == [1, 2]
        assert all(card.total == 2 for card in renumbered)


class TestCardModels:
    """Tests for SpeechCard and BulletItem."""

    def test_cards_are_frozen(self):
        card = SpeechCard(topic="Topic")

        with pytest.raises(ValidationError):
            card.topic = "Changed"

    def test_bullet_indent(self):
        assert BulletItem(text="x", indent_level=2).indent == 24

    def test_negative_indent_rejected(self):
        with pytest.raises(ValidationError):
            BulletItem(text="x", indent_level=-1)

    def test_path(self):
        card = SpeechCard(breadcrumb=("A", "B"), topic="C")

        assert card.path() == ["A", "B", "C"]
        assert card.full_path == "A > B > C"
