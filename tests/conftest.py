"""Shared test fixtures for all test modules."""

import logging
from textwrap import dedent

import pytest
import structlog

from speechcards.outline.node import OutlineNode


@pytest.fixture(autouse=True, scope="session")
def quiet_logging():
    """Drop structlog output during tests (the default config prints to stdout)."""
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.CRITICAL))
    yield
    structlog.reset_defaults()


@pytest.fixture
def drawing_outline() -> str:
    """Pure-indentation outline with two sections."""
    return dedent(
        """\
        How to draw
           Understanding perspective
              1 point perspective
              2 point perspective
           Color theory
              Warm vs cool colors"""
    )


@pytest.fixture
def speech_outline() -> str:
    """Speech outline with two chapters and a collapsed subtree."""
    return dedent(
        """\
        Speech
           Intro
              Hook
                 Start with a question
                 Surprising fact
              Thesis
           Body
              Point one
              Point two
                 Evidence
                    Study from 2020"""
    )


@pytest.fixture
def family() -> OutlineNode:
    """Parent with children A, B, C."""
    return OutlineNode("Parent", children=[OutlineNode("A"), OutlineNode("B"), OutlineNode("C")])


@pytest.fixture
def check_links():
    """Assert that every child points back at its parent and roots have no parent."""

    def assert_links_consistent(roots):
        def check(node, parent):
            assert node.parent is parent
            for child in node.children:
                check(child, node)

        for root in roots:
            check(root, None)

    return assert_links_consistent
