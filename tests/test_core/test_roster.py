"""
Tests for roster input validation and the retry loop.
"""

import pytest
from blackjack.core.exceptions import InputClosedError, InvalidInputError
from blackjack.core.roster import parse_names, parse_bet
from blackjack.core.rules import Message


class TestParseNames:
    """Tests for the name line validator."""

    def test_valid_names(self):
        assert parse_names("Alice,Bob") == ["Alice", "Bob"]

    def test_single_name(self):
        assert parse_names("Al") == ["Al"]

    def test_names_kept_as_typed(self):
        assert parse_names(" Al,Bo ") == [" Al", "Bo "]

    def test_boundary_lengths(self):
        assert parse_names("A,Abcde") == ["A", "Abcde"]

    @pytest.mark.parametrize("line", [
        "",          # empty line
        "Abcdef",    # 6 characters
        "Al,,Bo",    # empty token in the middle
        "Al,Bo,",    # trailing separator
        ",Al",       # leading separator
        "Abcde ",    # trailing space makes 6 characters
        "Abcde ,Bob",
        " Abcde",
    ])
    def test_invalid_names(self, line):
        with pytest.raises(InvalidInputError):
            parse_names(line)


class TestParseBet:
    """Tests for the betting amount validator."""

    def test_valid_bet(self):
        assert parse_bet("100") == 100

    def test_surrounding_whitespace(self):
        assert parse_bet("  42 ") == 42

    def test_explicit_plus_sign(self):
        assert parse_bet("+5") == 5

    @pytest.mark.parametrize("line", ["0", "-5", "abc", "", "1.5", "1_000", "10 20", "1e3"])
    def test_invalid_bet(self, line):
        with pytest.raises(InvalidInputError):
            parse_bet(line)


class TestGetNames:
    """Tests for RosterBuilder.get_names()."""

    def test_accepts_first_valid_line(self, make_roster):
        builder, io = make_roster("Alice,Bob")
        assert builder.get_names() == ["Alice", "Bob"]
        assert io.output == [Message.GET_NAME]

    def test_reprompts_until_valid(self, make_roster):
        builder, io = make_roster("", "Abcdef", "Al,,Bo", "Al,Bo")

        assert builder.get_names() == ["Al", "Bo"]
        assert io.lines_read == 4
        assert io.output == [
            Message.GET_NAME, Message.ERROR_INPUT,
            Message.GET_NAME, Message.ERROR_INPUT,
            Message.GET_NAME, Message.ERROR_INPUT,
            Message.GET_NAME,
        ]

    def test_input_closed_propagates(self, make_roster):
        builder, _ = make_roster("Abcdef")
        with pytest.raises(InputClosedError):
            builder.get_names()

    def test_many_retries_do_not_grow_the_stack(self, make_roster):
        """Retries loop rather than recurse."""
        builder, _ = make_roster(*([""] * 5000), "Al")
        assert builder.get_names() == ["Al"]


class TestGetBettingAmount:
    """Tests for RosterBuilder.get_betting_amount()."""

    def test_prompt_contains_name(self, make_roster):
        builder, io = make_roster("100")
        assert builder.get_betting_amount("Al") == 100
        assert io.output == [Message.BET_PLAYER.format(name="Al")]
        assert "Al" in io.output[0]

    def test_reprompts_until_valid(self, make_roster):
        builder, io = make_roster("0", "-5", "abc", "7")

        assert builder.get_betting_amount("Bo") == 7
        assert io.output.count(Message.ERROR_INPUT) == 3
        assert io.output.count(Message.BET_PLAYER.format(name="Bo")) == 4

    def test_one_line_consumed_per_prompt(self, make_roster):
        builder, io = make_roster("abc", "10", "20")
        assert builder.get_betting_amount("Al") == 10
        assert io.lines == ["20"]


class TestBuildRoster:
    """Tests for RosterBuilder.build_roster()."""

    def test_players_in_input_order(self, make_roster):
        builder, _ = make_roster("Cy,Al,Bo", "30", "10", "20")
        players = builder.build_roster()

        assert [p.name for p in players] == ["Cy", "Al", "Bo"]
        assert [p.bet for p in players] == [30, 10, 20]
        assert all(p.hand == [] for p in players)

    def test_invalid_lines_in_both_steps(self, make_roster):
        builder, io = make_roster("", "Al,Bo", "x", "10", "0", "20")
        players = builder.build_roster()

        assert [(p.name, p.bet) for p in players] == [("Al", 10), ("Bo", 20)]
        assert io.output.count(Message.ERROR_INPUT) == 3
        assert io.remaining == 0

    def test_duplicate_names_are_allowed(self, make_roster):
        builder, _ = make_roster("Al,Al", "1", "2")
        assert [p.bet for p in builder.build_roster()] == [1, 2]
