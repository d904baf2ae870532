"""Unit tests for the colour prompt."""
import pytest
from prettifier.display import ask_for_color, color_for_choice, menu_text
from prettifier.models.itinerary import RESET


class TestColorPrompt:
    """Test cases for colour selection."""

    @pytest.fixture
    def answers(self):
        """Build an input function that replays answers in order."""
        def _answers(*values):
            remaining = iter(values)

            def _input(prompt=''):
                try:
                    return next(remaining)
                except StopIteration:
                    raise EOFError
            return _input
        return _answers

    def test_valid_choice(self, answers):
        """Test that a menu number returns its directive."""
        output = []

        color = ask_for_color(answers('2'), output.append)

        assert color == "\u001B[32m"
        assert output[-1] == f"\u001B[32mYou chose this color.{RESET}"

    def test_reprompts_until_valid(self, answers):
        """Test that bad input is reported and the menu shown again."""
        output = []

        color = ask_for_color(answers('purple', '', '0', '6', ' 5 '), output.append)

        assert color == "\u001B[35m"
        assert output.count("Invalid input. Please enter a number from 1 to 5.") == 2
        assert output.count("Invalid choice. Please choose a number from 1 to 5.") == 2
        assert output.count("\nPlease choose your preferred color by number: ") == 5

    def test_eof_propagates(self, answers):
        """Test that closing stdin ends the prompt with EOFError."""
        with pytest.raises(EOFError):
            ask_for_color(answers('x'), lambda s: None)

    def test_menu_text(self):
        """Test the numbered menu listing."""
        assert menu_text() == "1. Red\n2. Green\n3. Yellow\n4. Blue\n5. Purple"

    def test_color_for_choice(self):
        """Test resolving preset colour numbers."""
        assert color_for_choice('3') == "\u001B[33m"
        assert color_for_choice(1) == "\u001B[31m"

        for bad in ('0', '6', 'red', ''):
            with pytest.raises(ValueError):
                color_for_choice(bad)
