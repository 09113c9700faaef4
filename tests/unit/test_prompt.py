"""Unit tests for operator prompts."""
import pytest

from ordergen.services.console.prompt import USER_ID_PROMPT, parse_user_id, prompt_user_id


class TestParseUserId:
    """Test user id parsing."""

    def test_valid(self):
        """Test numeric input parses, ignoring surrounding whitespace."""
        assert parse_user_id(" 42 \n") == 42

    @pytest.mark.parametrize("raw", ["", "abc", "4.5", "0", "-3"])
    def test_invalid(self, raw):
        """Test non-numeric and non-positive input is rejected."""
        with pytest.raises(ValueError):
            parse_user_id(raw)


class TestPromptUserId:
    """Test the interactive user id prompt."""

    def test_reprompts_until_valid(self):
        """Test invalid answers are reported and asked again."""
        answers = iter(["abc", "-4", "7"])
        prompts = []
        messages = []

        def fake_input(prompt):
            prompts.append(prompt)
            return next(answers)

        user_id = prompt_user_id(input_func=fake_input, output=messages.append)

        assert user_id == 7
        assert prompts == [USER_ID_PROMPT] * 3
        assert len(messages) == 2
        assert "'abc' is not a valid user id" in messages[0]

    def test_end_of_input_propagates(self):
        """Test EOF from the console is not swallowed."""

        def closed_input(prompt):
            raise EOFError

        with pytest.raises(EOFError):
            prompt_user_id(input_func=closed_input, output=lambda message: None)
