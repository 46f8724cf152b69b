"""Tests for the perfectfour command: chain output, argument errors,
negative numbers, and the --max-iterations/--config/--verbose options.

Uses Typer's CliRunner, which captures stdout and stderr separately;
``result.output`` holds both.
"""

from __future__ import annotations

from perfectfour.cli import app


class TestChainOutput:
    def test_four(self, runner):
        result = runner.invoke(app, ["4"])
        assert result.exit_code == 0
        assert result.output == (
            "1: Four is 4\n"
            "Four is the perfect number.\n"
            "\n"
            "It took 0 iterations to reach four.\n"
        )

    def test_zero(self, runner):
        result = runner.invoke(app, ["0"])
        assert result.exit_code == 0
        assert result.output.splitlines()[:2] == ["1: Zero is 4", "2: Four is 4"]
        assert "It took 1 iterations to reach four." in result.output

    def test_one_hundred_twenty_three(self, runner):
        result = runner.invoke(app, ["123"])
        assert result.exit_code == 0
        assert result.output.splitlines()[:7] == [
            "1: One hundred twenty-three is 24",
            "2: Twenty-four is 11",
            "3: Eleven is 6",
            "4: Six is 3",
            "5: Three is 5",
            "6: Five is 4",
            "7: Four is 4",
        ]
        assert "It took 6 iterations to reach four." in result.output

    def test_big_number(self, runner):
        result = runner.invoke(app, ["1000000000000000000000000"])
        assert result.exit_code == 0
        assert result.output.startswith("1: One septillion is 14\n")


class TestNegativeNumbers:
    def test_negative_without_separator(self, runner):
        result = runner.invoke(app, ["-5"])
        assert result.exit_code == 0
        assert result.output.startswith("1: Negative five is 13\n")

    def test_negative_multi_digit(self, runner):
        result = runner.invoke(app, ["-42"])
        assert result.exit_code == 0
        assert result.output.startswith("1: Negative forty-two is 18\n")

    def test_negative_after_separator(self, runner):
        result = runner.invoke(app, ["--", "-5"])
        assert result.exit_code == 0
        assert result.output.startswith("1: Negative five is 13\n")


class TestArgumentErrors:
    def test_missing_argument(self, runner):
        result = runner.invoke(app, [])
        assert result.exit_code == 1
        assert "Provide a number as an argument" in result.stderr
        assert result.stdout == ""

    def test_not_a_number(self, runner):
        result = runner.invoke(app, ["abc"])
        assert result.exit_code == 1
        assert "Argument must be a number, instead received `abc`" in result.stderr
        assert result.stdout == ""

    def test_markup_in_argument_is_shown_verbatim(self, runner):
        result = runner.invoke(app, ["[bold]x"])
        assert result.exit_code == 1
        assert "`[bold]x`" in result.stderr

    def test_emoji_shortcode_in_argument_is_shown_verbatim(self, runner):
        result = runner.invoke(app, [":thumbs_up:"])
        assert result.exit_code == 1
        assert "instead received `:thumbs_up:`" in result.stderr

    def test_too_large(self, runner):
        result = runner.invoke(app, ["1" + "0" * 306])
        assert result.exit_code == 1
        assert "307 digits" in result.stderr
        assert result.stdout == ""


class TestOptions:
    def test_max_iterations_exceeded(self, runner):
        result = runner.invoke(app, ["--max-iterations", "1", "3"])
        assert result.exit_code == 1
        assert "Did not reach four within 1 iterations" in result.output

    def test_max_iterations_sufficient(self, runner):
        result = runner.invoke(app, ["-m", "2", "3"])
        assert result.exit_code == 0
        assert "3: Four is 4" in result.output

    def test_max_iterations_must_be_positive(self, runner):
        result = runner.invoke(app, ["-m", "0", "3"])
        assert result.exit_code != 0

    def test_config_hides_summary(self, runner, write_config):
        path = write_config({"show_summary": False})
        result = runner.invoke(app, ["--config", str(path), "0"])
        assert result.exit_code == 0
        assert result.output == "1: Zero is 4\n2: Four is 4\n"

    def test_cli_flag_overrides_config(self, runner, write_config):
        path = write_config({"max_iterations": 50})
        result = runner.invoke(app, ["-c", str(path), "-m", "1", "3"])
        assert result.exit_code == 1
        assert "within 1 iterations" in result.output

    def test_missing_config(self, runner, tmp_path):
        result = runner.invoke(app, ["-c", str(tmp_path / "missing.json"), "4"])
        assert result.exit_code == 1
        assert "Config file not found" in result.output

    def test_verbose(self, runner):
        result = runner.invoke(app, ["--verbose", "4"])
        assert result.exit_code == 0
        assert "1: Four is 4" in result.output

    def test_config_path_is_directory(self, runner, tmp_path):
        result = runner.invoke(app, ["-c", str(tmp_path), "4"])
        assert result.exit_code == 1
        assert "Cannot read config file" in result.stderr
        assert result.stdout == ""
