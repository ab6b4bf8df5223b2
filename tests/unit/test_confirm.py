"""Tests for the confirmation gate."""

import pytest

from core.sync.confirm import ConfirmationGate, Console


def scripted_console(*answers):
    """Console that replays answers and records everything written."""
    lines = iter(answers)
    written = []
    console = Console(write=written.append, read_line=lambda: next(lines, ""))
    return console, written


class TestConfirmationGate:
    """Tests for ConfirmationGate.confirm."""

    @pytest.mark.parametrize("answer", ["yes\n", "y\n", "YES\n", "Yes\n", "  y  \n"])
    def test_affirmative(self, answer):
        """Should proceed on yes/y in any case."""
        console, _ = scripted_console(answer)

        assert ConfirmationGate(console).confirm(["id_rsa"]) is True

    @pytest.mark.parametrize("answer", ["no\n", "n\n", "NO\n", "No\n"])
    def test_negative(self, answer):
        """Should decline on no/n in any case."""
        console, _ = scripted_console(answer)

        assert ConfirmationGate(console).confirm(["id_rsa"]) is False

    def test_reprompts_until_valid_answer(self):
        """Unrecognized input should prompt again."""
        # Arrange
        console, written = scripted_console("maybe\n", "\n", "YES\n")
        gate = ConfirmationGate(console)

        # Act
        result = gate.confirm(["id_rsa"])

        # Assert
        assert result is True
        assert written.count("yes/no: ") == 3

    def test_end_of_input_declines(self):
        """Running out of input should count as no."""
        console, written = scripted_console("maybe\n")

        assert ConfirmationGate(console).confirm(["id_rsa"]) is False
        assert written.count("yes/no: ") == 2

    def test_lists_files_sorted_with_warning(self):
        """Should show the sorted filenames and the overwrite warning."""
        # Arrange
        console, written = scripted_console("y\n")
        gate = ConfirmationGate(console, secret_id="team-keys")

        # Act
        gate.confirm(["id_rsa.pub", "config", "id_rsa"])

        # Assert
        output = "".join(written)
        assert output.startswith(
            "Are you sure you want to override team-keys with the following:\n"
            "  - config\n"
            "  - id_rsa\n"
            "  - id_rsa.pub\n"
            "This will delete the existing contents of team-keys\n"
        )
