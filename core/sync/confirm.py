"""Interactive confirmation before overwriting the remote secret."""

from typing import Callable, Iterable, Optional

import click

from core.utils.logging import get_logger

logger = get_logger(__name__)

AFFIRMATIVE = ("yes", "y")
NEGATIVE = ("no", "n")
PROMPT = "yes/no: "


class Console:
    """
    Line-based operator console backed by click's text streams.

    Tests pass a console whose read_line returns scripted answers.
    """

    def __init__(
        self,
        write: Optional[Callable[[str], None]] = None,
        read_line: Optional[Callable[[], str]] = None,
    ):
        self._write = write or (lambda text: click.echo(text, nl=False))
        self._read_line = read_line or click.get_text_stream("stdin").readline

    def write(self, text: str) -> None:
        self._write(text)

    def read_line(self) -> str:
        """Read one line; an empty string means end of input."""
        return self._read_line()


class ConfirmationGate:
    """
    Asks the operator to approve replacing a secret with a set of files.

    Usage:
        gate = ConfirmationGate(Console(), secret_id="ssh-keys")
        if gate.confirm(sorted(bundle)):
            ...
    """

    def __init__(self, console: Console, secret_id: str = "ssh-keys"):
        self.console = console
        self.secret_id = secret_id

    def confirm(self, filenames: Iterable[str]) -> bool:
        """
        List the files and loop until the operator answers yes or no.

        Returns:
            True to proceed, False if the operator declined or input ended
        """
        self.console.write(
            f"Are you sure you want to override {self.secret_id} with the following:\n"
        )
        for name in sorted(filenames):
            self.console.write(f"  - {name}\n")
        self.console.write(
            f"This will delete the existing contents of {self.secret_id}\n"
        )

        while True:
            self.console.write(PROMPT)
            line = self.console.read_line()
            if not line:
                logger.info("End of input at confirmation prompt, treating as no")
                self.console.write("\n")
                return False

            answer = line.strip().lower()
            if answer in AFFIRMATIVE:
                return True
            if answer in NEGATIVE:
                return False
            logger.debug(f"Unrecognized answer: {answer!r}")
