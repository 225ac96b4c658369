"""
Interactive console session: a text menu over the calculator.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from vectorcalc import config
from vectorcalc.controller.calculator import Operation, evaluate
from vectorcalc.model.parser import parse_vector

logger = logging.getLogger(__name__)

MENU = (
    "Select an option:\n"
    "\ta) Redefine A\n"
    "\tb) Redefine B\n"
    "\tc) Length of A\n"
    "\td) Length of B\n"
    "\te) A + B\n"
    "\tf) A - B\n"
    "\tg) A . B\n"
    "\th) A X B\n"
    "\ti) Distance between A and B\n"
    "\tj) Angle between A and B\n"
    "\tk) Quit\n"
)

OPTION_OPERATIONS = {
    "c": Operation.LENGTH_A,
    "d": Operation.LENGTH_B,
    "e": Operation.SUM,
    "f": Operation.DIFFERENCE,
    "g": Operation.DOT,
    "h": Operation.CROSS,
    "i": Operation.DISTANCE,
    "j": Operation.ANGLE,
}


class EndOfInput(Exception):
    """Raised when the input stream is exhausted."""


class InteractiveSession:
    """
    Menu-driven calculator reading from ``stdin`` and writing to ``stdout``.

    Vectors A and B are kept as the text the user typed; each menu option
    re-evaluates them through the calculator controller.
    """

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        max_components: Optional[int] = config.MAX_COMPONENTS,
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.max_components = max_components
        self.text_a: str = ""
        self.text_b: str = ""

    def _write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def _readline(self, prompt: str) -> str:
        self._write(prompt)
        line = self.stdin.readline()
        if not line:
            raise EndOfInput
        return line.rstrip("\n")

    def read_vector(self, prompt: str) -> str:
        """Prompt until the user enters a valid vector; return its text."""
        while True:
            text = self._readline(prompt)
            if parse_vector(text, self.max_components).ok:
                return text
            limit = f" and has at most {self.max_components} components" if self.max_components else ""
            self._write(f"ERROR! Make sure the vector is in the right format{limit}.\n\n")

    def handle_option(self, option: str) -> bool:
        """Process one menu choice. Returns False when the session should end."""
        if option == "k":
            return False
        if option == "a":
            self.text_a = self.read_vector("Enter the new value of A in the format (x; y; z; ...): ")
        elif option == "b":
            self.text_b = self.read_vector("Enter the new value of B in the format (x; y; z; ...): ")
        elif option in OPTION_OPERATIONS:
            result = evaluate(
                OPTION_OPERATIONS[option], self.text_a, self.text_b,
                max_components=self.max_components,
            )
            self._write(result.text + "\n")
        else:
            self._write("Invalid option! Try again...\n")
        return True

    def run(self) -> int:
        """Run the session until the user quits or input ends."""
        try:
            self.text_a = self.read_vector("Enter the value of A in the format (x; y; z; ...): ")
            self.text_b = self.read_vector("Enter the value of B in the format (x; y; z; ...): ")
            self._write("\n")

            while True:
                line = self._readline(MENU)
                option = line.strip()[:1]
                if not self.handle_option(option):
                    break
        except EndOfInput:
            logger.debug("Input closed, ending session.")
            self._write("\n")
        return 0
