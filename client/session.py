"""Interactive menu session driving the cluster client."""

from abc import ABC, abstractmethod
from typing import Callable, Optional, TextIO
import sys

from client.cluster_client import ClusterClient
from protocol.messages import Result
from utils.logging import get_logger

logger = get_logger(__name__)

MENU_FROM_FILE = 1
MENU_FROM_DB = 2


class InputProvider(ABC):
    """Source of operator answers."""

    @abstractmethod
    def read_string(self, prompt: str) -> str:
        """Read one line of text."""

    @abstractmethod
    def read_int(self, prompt: str) -> int:
        """Read an integer, asking again until one is entered."""

    @abstractmethod
    def read_float(self, prompt: str) -> float:
        """Read a floating point number, asking again until one is entered."""

    @abstractmethod
    def read_char(self, prompt: str) -> str:
        """Read a single character, or an empty string for an empty answer."""


class ConsoleInput(InputProvider):
    """InputProvider reading answers from the terminal."""

    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        out: Optional[TextIO] = None,
    ):
        self._input = input_func
        self._out = out if out is not None else sys.stdout

    def read_string(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def read_int(self, prompt: str) -> int:
        while True:
            answer = self._input(prompt).strip()
            try:
                return int(answer)
            except ValueError:
                print(f"Not an integer: {answer!r}", file=self._out)

    def read_float(self, prompt: str) -> float:
        while True:
            answer = self._input(prompt).strip()
            try:
                return float(answer)
            except ValueError:
                print(f"Not a number: {answer!r}", file=self._out)

    def read_char(self, prompt: str) -> str:
        return self._input(prompt).strip()[:1]


class SessionController:
    """
    Menu loop letting an operator cluster data from a file or a table.

    Server refusals are printed and the operator is asked again; transport
    and framing errors propagate and end the session.
    """

    def __init__(
        self,
        client: ClusterClient,
        inputs: InputProvider,
        out: Optional[TextIO] = None,
    ):
        """
        Initialize the session.

        Args:
            client: Connected cluster client
            inputs: Source of operator answers
            out: Stream for menu and results (default: sys.stdout)
        """
        self._client = client
        self._inputs = inputs
        self._out = out if out is not None else sys.stdout

    def run(self) -> None:
        """Run menu iterations until the operator declines another one."""
        while True:
            choice = self.menu()
            if choice == MENU_FROM_FILE:
                self.cluster_from_file()
            else:
                self.cluster_from_db()

            answer = self._inputs.read_char("would you choose a new operation from menu?(y/n)")
            if answer != 'y':
                break

        logger.info("Session finished by operator")

    def menu(self) -> int:
        """
        Show the menu and read a valid choice.

        Returns:
            MENU_FROM_FILE or MENU_FROM_DB
        """
        while True:
            self._print("(1) Load clusters from file")
            self._print("(2) Load data from db")
            answer = self._inputs.read_int("(1/2):")
            if answer in (MENU_FROM_FILE, MENU_FROM_DB):
                return answer

    def cluster_from_file(self) -> None:
        """Load and print a cluster set stored in a server-side file."""
        file_name = self._inputs.read_string("File Name:")
        result = self._client.cluster_from_file(file_name)
        if self._report_refusal(result):
            return
        self._print(result.payload)

    def cluster_from_db(self) -> None:
        """Load a table, then cluster and store it until the operator stops."""
        while True:
            table_name = self._inputs.read_string("Table name:")
            if not self._report_refusal(self._client.load_table_from_db(table_name)):
                break

        while True:
            self._cluster_loaded_table()
            answer = self._inputs.read_char("Would you repeat?(y/n)")
            if answer.lower() != 'y':
                break

    def _cluster_loaded_table(self) -> None:
        radius = self._read_radius()
        result = self._client.cluster_from_db_table(radius)
        if self._report_refusal(result):
            return

        self._print(f"Number of Clusters:{result.payload.count}")
        self._print(result.payload.description)

        file_name = self._inputs.read_string("File Name:")
        self._report_refusal(self._client.store_cluster_to_file(file_name))

    def _read_radius(self) -> float:
        while True:
            radius = self._inputs.read_float("Radius:")
            if radius > 0:
                return radius

    def _report_refusal(self, result: Result) -> bool:
        if result.ok:
            return False
        self._print(result.message)
        return True

    def _print(self, text: str) -> None:
        print(text, file=self._out)
