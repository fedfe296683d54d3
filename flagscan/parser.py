import re
import logging

from typing import Optional, Sequence
from . import args as argsmod

_logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"[+-]?[0-9]+")


class CoercionError(RuntimeError):
    """
    Raised when an argument value is requested as an integer but is not
    base-10 integer text.
    """

    def __init__(self, key: str, value: str):
        super().__init__(f"Argument '{key}' expects an integer but got '{value}'")
        self.key = key
        self.value = value


class Parser:
    """
    Parses command-line tokens and gives access to the result.

    The tokens can be given at construction or later to `parse()`; tokens
    given at construction take precedence:

        parser = Parser(sys.argv[1:])
        parser.parse()

        if parser.hasOption("--help", "-h"):
            ...

        name = parser.getString("--name", "-n")

    Accessors read the state produced by the last `parse()` call. Concurrent
    reads are safe once parsing is done, but `parse()` itself must not be
    called from several threads on the same instance.
    """

    _raw: list[str]
    _result: argsmod.Args

    def __init__(self, tokens: Optional[Sequence[str]] = None):
        self._raw = list(tokens) if tokens is not None else []
        self._result = argsmod.Args()

    def parse(self, tokens: Optional[Sequence[str]] = None) -> bool:
        """
        Classifies the tokens and stores the result.

        Args:
            tokens: Used only if the parser was constructed without tokens.

        Returns:
            Always True, classification cannot fail.
        """
        if tokens is not None and len(self._raw) == 0:
            self._raw = list(tokens)
        elif tokens is not None:
            _logger.debug("Ignoring tokens passed to parse(), using the ones given at construction")

        self._result = argsmod.parse(self._raw)
        return True

    # --- Positional --------------------------------------------------------- #

    def positional(self) -> list[str]:
        return list(self._result.positional)

    def at(self, index: int) -> Optional[str]:
        """Returns the positional argument at `index`, or None if there is none."""
        if 0 <= index < len(self._result.positional):
            return self._result.positional[index]
        return None

    # --- Options ------------------------------------------------------------ #

    def options(self) -> list[str]:
        return list(self._result.options)

    def hasOption(self, name: str, *aliases: str) -> bool:
        """Checks if the option, or any of its aliases, was given."""
        names = (name, *aliases)
        return any(opt in names for opt in self._result.options)

    # --- Arguments ---------------------------------------------------------- #

    def args(self) -> list[argsmod.Pair]:
        return list(self._result.pairs)

    def get(self, name: str, *aliases: str) -> list[str]:
        """
        Returns every value given for the argument or any of its aliases,
        in input order.

            $ myapp --name foo -n bar --name baz

            parser.get("--name", "-n")  # ["foo", "bar", "baz"]
        """
        names = (name, *aliases)
        return [pair.value for pair in self._result.pairs if pair.key in names]

    def _lookup(self, names: tuple[str, ...]) -> Optional[argsmod.Pair]:
        for pair in reversed(self._result.pairs):
            if pair.key in names:
                return pair
        return None

    def getString(self, name: str, *aliases: str) -> Optional[str]:
        """
        Returns the value of the argument, or None if it was not given.

        When the argument was given several times the rightmost value wins:

            $ myapp --name foo --name bar --name baz

            parser.getString("--name")  # "baz"
        """
        pair = self._lookup((name, *aliases))
        if pair is None:
            return None
        return pair.value

    def getInt(self, name: str, *aliases: str) -> Optional[int]:
        """
        Same as `getString()` but parses the value as a base-10 integer.

        Raises:
            CoercionError: The value is not an integer.
        """
        pair = self._lookup((name, *aliases))
        if pair is None:
            return None

        if not _INT_RE.fullmatch(pair.value):
            raise CoercionError(pair.key, pair.value)

        return int(pair.value, 10)


ArgsParser = Parser
