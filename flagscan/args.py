import logging
import typing as tp
import dataclasses as dt

from . import const

_logger = logging.getLogger(__name__)


class Pair(tp.NamedTuple):
    """
    A flag-like token together with the value token that followed it.
    """

    key: str
    value: str


@dt.dataclass
class Args:
    """
    The result of classifying a token sequence.

    Attributes:
        positional: Standalone data tokens, in input order.
        options: Flag-like tokens without a value, in input order.
        pairs: Flag-like tokens followed by a value, in input order.
            Repeated keys are kept, never merged.
    """

    positional: list[str] = dt.field(default_factory=list)
    options: list[str] = dt.field(default_factory=list)
    pairs: list[Pair] = dt.field(default_factory=list)

    def count(self) -> int:
        """Returns the number of input tokens accounted for."""
        return len(self.positional) + len(self.options) + 2 * len(self.pairs)


def isFlag(token: str) -> bool:
    """Checks if a token starts with the flag marker."""
    return len(token) > 0 and token[0] == const.FLAG_PREFIX


def _isValue(token: str) -> bool:
    return len(token) > 0 and not isFlag(token)


def parse(tokens: tp.Sequence[str]) -> Args:
    """
    Classifies a sequence of tokens into positional arguments, options and
    key-value pairs in a single left-to-right pass.

    Never fails: every sequence, including the empty one, yields a result.
    Note that "-5" is flag-like, there is no numeric special case.
    """
    result = Args()

    i = 0
    while i < len(tokens):
        tok = tokens[i]

        if tok == "":
            i += 1
            continue

        if not isFlag(tok):
            # A value following a flag was consumed with it, so its
            # predecessor here is never flag-like.
            if i == 0 or not isFlag(tokens[i - 1]):
                result.positional.append(tok)
            i += 1
            continue

        if i + 1 < len(tokens) and _isValue(tokens[i + 1]):
            result.pairs.append(Pair(tok, tokens[i + 1]))
            i += 2
            continue

        result.options.append(tok)
        i += 1

    _logger.debug(
        f"Parsed {len(tokens)} tokens into {len(result.positional)} positional, "
        f"{len(result.options)} options and {len(result.pairs)} pairs"
    )

    return result
