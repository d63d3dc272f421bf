"""
Tokenizer for a single line of shell input.

Splitting is on runs of whitespace only. There is no quoting, escaping,
or comment handling.
"""

from dataclasses import dataclass, field
from typing import List, Optional


def tokenize(line: str) -> List[str]:
    """
    Split a line into whitespace-delimited tokens.

    Leading and trailing whitespace and empty fragments are discarded.

    Examples:
        >>> tokenize('  echo   a b  ')
        ['echo', 'a', 'b']
        >>> tokenize('   ')
        []
    """
    return line.split()


@dataclass(frozen=True)
class CommandLine:
    """
    One user input: the raw text and its tokens.

    Attributes:
        raw: Line exactly as read (may include the trailing newline)
        tokens: Whitespace-delimited tokens
    """

    raw: str
    tokens: List[str] = field(default_factory=list)

    @classmethod
    def parse(cls, raw: str) -> 'CommandLine':
        return cls(raw=raw, tokens=tokenize(raw))

    @property
    def is_empty(self) -> bool:
        return not self.tokens

    @property
    def command(self) -> Optional[str]:
        """Leading token, or None for an empty line"""
        return self.tokens[0] if self.tokens else None

    @property
    def args(self) -> List[str]:
        return self.tokens[1:]

    def __repr__(self):
        return f"CommandLine({' '.join(self.tokens)!r})"
