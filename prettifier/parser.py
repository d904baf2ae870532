"""Parser module for airport code markers."""
import re
import logging
from typing import List, Optional, Sequence

from prettifier.models.itinerary import CodeMapping, RenderContext, Token, TokenKind

logger = logging.getLogger(__name__)


class CodeMatcher:
    """Finds one family of code markers in a line."""

    def __init__(self, kind: TokenKind, pattern: str):
        self.kind = kind
        self.pattern: re.Pattern = re.compile(pattern)

    def find(self, line: str) -> List[Token]:
        """Return every marker of this family in the line, left to right."""
        return [
            Token(self.kind, match.group(0), match.group(0).lstrip('*#'), match.span())
            for match in self.pattern.finditer(line)
        ]

    def __repr__(self) -> str:
        return f"<CodeMatcher {self.kind.value} {self.pattern.pattern!r}>"


# Applied in this order. A city marker contains a plain airport marker, so it
# has to be consumed first; the look-behinds keep the plain matchers from
# firing inside a longer marker that was left unresolved.
CODE_MATCHERS = (
    CodeMatcher(TokenKind.CITY, r'\*(?:#[A-Z]{3}|##[A-Z]{4})(?![A-Za-z])'),
    CodeMatcher(TokenKind.IATA, r'(?<![#*])#[A-Z]{3}(?![A-Za-z])'),
    CodeMatcher(TokenKind.ICAO, r'(?<![#*])##[A-Z]{4}(?![A-Za-z])'),
)


class ItineraryParser:
    """Replaces airport code markers with names from the lookup."""

    def __init__(self, mapping: CodeMapping, context: RenderContext,
                 matchers: Sequence[CodeMatcher] = CODE_MATCHERS):
        self.mapping = mapping
        self.context = context
        self.matchers = tuple(matchers)

    def find_tokens(self, line: str) -> List[Token]:
        """List the code markers of a line, grouped in matcher order."""
        tokens = []
        for matcher in self.matchers:
            tokens.extend(matcher.find(line))
        return tokens

    def resolve(self, token: Token) -> Optional[str]:
        """Display name for a marker, or None when the code is unknown."""
        return self.mapping.lookup(token.kind, token.raw)

    def replace_codes(self, line: str) -> str:
        """
        Substitute every resolvable code marker in a line.

        Each matcher runs over the output of the previous one. All
        occurrences of a known marker are replaced; unknown markers are
        left exactly as written.
        """
        for matcher in self.matchers:
            line = matcher.pattern.sub(lambda match: self._substitute(matcher.kind, match), line)
        return line

    def _substitute(self, kind: TokenKind, match) -> str:
        code = match.group(0)
        name = self.mapping.lookup(kind, code)

        if name is None:
            logger.debug(f"No lookup entry for {code}, leaving as is")
            return code

        return self.context.colorize(name)
