"""Date and time marker formatting."""
import re
import logging
from datetime import datetime

from prettifier.models.itinerary import (
    BOLD, CLOCK_EMOJI, RESET, FormattedSegment, RenderContext, TokenKind,
)

logger = logging.getLogger(__name__)

DATETIME_PATTERN = re.compile(r'(D|T12|T24)\(([^)]+)\)')

DATE_LAYOUT = re.compile(r'\d{4}-\d{2}-\d{2}')
TIME_LAYOUT = re.compile(r'(?P<time>\d{2}:\d{2})(?P<offset>Z|[+-]\d{2}:\d{2})')

ZERO_OFFSET = '+00:00'


class DateTimeFormatError(ValueError):
    """Raised when a date or time payload does not match its layout."""


class DateTimeFormatter:
    """Rewrites D(...), T12(...) and T24(...) markers as readable text."""

    def __init__(self, context: RenderContext):
        self.context = context

    def replace_date_times(self, line: str) -> str:
        """
        Replace every date/time marker in a line.

        A marker whose payload cannot be parsed is kept verbatim and a
        warning is logged; the rest of the line is still processed.
        """
        return DATETIME_PATTERN.sub(self._substitute, line)

    def _substitute(self, match) -> str:
        kind = TokenKind(match.group(1))
        payload = match.group(2)

        try:
            if kind == TokenKind.DATE:
                segment = self.format_date(payload)
            else:
                segment = self.format_time(payload, kind)
        except DateTimeFormatError as e:
            logger.warning(f"Error parsing date/time: {payload} ({e})")
            return match.group(0)

        return segment.render()

    def format_date(self, payload: str) -> FormattedSegment:
        """
        Format the date portion of a payload.

        Format: "YYYY-MM-DD" optionally followed by "T" and a time part
        Example: "2024-03-05T14:30Z" -> "05 Mar 2024"
        """
        date_part = payload.split('T')[0]

        if not DATE_LAYOUT.fullmatch(date_part):
            raise DateTimeFormatError(f"expected YYYY-MM-DD, got '{date_part}'")

        try:
            parsed = datetime.strptime(date_part, '%Y-%m-%d')
        except ValueError as e:
            raise DateTimeFormatError(str(e)) from e

        return FormattedSegment(parsed.strftime('%d %b %Y'))

    def format_time(self, payload: str, kind: TokenKind) -> FormattedSegment:
        """
        Format the time portion of a payload.

        Format: "YYYY-MM-DDTHH:MM" followed by "Z" or a signed "HH:MM" offset
        Examples:
            "2024-03-05T14:30+02:00", T24 -> "14:30 (+02:00)" plus a note
            "2024-03-05T14:30Z", T12 -> "02:30PM (+00:00)"
        """
        parts = payload.split('T')
        if len(parts) != 2:
            raise DateTimeFormatError(f"expected a 'T' separated time in '{payload}'")

        match = TIME_LAYOUT.fullmatch(parts[1])
        if not match:
            raise DateTimeFormatError(f"expected HH:MM with Z or +/-HH:MM, got '{parts[1]}'")

        offset = match.group('offset')
        if offset == 'Z':
            offset = ZERO_OFFSET

        try:
            parsed = datetime.strptime(match.group('time'), '%H:%M')
        except ValueError as e:
            raise DateTimeFormatError(str(e)) from e

        layout = '%I:%M%p' if kind == TokenKind.TIME_12H else '%H:%M'
        text = f"{parsed.strftime(layout)} ({offset})"

        if self.is_zero_offset(offset):
            return FormattedSegment(text)
        return FormattedSegment(text, self.offset_note(offset))

    @staticmethod
    def is_zero_offset(offset: str) -> bool:
        """True only for +00:00; Z is normalised to it, -00:00 is not zero."""
        return offset == ZERO_OFFSET

    def offset_note(self, offset: str) -> str:
        """
        Explain an offset such as "-05:00" in words.

        Only the hour component is described; the note is wrapped in the
        active colour with the hour phrase in bold.
        """
        hours = int(offset[1:3])
        direction = 'behind' if offset.startswith('-') else 'ahead'
        phrase = f"{hours} hour{'' if hours == 1 else 's'} {direction}"

        note = (
            f"{CLOCK_EMOJI} Note: {offset} means "
            f"{BOLD}{phrase}{RESET}{self.context.color} standard time"
        )
        return self.context.colorize(note)
