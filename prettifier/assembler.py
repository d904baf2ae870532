"""Document assembly: per-line substitution, cleanup and output."""
import logging
from typing import Callable, Iterable, List

from prettifier.date_formatter import DateTimeFormatter
from prettifier.models.itinerary import OutputLine
from prettifier.parser import ItineraryParser

logger = logging.getLogger(__name__)

# Escapes written literally in the input, e.g. "Gate 4\vBoarding"
LINE_BREAK_ESCAPES = ('\\v', '\\f', '\\r')


def normalize_line(line: str) -> str:
    """Turn literal \\v, \\f and \\r escapes into line breaks."""
    for escape in LINE_BREAK_ESCAPES:
        line = line.replace(escape, '\n')
    return line


def collapse_blank_lines(lines: Iterable[str]) -> List[str]:
    """Trim every line and squeeze runs of blank lines down to one."""
    cleaned = []
    previous_blank = False

    for line in lines:
        line = line.strip()

        if line:
            cleaned.append(line)
            previous_blank = False
        elif not previous_blank:
            cleaned.append('')
            previous_blank = True

    return cleaned


class DocumentAssembler:
    """Runs code and date/time substitution over a whole document."""

    def __init__(self, parser: ItineraryParser, formatter: DateTimeFormatter):
        self.parser = parser
        self.formatter = formatter

    def process_line(self, line: str) -> List[str]:
        """Substitute one input line; escapes may split it into several."""
        results = []
        for part in normalize_line(line).split('\n'):
            part = self.parser.replace_codes(part)
            part = self.formatter.replace_date_times(part)
            results.append(part)
        return results

    def process_lines(self, lines: Iterable[str]) -> List[str]:
        processed = []
        for line in lines:
            processed.extend(self.process_line(line))
        return processed

    def process_text(self, text: str) -> List[OutputLine]:
        """Process a full document and return the cleaned output lines."""
        lines = text.split('\n')
        if lines and lines[-1] == '':
            lines.pop()
        processed = self.process_lines(lines)
        cleaned = collapse_blank_lines(processed)

        logger.info(f"Processed {len(processed)} line(s), {len(cleaned)} after cleanup")
        return [OutputLine(line) for line in cleaned]


def write_output(lines: Iterable[OutputLine], path: str,
                 echo: Callable[[str], None] = print) -> int:
    """
    Echo each coloured line and write its plain version to path.

    Returns:
        Number of lines written

    Raises:
        OSError: if the output file cannot be written
    """
    count = 0
    with open(path, 'w', encoding='utf-8') as f:
        for line in lines:
            echo(line.text)
            f.write(line.plain + '\n')
            count += 1

    logger.info(f"Wrote {count} line(s) to {path}")
    return count
