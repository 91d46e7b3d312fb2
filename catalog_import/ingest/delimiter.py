"""Field separator detection for delimited text exports.

The format of an uploaded file does not declare its separator, so it is
guessed from the first line. The count is taken over the literal character
stream: delimiters inside quoted text are counted too.
"""

import logging

logger = logging.getLogger(__name__)

# Evaluation order matters only for ties, which go to the earlier candidate
CANDIDATE_DELIMITERS = (",", ";", "\t", "|")
DEFAULT_DELIMITER = ","
_SAMPLE_LIMIT = 1000


def _first_line_sample(text: str) -> str:
    """Text up to the first newline, or the first 1000 chars if there is none."""
    end = text.find("\n")
    if end == -1:
        return text[:_SAMPLE_LIMIT]
    return text[:end]


def detect_delimiter(text: str) -> str:
    """Return the candidate delimiter that occurs most often in the first line.

    Only a strictly greater count replaces the current best, so ties and a
    sample with no candidates at all resolve to comma.
    """
    sample = _first_line_sample(text)
    best = DEFAULT_DELIMITER
    best_count = 0
    for candidate in CANDIDATE_DELIMITERS:
        count = sample.count(candidate)
        if count > best_count:
            best = candidate
            best_count = count

    logger.debug("Detected delimiter %r (%d occurrences in first line)", best, best_count)
    return best
