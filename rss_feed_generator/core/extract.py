"""
Delimited text extraction.

Locates the text between a start marker and the first end marker after it.
There is no awareness of nesting: an end marker inside a nested structure
closes the region early.
"""

from typing import NamedTuple


class Extraction(NamedTuple):
    """Result of a single extraction.

    ``start`` and ``end`` are absolute offsets in the searched source. A miss
    is signalled by ``end == -1``; use ``found`` rather than comparing offsets.
    """

    text: str
    start: int
    end: int

    @property
    def found(self) -> bool:
        return self.end != -1


NOT_FOUND = Extraction("", -1, -1)


def extract(source: str, start: str, end: str, index: int = 0) -> Extraction:
    """Extract the trimmed text between ``start`` and ``end``.

    Args:
        source: Text to search.
        start: Marker preceding the wanted text.
        end: Marker following the wanted text.
        index: Offset at which the search for ``start`` begins.

    Returns:
        The stripped text with the offset right after ``start`` and the
        offset where ``end`` begins. When ``start`` is missing the result is
        ``NOT_FOUND``; when only ``end`` is missing the start offset is kept
        and the end offset is -1.
    """
    start_index = source.find(start, index)
    if start_index == -1:
        return NOT_FOUND
    start_index += len(start)

    end_index = source.find(end, start_index)
    if end_index == -1:
        return Extraction("", start_index, -1)

    return Extraction(source[start_index:end_index].strip(), start_index, end_index)
