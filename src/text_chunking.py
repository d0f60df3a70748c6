import spacy
from typing import List, Dict, Any

from config import CHUNK_SIZE, CHUNK_OVERLAP

# Rule-based sentence boundaries; no trained pipeline required
nlp = spacy.blank("en")
nlp.add_pipe("sentencizer")


def split_long_line(line: str, chunk_size: int) -> List[str]:
    """Break a line that cannot fit in one chunk into its sentences."""
    if len(line) <= chunk_size:
        return [line]
    doc = nlp(line)
    return [sent.text.strip() for sent in doc.sents if sent.text.strip()]


def chunk_text(text: str, chunk_size: int = CHUNK_SIZE, chunk_overlap: int = CHUNK_OVERLAP) -> List[str]:
    """
    Split text into overlapping chunks of approximately chunk_size characters.

    Lines are kept whole and joined back with newlines so that each chunk
    still carries the line structure of the page.

    Args:
        text: The text to split into chunks
        chunk_size: The target size of each chunk in characters
        chunk_overlap: The maximum number of characters repeated from the
            end of one chunk at the start of the next

    Returns:
        A list of text chunks
    """
    if not text or not text.strip() or chunk_size <= 0:
        return []

    # Ensure chunk_overlap is smaller than chunk_size
    chunk_overlap = max(0, min(chunk_overlap, chunk_size - 1))

    units = []
    for line in text.splitlines():
        units.extend(split_long_line(line, chunk_size))

    chunks = []
    current_chunk = []
    current_size = 0

    for unit in units:
        unit_len = len(unit) + 1  # +1 for newline

        # If adding this line would exceed the chunk size, finalize the current chunk
        if current_size + unit_len > chunk_size and current_chunk:
            chunks.append("\n".join(current_chunk))

            # Carry trailing lines over while they fit in the overlap
            overlap_size = 0
            overlap_units = []
            for previous in reversed(current_chunk):
                if overlap_size + len(previous) + 1 > chunk_overlap:
                    break
                overlap_size += len(previous) + 1
                overlap_units.insert(0, previous)

            # Drop the overlap when it leaves no room for the next line
            if overlap_size + unit_len > chunk_size:
                overlap_units = []
                overlap_size = 0

            current_chunk = overlap_units
            current_size = overlap_size

        current_chunk.append(unit)
        current_size += unit_len

    # Add the last chunk if it has any content
    if current_chunk and "\n".join(current_chunk).strip():
        chunks.append("\n".join(current_chunk))

    return chunks


def chunk_pages(pages: List[str], source: str, chunk_size: int = CHUNK_SIZE,
                chunk_overlap: int = CHUNK_OVERLAP) -> List[Dict[str, Any]]:
    """
    Chunk every page of a document.

    Args:
        pages: Page texts in page order
        source: Name of the document the pages came from

    Returns:
        Chunk dictionaries with "text", "source" and 1-based "page"
    """
    chunks = []
    for page_number, page_text in enumerate(pages, start=1):
        for text in chunk_text(page_text, chunk_size, chunk_overlap):
            chunks.append({
                "text": text,
                "source": source,
                "page": page_number
            })
    return chunks
