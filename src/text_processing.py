import re
from typing import List

import PyPDF2

# Runs of whitespace that do not include a line break
INLINE_WS_REGEX = re.compile(r"[^\S\r\n]+")
# A comma with spacing on both sides; the space after it stays
COMMA_SPACING_REGEX = re.compile(r"[^\S\r\n],(?=[^\S\r\n])")
PERIOD_SPACING_REGEX = re.compile(r"[^\S\r\n]\.[^\S\r\n]")
LINE_BREAK_REGEX = re.compile(r"[\r\n]")


def extract_pages_from_pdf(pdf_path: str) -> List[str]:
    """Extract the text of every page of a PDF, in page order"""
    with open(pdf_path, 'rb') as file:
        reader = PyPDF2.PdfReader(file)
        return [page.extract_text() or "" for page in reader.pages]


def normalize_text(text: str) -> str:
    """
    Collapse spacing artifacts left by PDF extraction.

    Line breaks survive so that later steps can still work line by line.
    """
    text = INLINE_WS_REGEX.sub(" ", text)
    text = COMMA_SPACING_REGEX.sub(",", text)
    text = PERIOD_SPACING_REGEX.sub(".", text)
    return text.strip()


def split_text_into_lines(text: str) -> List[str]:
    return LINE_BREAK_REGEX.split(text)


def split_line_into_words(line: str) -> List[str]:
    line = line.strip()
    if not line:
        return []
    return line.split(" ")
