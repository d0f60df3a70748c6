# Resume Review - Core Source Code

# Import core components for easier access
from .spell_checker import Dictionary, comparison_form, load_custom_words, load_dictionary
from .text_processing import extract_pages_from_pdf, normalize_text, split_text_into_lines, split_line_into_words
from .text_repair import merge_misspelled_words, misspelling_at_line_break, merge_broken_lines, repair_text, clean_chunks
from .unknown_words import UnknownWordCollector

# Version information
__version__ = '2.0.0'
