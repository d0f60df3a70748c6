import logging
import os

from .text_processing import extract_pages_from_pdf
from .text_chunking import chunk_pages
from .text_repair import clean_chunks

logger = logging.getLogger(__name__)


def prepare_resume(pdf_path, vector_store, dictionary, collector=None):
    """
    Load a resume PDF, repair its text and make it the retrieval context.

    The vector store is cleared first so that questions are only answered
    from this resume. Returns the cleaned chunks.
    """
    if not os.path.exists(pdf_path) or not pdf_path.lower().endswith('.pdf'):
        raise FileNotFoundError(f"Invalid resume path: {pdf_path}")

    pages = extract_pages_from_pdf(pdf_path)
    chunks = chunk_pages(pages, os.path.basename(pdf_path))
    if not chunks:
        raise ValueError(f"Could not extract text from {os.path.basename(pdf_path)}")

    clean_chunks(chunks, dictionary, collector)
    vector_store.add_documents(chunks, clear=True)
    logger.debug(f"Indexed {len(chunks)} chunks from {len(pages)} pages of {pdf_path}")
    return chunks
