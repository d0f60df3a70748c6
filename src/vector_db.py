import logging
from typing import Any, Dict, List

import faiss
import numpy as np

from config import EMBEDDING_MODEL_NAME, RETRIEVAL_TOP_K

logger = logging.getLogger(__name__)


def load_embedding_model(model_name: str = EMBEDDING_MODEL_NAME):
    from sentence_transformers import SentenceTransformer
    return SentenceTransformer(model_name)


# --- Vector DB Management ---
class ResumeVectorStore:
    """
    In-memory FAISS index over the chunks of the resume under review.

    The embedding model is loaded on first use unless one is supplied.
    """

    def __init__(self, embedding_model=None, model_name: str = EMBEDDING_MODEL_NAME):
        self._embedding_model = embedding_model
        self.model_name = model_name
        self.index = None
        self.documents: List[Dict[str, Any]] = []

    @property
    def embedding_model(self):
        if self._embedding_model is None:
            logger.info(f"Loading embedding model {self.model_name}")
            self._embedding_model = load_embedding_model(self.model_name)
        return self._embedding_model

    def __len__(self):
        return len(self.documents)

    def clear(self):
        self.index = None
        self.documents = []

    def _embed(self, texts: List[str]) -> np.ndarray:
        return np.asarray(self.embedding_model.encode(texts), dtype="float32")

    def add_documents(self, chunks: List[Dict[str, Any]], clear: bool = True) -> None:
        """Index chunk dictionaries, replacing the current contents unless clear is False"""
        if clear:
            self.clear()
        if not chunks:
            return

        embeddings = self._embed([chunk["text"] for chunk in chunks])
        if self.index is None:
            self.index = faiss.IndexFlatL2(embeddings.shape[1])
        self.index.add(embeddings)
        self.documents.extend(chunks)

    def search(self, query: str, k: int = RETRIEVAL_TOP_K) -> List[Dict[str, Any]]:
        """Return the k chunks closest to the query, best first"""
        if self.index is None or not self.documents or k <= 0:
            return []

        query_embedding = self._embed([query])
        distances, indices = self.index.search(query_embedding, min(k, len(self.documents)))

        results = []
        for i, idx in enumerate(indices[0]):
            if 0 <= idx < len(self.documents):
                results.append({
                    **self.documents[idx],
                    "similarity": 1 / (1 + float(distances[0][i]))
                })
        return results
