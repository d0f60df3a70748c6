import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Paths
CUSTOM_WORDS_PATH = os.getenv("CUSTOM_WORDS_PATH", os.path.join("data", "custom_words.json"))
JOB_LIST_PATH = os.getenv("JOB_LIST_PATH", os.path.join("input", "jobList.json"))
OUTPUT_DIR = os.getenv("OUTPUT_DIR", "output")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
SPELLCHECK_LANGUAGE = os.getenv("SPELLCHECK_LANGUAGE", "en")

# Retrieval
EMBEDDING_MODEL_NAME = os.getenv("EMBEDDING_MODEL_NAME", "all-MiniLM-L6-v2")
RETRIEVAL_TOP_K = 4

CHUNK_SIZE = 500
CHUNK_OVERLAP = 50

# Prefixes that mark a line as a list item
BULLETS = (
    "•", "◦",
    "▪", "▫",
    "■", "□",
    "o", "O",
    ">", ">>",
    "-",
    "*",
    "+",
)

# OpenAI-compatible chat endpoint (local Ollama by default)
LLM_CONFIG = {
    "base_url": os.getenv("LLM_BASE_URL", "http://localhost:11434/v1"),
    "api_key": os.getenv("LLM_API_KEY", "ollama"),
    "model": os.getenv("LLM_MODEL", "mistral"),
    "temperature": 0.3
}

# Azure OpenAI Configuration, used instead when an endpoint is set
DEPLOYMENT_NAME = os.getenv("DEPLOYMENT_NAME", "gpt-35-turbo-16k")
AZURE_CONFIG = {
    "azure_endpoint": os.getenv("AZURE_ENDPOINT"),
    "api_key": os.getenv("AZURE_API_KEY"),
    "api_version": os.getenv("AZURE_API_VERSION")
}
