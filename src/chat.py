import logging
from typing import Dict, List

from config import AZURE_CONFIG, DEPLOYMENT_NAME, LLM_CONFIG, RETRIEVAL_TOP_K
from langchain_openai import AzureChatOpenAI, ChatOpenAI

logger = logging.getLogger(__name__)

RESPONSE_SYSTEM_TEMPLATE = """You are an experienced researcher, expert at interpreting and answering questions based on
provided sources. Using the provided context, answer the user's question to the best of your ability using the resources provided.
Generate a concise answer for a given question based solely on the provided context. You must only use information from the provided
context. Use an unbiased and journalistic tone. Combine the context together into a coherent answer. Do not repeat text. If there is
nothing in the context relevant to the question at hand, just say "Hmm, I'm not sure." Don't try to make up an answer.

The context provided represents the resume of a college student that is seeking either an internship or a full-time job. They were
asked to keep the resume short and professional and to focus on their skills gained as a student, projects they have worked on, and
relevant job experience. Please refer to the subject of the resume with they/them pronouns and avoid using gendered language. Please
utilize the Markdown language in your response to style any text and make sure your response is compatible with the Markdown language.

Anything between the following `context` html blocks is retrieved from a knowledge bank, not part of the conversation with the user.
<context>
{context}
<context/>

REMEMBER: If there is no relevant information within the context, just say "Hmm, I'm not sure." Don't try to make up an answer.
Anything between the preceding 'context' html blocks is retrieved from a knowledge bank, not part of the conversation with the user."""

REPHRASE_PROMPT = """Given the above conversation, generate a natural language search query to look up in order to
get information relevant to the conversation. Do not respond with anything except the query."""

QUESTION_LIST = [
    "What is this student's goal with this document?",
    "What is this student's name and contact info?",
    "What is the student's major and minor (if any)?",
    "When does this student graduate?",
    "What is the student's GPA?",
    "Does the document clearly list the student's technical skills?",
    "Does the document clearly list the student's soft skills?",
    "Does the document clearly list the student's accomplishments?",
    "Does the document clearly list the student's programming languages?",
    "Does the document clearly list the student's prior work experience?",
    "Does the document clearly list projects the student has worked on?",
    "Does the document provide any links to the student's work?",
    "Does the document mention teamwork or collaboration?",
    "Does the document mention leadership experience?",
    "Does the document mention Agile methodologies or Scrum?",
    "Does the document have a link to the student's LinkedIn profile?",
    "Does the document have a link to the student's GitHub profile or any GitHub repositories?",
    "Does anything seem to be missing from this document?",
    "How could this resume be improved?"
]


def create_chat_model():
    """Azure OpenAI when an Azure endpoint is configured, otherwise an OpenAI-compatible server such as Ollama."""
    if AZURE_CONFIG["azure_endpoint"]:
        return AzureChatOpenAI(
            azure_endpoint=AZURE_CONFIG["azure_endpoint"],
            api_key=AZURE_CONFIG["api_key"],
            api_version=AZURE_CONFIG["api_version"],
            deployment_name=DEPLOYMENT_NAME,
            temperature=LLM_CONFIG["temperature"]
        )

    return ChatOpenAI(
        base_url=LLM_CONFIG["base_url"],
        api_key=LLM_CONFIG["api_key"],
        model=LLM_CONFIG["model"],
        temperature=LLM_CONFIG["temperature"]
    )


def rephrase_query(messages: List[Dict[str, str]], chat_model) -> str:
    """Turn the latest question into a standalone search query using the chat history."""
    question = messages[-1]["content"]
    if len(messages) == 1:
        return question

    prompt = list(messages) + [{"role": "user", "content": REPHRASE_PROMPT}]
    query = chat_model.invoke(prompt).content.strip()
    return query or question


def format_context(docs: List[Dict]) -> str:
    return "\n\n".join(f"<doc>\n{doc['text']}\n</doc>" for doc in docs)


def do_rag_request(messages: List[Dict[str, str]], vector_store, chat_model, k: int = RETRIEVAL_TOP_K) -> str:
    """Answer the latest message using resume chunks retrieved for it."""
    query = rephrase_query(messages, chat_model)
    docs = vector_store.search(query, k)
    logger.debug(f"Retrieved {len(docs)} chunks for query: {query}")

    prompt = [{"role": "system", "content": RESPONSE_SYSTEM_TEMPLATE.format(context=format_context(docs))}]
    prompt.extend(messages)

    response = chat_model.invoke(prompt)
    return response.content


def ask_questions(vector_store, chat_model, questions: List[str] = QUESTION_LIST) -> List[Dict[str, str]]:
    """Ask every question in turn, keeping the conversation as shared history."""
    messages = []
    for question in questions:
        messages.append({"role": "user", "content": question})
        response = do_rag_request(messages, vector_store, chat_model)
        messages.append({"role": "assistant", "content": response})

    return messages
