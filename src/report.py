import os
from typing import Dict, List

MAIN_HEADING = "# AI Review of Resume"
MAIN_CONTENT = """
This document contains the results of an AI review of your resume. The system used runs on a local
machine against an open source language model. No content from your resume was uploaded to the
cloud or provided to a third party in any way.

## How to Interpret the Results
The AI was given no other context besides your resume and a prompt encouraging it to be
professional and concise and to avoid inventing information. As is often the case, its answer may be
incorrect! Please use your own judgement as you evaluate the results. This is simply intended to
simulate the kind of process that may be in use at employers as they screen job applications and
the questions asked are designed to find common problems that are seen in student resumes.

If the responses you are getting seem wrong, **please reply and let me know!** If it is happening
here it may happen at an employer and get your application discarded before human eyes can intervene!

"""

SUMMARY_HEADING = "## AI Overall Summary"
SUMMARY_CONTENT = """
The last question the AI was asked was `'How could this resume be improved?'`. The answer serves
as a good summary of the overall resume. However, it also tends to suggest adding a lot! Remember
that for the resume book, your resume CANNOT exceed 1 page! Outside that context, a 2-page resume
can be appropriate, but longer is rarely a good idea. Occasionally, the answer seems to be very generic
and this may be a sign that it did not parse your resume correctly.

"""

QUESTIONS_HEADING = "## AI Review Questions"
QUESTIONS_CONTENT = """
Below is a transcript of questions asked of the AI and its responses. If the response ever starts
with "Hmm, I'm not sure ..." that means the AI did not find the requested information in your resume.
The questions were designed with common mistakes in mind that we see in student resumes. If the AI
suggested something was missing, it probably was and if you can add that information it would be
highly recommended. If it says something was missing but you think it was not, think about how the
document is organized or how you described the information. If the AI couldn't find it, then a
human with hundreds of resumes to review might miss it too!

"""


def format_question(content: str) -> str:
    return f"### {content}\nAI Response:\n"


def format_answer(content: str) -> str:
    """Render an answer as a Markdown blockquote"""
    return ">" + content.replace("\n", "\n> ") + "\n\n"


def render_summary(messages: List[Dict[str, str]]) -> str:
    """
    Build the Markdown report for one resume.

    The final question ("How could this resume be improved?") is shown first
    as the overall summary, followed by the rest of the transcript in order.
    """
    if len(messages) < 2:
        raise ValueError("At least one question and answer are required to build a report")

    *transcript, last_question, last_answer = messages
    parts = [
        MAIN_HEADING,
        MAIN_CONTENT,
        SUMMARY_HEADING,
        SUMMARY_CONTENT,
        format_question(last_question["content"]),
        format_answer(last_answer["content"]),
        QUESTIONS_HEADING,
        QUESTIONS_CONTENT
    ]
    for message in transcript:
        if message["role"] == "user":
            parts.append(format_question(message["content"]))
        else:
            parts.append(format_answer(message["content"]))
    return "".join(parts)


def create_summary_file(output_filename: str, messages: List[Dict[str, str]]) -> None:
    """Write the report, replacing any previous file with the same name"""
    content = render_summary(messages)
    if os.path.exists(output_filename):
        os.remove(output_filename)
    with open(output_filename, "w", encoding="utf-8") as f:
        f.write(content)
