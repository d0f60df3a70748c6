import json
import os
import shutil
from typing import List

from pydantic import BaseModel, TypeAdapter


class Job(BaseModel):
    """A named batch of resumes that share an input folder"""
    name: str
    folder: str
    documents: List[str]


def load_job_list(path: str) -> List[Job]:
    """
    Read the job list, a JSON array of {"name", "folder", "documents"} objects.

    Raises:
        FileNotFoundError: the job list does not exist
        ValueError: the content is not valid JSON or does not describe jobs
    """
    with open(path, "r", encoding="utf-8") as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Job list {path} is not valid JSON: {str(e)}") from e
    return TypeAdapter(List[Job]).validate_python(raw)


def prepare_output_folder(output_dir: str, name: str) -> str:
    """Ensure output_dir/name exists and is empty"""
    folder = os.path.join(output_dir, name)
    if os.path.exists(folder):
        shutil.rmtree(folder)
    os.makedirs(folder)
    return folder


def report_filename(document: str) -> str:
    """resume.pdf -> resume.md"""
    base = os.path.splitext(os.path.basename(document))[0]
    return base + ".md"
