# main.py
import argparse
import logging
import os
import sys

# Add the project root directory to Python's module search path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from config import CUSTOM_WORDS_PATH, JOB_LIST_PATH, LOG_LEVEL, OUTPUT_DIR
from src.chat import ask_questions, create_chat_model
from src.cv_management import prepare_resume
from src.jobs import load_job_list, prepare_output_folder, report_filename
from src.report import create_summary_file
from src.spell_checker import load_dictionary
from src.unknown_words import UnknownWordCollector
from src.vector_db import ResumeVectorStore

logger = logging.getLogger(__name__)


def run_jobs(jobs, output_dir, dictionary, collector, vector_store, chat_model):
    """Review every resume of every job; a failing resume is logged and skipped"""
    written = []
    for job in jobs:
        job_output = prepare_output_folder(output_dir, job.name)

        for document in job.documents:
            output_path = os.path.join(job_output, report_filename(document))
            try:
                # Read in the resume and add to the context
                logger.info(f'Reading resume from "{document}"')
                prepare_resume(os.path.join(job.folder, document), vector_store, dictionary, collector)

                logger.info(f"Running prompts for: {document}")
                messages = ask_questions(vector_store, chat_model)

                logger.info(f'Saving results to "{output_path}"')
                create_summary_file(output_path, messages)
                written.append(output_path)
            except Exception as e:
                logger.error(f"Error processing {document}: {str(e)}")

    return written


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="AI review of student resumes")
    parser.add_argument("--job-list", default=JOB_LIST_PATH, help="JSON list of review jobs")
    parser.add_argument("--output-dir", default=OUTPUT_DIR, help="Folder that receives the reports")
    parser.add_argument("--custom-words", default=CUSTOM_WORDS_PATH, help="JSON array of extra dictionary words")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=LOG_LEVEL, format="%(message)s")

    # Without a dictionary the text repair is meaningless, so let these fail loudly
    dictionary = load_dictionary(args.custom_words)
    jobs = load_job_list(args.job_list)

    collector = UnknownWordCollector(dictionary)
    vector_store = ResumeVectorStore()
    chat_model = create_chat_model()

    run_jobs(jobs, args.output_dir, dictionary, collector, vector_store, chat_model)

    # Output any unknown words for reference
    collector.output_unknown_words()


if __name__ == "__main__":
    main()
