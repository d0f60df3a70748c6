import json
import logging

import pytest

import main
from src.jobs import Job
from src.vector_db import ResumeVectorStore


def fake_pages(path):
    if path.endswith("broken.pdf"):
        raise OSError("cannot read PDF")
    return ["Jane Student\n- Built a web app\nusing Terraform\n- Led the team"]


def test_run_jobs_writes_reports_and_skips_failures(monkeypatch, tmp_path, caplog, dictionary, collector,
                                                    embedding_model, chat_model):
    input_dir = tmp_path / "input"
    input_dir.mkdir()
    for name in ("jane.pdf", "broken.pdf"):
        (input_dir / name).write_bytes(b"%PDF-1.4")
    monkeypatch.setattr("src.cv_management.extract_pages_from_pdf", fake_pages)
    monkeypatch.setattr(main, "ask_questions", lambda store, model: [
        {"role": "user", "content": "How could this resume be improved?"},
        {"role": "assistant", "content": "Add a GitHub link."},
    ])
    jobs = [Job(name="fall", folder=str(input_dir), documents=["broken.pdf", "jane.pdf"])]

    with caplog.at_level(logging.INFO):
        written = main.run_jobs(jobs, str(tmp_path / "output"), dictionary, collector,
                                ResumeVectorStore(embedding_model), chat_model)

    report = tmp_path / "output" / "fall" / "jane.md"
    assert written == [str(report)]
    assert "Add a GitHub link." in report.read_text(encoding="utf-8")
    assert not (tmp_path / "output" / "fall" / "broken.md").exists()
    assert "Error processing broken.pdf: cannot read PDF" in caplog.text
    assert collector.words == ("Jane", "Terraform")


def test_main_emits_unknown_words_once(monkeypatch, tmp_path, capsys, dictionary):
    words = tmp_path / "words.json"
    words.write_text(json.dumps(["Scrum"]), encoding="utf-8")
    job_list = tmp_path / "jobList.json"
    job_list.write_text(json.dumps([{"name": "fall", "folder": str(tmp_path), "documents": []}]), encoding="utf-8")

    monkeypatch.setattr(main, "load_dictionary", lambda path: dictionary)
    monkeypatch.setattr(main, "create_chat_model", lambda: None)

    def fake_run_jobs(jobs, output_dir, dictionary, collector, vector_store, chat_model):
        collector.gather_from_line("Terraform Terraform")
        return []

    monkeypatch.setattr(main, "run_jobs", fake_run_jobs)

    main.main(["--job-list", str(job_list), "--output-dir", str(tmp_path / "out"), "--custom-words", str(words)])

    assert capsys.readouterr().out == "Unknown words: Terraform\n"


def test_main_fails_without_dictionary(tmp_path):
    with pytest.raises(FileNotFoundError):
        main.main(["--custom-words", str(tmp_path / "missing.json")])
