import json

import pytest

from src.jobs import Job, load_job_list, prepare_output_folder, report_filename


def test_load_job_list(tmp_path):
    path = tmp_path / "jobList.json"
    path.write_text(json.dumps([
        {"name": "fall", "folder": "input/fall", "documents": ["a.pdf", "b.pdf"]},
    ]), encoding="utf-8")

    assert load_job_list(str(path)) == [Job(name="fall", folder="input/fall", documents=["a.pdf", "b.pdf"])]


@pytest.mark.parametrize(
    "content",
    ["{not json", json.dumps({"name": "fall"}), json.dumps([{"name": "fall", "folder": "x"}])],
)
def test_load_job_list_rejects_bad_content(tmp_path, content):
    path = tmp_path / "jobList.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ValueError):
        load_job_list(str(path))


def test_load_job_list_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_job_list(str(tmp_path / "missing.json"))


def test_prepare_output_folder_starts_empty(tmp_path):
    folder = tmp_path / "fall"
    folder.mkdir()
    (folder / "old.md").write_text("old", encoding="utf-8")

    result = prepare_output_folder(str(tmp_path), "fall")

    assert result == str(folder)
    assert folder.is_dir()
    assert list(folder.iterdir()) == []


def test_prepare_output_folder_creates_parents(tmp_path):
    result = prepare_output_folder(str(tmp_path / "output"), "spring")
    assert (tmp_path / "output" / "spring").is_dir()
    assert result.endswith("spring")


def test_report_filename():
    assert report_filename("Jane Student.pdf") == "Jane Student.md"
    assert report_filename("nested/resume.v2.pdf") == "resume.v2.md"
    assert report_filename("jane.doe.pdf") != report_filename("jane.smith.pdf")
