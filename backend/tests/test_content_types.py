import pytest

from fileserver.services.content_types import DEFAULT_CONTENT_TYPE, content_type_for


@pytest.mark.parametrize(
    "name, expected",
    [
        ("notes.txt", "text/plain"),
        ("server.log", "text/plain"),
        ("data.json", "application/json"),
        ("index.html", "text/html"),
        ("index.htm", "text/html"),
        ("site.css", "text/css"),
        ("app.js", "application/javascript"),
        ("logo.png", "image/png"),
        ("photo.jpg", "image/jpeg"),
        ("photo.jpeg", "image/jpeg"),
        ("report.pdf", "application/pdf"),
    ],
)
def test_known_suffixes(name, expected):
    assert content_type_for(name) == expected


def test_suffix_match_ignores_case():
    assert content_type_for("REPORT.PDF") == "application/pdf"
    assert content_type_for("Photo.JpEg") == "image/jpeg"


@pytest.mark.parametrize("name", ["archive.tar.gz", "Makefile", "data.jsonl", "script.mjs", ""])
def test_unknown_suffix_is_octet_stream(name):
    assert content_type_for(name) == DEFAULT_CONTENT_TYPE == "application/octet-stream"


def test_only_last_suffix_counts():
    assert content_type_for("backup.pdf.bin") == "application/octet-stream"
    assert content_type_for("dir.txt/readme.md") == "application/octet-stream"
