import argparse
import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from smartdocs.analysis.exceptions import AnalysisNetworkError
from smartdocs.documents.models import AnalysisResult
from smartdocs.documents.stores import InMemoryLibrary
from smartdocs.main import main, read_source_file, run_analyze


@pytest.fixture()
def bill_pdf(tmp_path: Path, sample_pdf_bytes: bytes) -> Path:
    path = tmp_path / "bill.pdf"
    path.write_bytes(sample_pdf_bytes)
    return path


@pytest.fixture(autouse=True)
def _local_provider(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AI_PROVIDER", "local")


class TestReadSourceFile:
    def test_guesses_mime_type(self, bill_pdf: Path) -> None:
        file = read_source_file(bill_pdf)
        assert file.filename == "bill.pdf"
        assert file.mime_type == "application/pdf"

    def test_unknown_extension(self, tmp_path: Path) -> None:
        path = tmp_path / "blob.unknownext"
        path.write_bytes(b"x")
        assert read_source_file(path).mime_type == "application/octet-stream"


class TestAnalyzeCommand:
    def test_prints_analysis(self, bill_pdf: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["analyze", str(bill_pdf)]) == 0
        [result] = json.loads(capsys.readouterr().out)
        assert result["category"] == "Receipt"
        assert result["dateLabel"] == "Due Date"

    def test_provider_override(self, bill_pdf: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--provider", "groq", "analyze", str(bill_pdf)]) == 0
        [result] = json.loads(capsys.readouterr().out)
        assert result["title"] == "bill"
        assert "ocrText" not in result


    def test_network_failure_is_reported_per_file(
        self, tmp_path: Path, bill_pdf: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        other = tmp_path / "memo.pdf"
        other.write_bytes(bill_pdf.read_bytes())
        provider = MagicMock(low_fidelity=False)
        provider.analyze.side_effect = [
            AnalysisNetworkError("timeout"),
            AnalysisResult(title="Memo", category="Notes", summary="A memo", tags=("notes",)),
        ]

        code = run_analyze(argparse.Namespace(files=[bill_pdf, other]), provider)

        assert code == 1
        captured = capsys.readouterr()
        assert "bill.pdf: analysis failed (timeout)" in captured.err
        [result] = json.loads(captured.out)
        assert result["title"] == "Memo"


class TestIngestAndSearch:
    def test_ingest_then_search(
        self, tmp_path: Path, bill_pdf: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        library_path = tmp_path / "library.json"

        assert main(["--library", str(library_path), "ingest", str(bill_pdf)]) == 0
        out = capsys.readouterr().out
        assert "[done] bill.pdf" in out
        assert "1 done, 0 failed" in out

        library = InMemoryLibrary.load(library_path)
        [document] = library.list_documents()
        [folder] = library.list_folders()
        assert document.folder_id == folder.id
        assert folder.name == "Receipt"

        assert main(["--library", str(library_path), "search", "Invoice", "102"]) == 0
        result = json.loads(capsys.readouterr().out)
        assert result["relevantDocIds"] == [document.id]

    def test_search_rejects_stop_words(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["--library", str(tmp_path / "l.json"), "search", "the", "of"]) == 2
        assert "specific keywords" in capsys.readouterr().err
