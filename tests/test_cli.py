"""
Tests for the qbank-parse command.
"""

import io
import json

import pytest

from qbank_toolkit.cli import EXIT_NOTHING_PARSED, EXIT_OK, EXIT_UNREADABLE, main
from qbank_toolkit.core.utils.serialization import load_questions_jsonl


@pytest.fixture
def bank_file(tmp_path, separated_document):
    path = tmp_path / "banco.txt"
    path.write_text(separated_document, encoding="utf-8")
    return path


class TestCli:
    
    def test_main_when_file_parsed_then_summary_printed(self, bank_file, capsys):
        assert main([str(bank_file)]) == EXIT_OK
        out = capsys.readouterr().out
        assert f"{bank_file}: 3 questions" in out
        assert "format1=1" in out
    
    def test_main_when_json_flag_then_result_printed(self, bank_file, capsys):
        assert main(["--json", str(bank_file)]) == EXIT_OK
        data = json.loads(capsys.readouterr().out)
        assert data["success"] is True
        assert data["stats"]["total"] == 3
    
    def test_main_when_two_files_with_json_then_keyed_by_name(self, bank_file, tmp_path, capsys):
        other = tmp_path / "empty.txt"
        other.write_text("", encoding="utf-8")
        assert main(["--json", str(bank_file), str(other)]) == EXIT_OK
        data = json.loads(capsys.readouterr().out)
        assert data[str(other)]["success"] is False
    
    def test_main_when_nothing_parsed_then_exit_one(self, tmp_path, capsys):
        path = tmp_path / "notes.txt"
        path.write_text("nothing to see", encoding="utf-8")
        assert main([str(path)]) == EXIT_NOTHING_PARSED
    
    def test_main_when_file_missing_then_exit_two(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.txt")]) == EXIT_UNREADABLE
        assert "cannot read input" in capsys.readouterr().err
    
    def test_main_when_stdin_then_read(self, monkeypatch, capsys, mc_simple_block):
        monkeypatch.setattr("sys.stdin", io.StringIO(mc_simple_block))
        assert main([]) == EXIT_OK
        assert "<stdin>: 1 questions" in capsys.readouterr().out
    
    def test_main_when_jsonl_then_questions_written(self, bank_file, tmp_path, capsys):
        out = tmp_path / "out" / "questions.jsonl"
        assert main(["--jsonl", str(out), str(bank_file)]) == EXIT_OK
        assert len(load_questions_jsonl(out)) == 3
    
    def test_main_when_diagnostics_then_report_written(self, tmp_path, capsys, mc_simple_block):
        path = tmp_path / "bank.txt"
        path.write_text(mc_simple_block.replace("\nANSWER: B", ""), encoding="utf-8")
        report = tmp_path / "diagnostics.json"
        
        main(["--diagnostics", str(report), str(path)])
        
        data = json.loads(report.read_text(encoding="utf-8"))
        assert data["summary_by_type"] == {"low_confidence": 1}
    
    def test_main_when_check_then_structure_reported(self, bank_file, tmp_path, capsys):
        assert main(["--check", str(bank_file)]) == EXIT_OK
        assert "structured" in capsys.readouterr().out
        
        prose = tmp_path / "prose.txt"
        prose.write_text("Just a paragraph.", encoding="utf-8")
        assert main(["--check", str(prose)]) == EXIT_NOTHING_PARSED
    
    def test_main_when_workers_invalid_then_usage_error(self, bank_file, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--workers", "0", str(bank_file)])
        assert exc_info.value.code == 2
