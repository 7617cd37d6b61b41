"""Tests for parser.timing."""

import json

import pytest

from qbank_toolkit.parser.timing import TimingLog, timed_phase


class TestTimingLog:
    
    def test_timed_phase_when_no_block_id_then_document_metric(self):
        log = TimingLog()
        with timed_phase(log, "segmentation"):
            pass
        assert "segmentation" in log.document_timings
        assert log.block_timings == {}
    
    def test_timed_phase_when_block_id_then_block_metric(self):
        log = TimingLog()
        with timed_phase(log, "assembly", block_id="doc#1"):
            pass
        assert set(log.block_timings["doc#1"]) == {"assembly"}
    
    def test_timed_phase_when_body_raises_then_still_recorded(self):
        log = TimingLog()
        with pytest.raises(RuntimeError):
            with timed_phase(log, "assembly", block_id="doc#2"):
                raise RuntimeError("boom")
        assert "doc#2" in log.block_timings
    
    def test_phase_averages_when_two_blocks_then_mean(self):
        log = TimingLog()
        log.log_block("b1", "assembly", 1.0)
        log.log_block("b2", "assembly", 3.0)
        assert log.get_phase_averages() == {"assembly": 2.0}
        assert log.get_slowest_blocks(1) == [("b2", 3.0)]
    
    def test_summary_when_populated_then_lists_phases(self):
        log = TimingLog()
        log.log_document("segmentation", 0.01)
        log.log_block("b1", "assembly", 0.02)
        summary = log.summary()
        assert "segmentation" in summary
        assert "b1" in summary
    
    def test_save_when_called_then_json_written(self, tmp_path):
        log = TimingLog()
        log.log_document("total", 0.5)
        path = tmp_path / "timing.json"
        log.save(path)
        assert json.loads(path.read_text())["document_timings"] == {"total": 0.5}
