import json

import pytest

from agendasub.exceptions import ConfigurationError, NoEntriesError
from agendasub.transcript_processor import GroupingOptions, TranscriptProcessor

HELLO_WORLD = (
    "1\n00:00:00,000 --> 00:00:02,000\nHello\n\n"
    "2\n00:00:02,500 --> 00:00:05,000\nWorld\n"
)


def test_process_without_grouping_returns_entries() -> None:
    result = TranscriptProcessor().process(HELLO_WORLD, source_name="hello.srt")
    assert result.grouped is False
    assert [e.text for e in result.entries] == ["Hello", "World"]
    assert result.stats.total_entries == 2
    assert result.stats.grouped_entries == 2
    assert result.stats.total_duration == 5.0


def test_process_with_grouping() -> None:
    options = GroupingOptions(group=True, max_gap_seconds=1.0, min_duration_seconds=100.0)
    result = TranscriptProcessor(options).process(HELLO_WORLD)
    assert result.grouped is True
    assert result.stats.total_entries == 2
    assert result.stats.grouped_entries == 1
    assert result.entries[0].text == "Hello\nWorld"


def test_process_raises_when_nothing_parses() -> None:
    with pytest.raises(NoEntriesError, match="No valid SRT entries found"):
        TranscriptProcessor().process("this is not\na subtitle file")


def test_result_record_layout() -> None:
    record = TranscriptProcessor().process(HELLO_WORLD, source_name="hello.srt").to_dict()
    assert record["success"] is True
    assert record["fileName"] == "hello.srt"
    assert record["stats"] == {"totalEntries": 2, "groupedEntries": 2, "totalDuration": 5.0}
    assert record["entries"][1] == {
        "index": 2,
        "startTime": "00:00:02,500",
        "endTime": "00:00:05,000",
        "startSec": 2.5,
        "endSec": 5.0,
        "text": "World",
    }


def test_process_file_and_write_outputs(tmp_path) -> None:
    source = tmp_path / "council_2024-05-01.srt"
    source.write_text(HELLO_WORLD, encoding="utf-8")
    processor = TranscriptProcessor(GroupingOptions(group=True, max_gap_seconds=1.0, min_duration_seconds=100.0))

    result = processor.process_file(str(source))
    written = processor.write_outputs(result, str(tmp_path / "out"), ["json", "srt"])

    json_path, srt_path = written
    assert json_path.endswith("council_2024-05-01.segments.json")
    record = json.loads((tmp_path / "out" / "council_2024-05-01.segments.json").read_text(encoding="utf-8"))
    assert record["fileName"] == "council_2024-05-01.srt"
    assert record["stats"]["groupedEntries"] == 1

    srt_text = (tmp_path / "out" / "council_2024-05-01.segments.srt").read_text(encoding="utf-8")
    assert srt_text == "1\n00:00:00,000 --> 00:00:05,000\nHello\nWorld\n"
    assert srt_path.endswith(".srt")


def test_write_outputs_rejects_unknown_format(tmp_path) -> None:
    result = TranscriptProcessor().process(HELLO_WORLD)
    with pytest.raises(ConfigurationError):
        TranscriptProcessor().write_outputs(result, str(tmp_path), ["vtt"])


def test_process_file_missing(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        TranscriptProcessor().process_file(str(tmp_path / "nope.srt"))
