# tests/test_prompt.py
"""Tests for prompt assembly."""

from campusqa.models import ScoredChunk
from campusqa.prompt import PROMPT_HEADER, build_prompt, format_entry, select_entries


def _scored(make_chunk, chunk_id: str, text: str, score: float = 0.9) -> ScoredChunk:
    chunk = make_chunk(chunk_id, chunk_text=text, title=f"{chunk_id}.txt")
    return ScoredChunk.model_validate({**chunk.model_dump(), "score": score})


class TestFormatEntry:
    def test_format(self, make_chunk):
        entry = format_entry(2, _scored(make_chunk, "rules", "  宿舍十一点熄灯。 "))
        assert entry == (
            "[2] 标题：rules.txt\n来源：https://example.edu/handbook.txt\n内容：宿舍十一点熄灯。"
        )


class TestSelectEntries:
    def test_all_fit(self, make_chunk):
        ranked = [_scored(make_chunk, "a", "one"), _scored(make_chunk, "b", "two")]
        entries = select_entries(ranked, max_context_chars=10_000)
        assert [e.split("\n")[0] for e in entries] == ["[1] 标题：a.txt", "[2] 标题：b.txt"]

    def test_oversized_entry_is_skipped_not_truncated(self, make_chunk):
        small = _scored(make_chunk, "a", "x" * 10)
        huge = _scored(make_chunk, "b", "y" * 500)
        tail = _scored(make_chunk, "c", "z" * 10)
        budget = len(format_entry(1, small)) + len(format_entry(3, tail))

        entries = select_entries([small, huge, tail], max_context_chars=budget)

        assert len(entries) == 2
        assert entries[0].startswith("[1]")
        assert entries[1].startswith("[3]")
        assert all("y" not in e for e in entries)

    def test_stops_when_budget_is_exhausted(self, make_chunk):
        first = _scored(make_chunk, "a", "x" * 10)
        budget = len(format_entry(1, first))

        entries = select_entries([first, _scored(make_chunk, "b", "y")], max_context_chars=budget)

        assert entries == [format_entry(1, first)]

    def test_total_within_budget(self, make_chunk):
        ranked = [_scored(make_chunk, f"c{i}", "字" * (40 * i + 20)) for i in range(10)]
        entries = select_entries(ranked, max_context_chars=500)
        assert sum(len(e) for e in entries) <= 500


class TestBuildPrompt:
    def test_layout(self, make_chunk):
        ranked = [_scored(make_chunk, "canteen", "食堂早上六点半开门。")]

        prompt = build_prompt("食堂几点开？", ranked, max_context_chars=2500)

        assert prompt.startswith(PROMPT_HEADER)
        assert "\n\n问题：食堂几点开？\n\n参考资料：\n[1] 标题：canteen.txt" in prompt
        assert "来源：https://example.edu/handbook.txt" in prompt
        assert prompt.endswith("内容：食堂早上六点半开门。")

    def test_entries_joined_by_blank_line(self, make_chunk):
        ranked = [_scored(make_chunk, "a", "one"), _scored(make_chunk, "b", "two")]
        prompt = build_prompt("q", ranked)
        assert "内容：one\n\n[2] 标题：b.txt" in prompt

    def test_empty_context(self):
        prompt = build_prompt("q", [])
        assert prompt == f"{PROMPT_HEADER}\n\n问题：q\n\n参考资料：\n"

    def test_custom_header(self):
        prompt = build_prompt("q", [], header="Answer briefly.")
        assert prompt.startswith("Answer briefly.\n\n问题：q")
