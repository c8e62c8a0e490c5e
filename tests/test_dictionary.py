"""
Tests for the dictionary store, loading and persistence.
"""

import json
import logging

import pytest

from pinyin_split.cedict import build_from_lines
from pinyin_split.dictionary import (
    NO_MEANING,
    Dictionary,
    DictionaryEntry,
    DictionaryFormatError,
    load_dictionary,
    read_dictionary,
    save_dictionary,
)
from pinyin_split.fallback import FALLBACK_ENTRIES


class TestDictionaryEntry:
    """Display-string parsing and rendering"""

    def test_parse_display_form(self):
        entry = DictionaryEntry.parse("你好 (hello)")
        assert entry == DictionaryEntry(chinese="你好", gloss="hello")

    def test_parse_gloss_with_punctuation(self):
        entry = DictionaryEntry.parse("没关系 (it's okay)")
        assert entry.chinese == "没关系"
        assert entry.gloss == "it's okay"

    def test_parse_gloss_with_parentheses(self):
        entry = DictionaryEntry.parse("吗 ((question particle for yes-no questions))")
        assert entry.gloss == "(question particle for yes-no questions)"
        assert DictionaryEntry.parse("得到 (to obtain (a result))").gloss == "to obtain (a result)"

    def test_parse_without_gloss(self):
        entry = DictionaryEntry.parse("奇怪")
        assert entry.chinese == "奇怪"
        assert entry.gloss == NO_MEANING

    def test_parse_loose_format(self):
        entry = DictionaryEntry.parse("字 some meaning")
        assert entry == DictionaryEntry(chinese="字", gloss="some meaning")

    def test_str_is_display_form(self):
        assert str(DictionaryEntry("中国", "China")) == "中国 (China)"

    def test_frozen(self):
        entry = DictionaryEntry("中国", "China")
        with pytest.raises(AttributeError):
            entry.chinese = "中"


class TestDictionary:
    """Construction invariants and lookups"""

    def test_keys_are_normalized_and_merged(self):
        d = Dictionary.from_mapping({
            "Ni3": ["你 (you)"],
            "ni": ["泥 (mud)", "你 (you)"],
        })
        assert list(d) == ["ni"]
        assert [e.chinese for e in d["ni"]] == ["你", "泥"]

    def test_empty_lists_and_keys_dropped(self):
        d = Dictionary.from_mapping({"a": [], "123": ["x (x)"], "b": ["乙 (b)"]})
        assert "a" not in d
        assert "" not in d
        assert len(d) == 1

    def test_iteration_is_lexicographic(self, fallback_dictionary):
        assert list(fallback_dictionary) == sorted(fallback_dictionary)

    def test_accepts_structured_values(self):
        d = Dictionary.from_mapping({"zhongguo": [{"chinese": "中国", "gloss": "China"}]})
        assert d.first("zhongguo") == DictionaryEntry("中国", "China")

    def test_rejects_unknown_value_type(self):
        with pytest.raises(DictionaryFormatError):
            Dictionary.from_mapping({"a": [42]})

    @pytest.mark.parametrize("value", ["你 (you)", {"chinese": "你", "gloss": "you"}])
    def test_rejects_value_that_is_not_a_list(self, value):
        with pytest.raises(DictionaryFormatError):
            Dictionary.from_mapping({"ni": value})

    def test_rejects_object_without_chinese(self):
        with pytest.raises(DictionaryFormatError):
            Dictionary.from_mapping({"a": [{"gloss": "nothing"}]})

    def test_immutable(self, fallback_dictionary):
        with pytest.raises(TypeError):
            fallback_dictionary["new"] = ("x",)
        assert isinstance(fallback_dictionary["ni"], tuple)

    def test_first(self, fallback_dictionary):
        assert fallback_dictionary.first("ni").chinese == "你"
        assert fallback_dictionary.first("missing") is None

    def test_longest_prefix(self, toy_dictionary):
        assert toy_dictionary.longest_prefix("abx") == "ab"
        assert toy_dictionary.longest_prefix("xab", 1) == "ab"
        assert toy_dictionary.longest_prefix("zz") is None
        assert toy_dictionary.longest_prefix("ab", 2) is None

    def test_longest_prefix_ignores_phrase_keys_in_tokens(self, toy_dictionary):
        assert toy_dictionary.longest_prefix("abcd") == "ab"

    def test_keys_with_prefix(self, fallback_dictionary):
        assert fallback_dictionary.keys_with_prefix("zh") == ["zhong", "zhong guo", "zhongguo"]
        assert fallback_dictionary.keys_with_prefix("qqq") == []

    def test_has_prefix(self, fallback_dictionary):
        assert fallback_dictionary.has_prefix("xie")
        assert not fallback_dictionary.has_prefix("qqq")

    def test_empty_dictionary(self):
        d = Dictionary.from_mapping({})
        assert len(d) == 0
        assert d.longest_prefix("ni") is None
        assert d.keys_with_prefix("") == []


class TestPersistence:
    """JSON save/read and fallback loading"""

    def test_save_display_strings(self, tmp_path):
        path = tmp_path / "out" / "cedict.json"
        save_dictionary({"zhongguo": [DictionaryEntry("中国", "China")], "ai": ["爱 (love)"]}, path)

        data = json.loads(path.read_text(encoding="utf-8"))
        assert list(data) == ["ai", "zhongguo"]
        assert data["zhongguo"] == ["中国 (China)"]

    def test_save_structured(self, tmp_path):
        path = tmp_path / "cedict.json"
        save_dictionary({"zhongguo": [DictionaryEntry("中国", "China")]}, path, structured=True)

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data == {"zhongguo": [{"chinese": "中国", "gloss": "China"}]}
        assert read_dictionary(path).first("zhongguo") == DictionaryEntry("中国", "China")

    def test_read_saved_file(self, dictionary_file):
        d = read_dictionary(dictionary_file)
        assert len(d) == len(FALLBACK_ENTRIES)
        assert d.first("ni hao").chinese == "你好"

    def test_read_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_dictionary(tmp_path / "missing.json")

    @pytest.mark.parametrize("content", [
        "{not json",
        "[1, 2, 3]",
        '{"ni": "你 (you)"}',
    ])
    def test_read_malformed_file(self, tmp_path, content):
        path = tmp_path / "bad.json"
        path.write_text(content, encoding="utf-8")
        with pytest.raises(DictionaryFormatError):
            read_dictionary(path)

    def test_load_falls_back_when_missing(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING, logger="pinyin_split.dictionary"):
            d = load_dictionary(tmp_path / "missing.json")
        assert d.first("ni hao").chinese == "你好"
        assert "fallback" in caplog.text

    def test_load_falls_back_when_malformed(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        assert "woaini" in load_dictionary(path)

    def test_load_without_fallback_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_dictionary(tmp_path / "missing.json", fallback=False)

    def test_load_existing(self, dictionary_file):
        assert load_dictionary(dictionary_file, fallback=False).first("xiexie").chinese == "谢谢"

    def test_parenthesized_gloss_survives_build_save_load(self, tmp_path):
        entries = build_from_lines([
            "嗎 吗 [ma5] /(question particle for yes-no questions)/",
            "得到 得到 [de2 dao4] /to obtain (a result)/to get/",
        ])
        path = tmp_path / "cedict.json"
        save_dictionary(entries, path)

        d = load_dictionary(path, fallback=False)
        assert d.first("ma") == DictionaryEntry("吗", "(question particle for yes-no questions)")
        assert d.first("dedao") == DictionaryEntry("得到", "to obtain (a result)")

    def test_failed_save_keeps_existing_file(self, tmp_path, monkeypatch):
        path = tmp_path / "cedict.json"
        save_dictionary({"ni": ["你 (you)"]}, path)
        before = path.read_text(encoding="utf-8")

        def broken_dump(data, f, **kwargs):
            f.write('{"ni": [')
            raise OSError("disk full")

        monkeypatch.setattr(json, "dump", broken_dump)
        with pytest.raises(OSError):
            save_dictionary({"hao": ["好 (good)"]}, path)

        assert path.read_text(encoding="utf-8") == before
        assert list(tmp_path.iterdir()) == [path]
