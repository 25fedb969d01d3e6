import asyncio
import json

import pytest

from epg_guide.services.association_service import load_association_table, parse_association_table
from epg_guide.services.guide_types import GuideConfigurationError


class TestParseAssociationTable:

    def test_keeps_file_order(self, associations_raw):
        table = parse_association_table(json.dumps(associations_raw))
        assert list(table) == ["bbc.uk", "cnn.us", "orphan.fr"]
        assert [entry.site for entry in table["bbc.uk"]] == ["bbc.co.uk", "tvguide.co.uk"]

    def test_programme_fields(self, associations_raw):
        entry = parse_association_table(json.dumps(associations_raw))["bbc.uk"][0]
        assert entry.channel == "bbc.uk"
        assert entry.start == 1700000000
        assert entry.title[0].lang == "en"
        assert entry.title[0].value == "News & Weather"
        assert entry.icons == ["https://img.example.com/news.png"]

    def test_optional_fields_default(self):
        entry = parse_association_table('{"abc": [{"site": "abc.com", "extra": 1}]}')["abc"][0]
        assert entry.start is None
        assert entry.stop is None
        assert entry.title == []
        assert entry.categories == []
        assert entry.icons == []

    def test_null_lists_become_empty(self):
        entry = parse_association_table('{"abc": [{"site": "abc.com", "title": null, "icons": null}]}')["abc"][0]
        assert entry.title == []
        assert entry.icons == []

    def test_invalid_json(self):
        with pytest.raises(GuideConfigurationError, match="not valid JSON"):
            parse_association_table("{not json")

    def test_empty_site_list(self):
        with pytest.raises(GuideConfigurationError, match="failed validation"):
            parse_association_table('{"abc": []}')

    def test_missing_site(self):
        with pytest.raises(GuideConfigurationError):
            parse_association_table('{"abc": [{"channel": "abc"}]}')

    def test_not_an_object(self):
        with pytest.raises(GuideConfigurationError):
            parse_association_table('[{"site": "abc.com"}]')


class TestLoadAssociationTable:

    def test_reads_file(self, tmp_path, associations_raw):
        path = tmp_path / "programs.json"
        path.write_text(json.dumps(associations_raw), encoding="utf-8")

        table = asyncio.run(load_association_table(path))

        assert list(table) == ["bbc.uk", "cnn.us", "orphan.fr"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            asyncio.run(load_association_table(tmp_path / "missing.json"))


class TestNullEntries:

    def test_null_entry_kept_in_place(self):
        table = parse_association_table('{"a.us": [{"site": "a.com", "start": 1, "stop": 2}, null]}')
        assert len(table["a.us"]) == 2
        assert table["a.us"][0].site == "a.com"
        assert table["a.us"][1] is None

    def test_only_nulls_still_non_empty(self):
        table = parse_association_table('{"a.us": [null]}')
        assert table["a.us"] == [None]
