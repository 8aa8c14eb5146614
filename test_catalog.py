"""Tests for catalog loading and the catalog store"""
import json

import pytest
from pydantic import ValidationError

from yojana.config import DEFAULT_CATALOG_PATH
from yojana.models.common import Gender
from yojana.services.catalog_service import CatalogStore, SchemeCatalog, load_catalog


def _write(tmp_path, content):
    path = tmp_path / "yojana.json"
    path.write_text(content if isinstance(content, str) else json.dumps(content), encoding="utf-8")
    return path


def test_load_canonical_catalog(tmp_path):
    path = _write(tmp_path, [
        {"title": "A", "eligibility": {"minAge": 18, "maxAge": 60, "maxIncome": 100000, "caste": "OBC", "gender": "Female"}},
        {"title": "B", "eligibility": {"minAge": 10, "maxAge": 16, "maxIncome": 50000, "caste": "SC", "gender": "male"}},
    ])
    catalog = load_catalog(path)

    assert len(catalog) == 2
    assert [scheme.title for scheme in catalog] == ["A", "B"]
    rule = catalog.records[0].eligibility
    assert (rule.min_age, rule.max_age, rule.max_income, rule.caste) == (18, 60, 100000, "OBC")
    assert rule.gender is Gender.FEMALE


def test_load_legacy_field_names(tmp_path):
    path = _write(tmp_path, [
        {"title": "Old", "EligibilityModel": {"age": 21, "maxAge": 65, "income": 250000, "caste": "OBC", "Gender": "Female"}}
    ])
    scheme = load_catalog(path).records[0]

    assert scheme.eligibility.min_age == 21
    assert scheme.eligibility.max_income == 250000
    assert scheme.eligibility.gender is Gender.FEMALE
    assert scheme.to_document()["eligibility"] == {
        "minAge": 21, "maxAge": 65, "maxIncome": 250000, "caste": "OBC", "gender": "female"
    }


def test_descriptive_fields_pass_through(tmp_path):
    path = _write(tmp_path, [
        {"title": "A", "benefit": "Rs 1500", "tags": ["women", "dbt"], "eligibility": {"minAge": 18}}
    ])
    doc = load_catalog(path).to_documents()[0]

    assert doc["benefit"] == "Rs 1500"
    assert doc["tags"] == ["women", "dbt"]
    assert doc["title"] == "A"


def test_missing_file_gives_empty_catalog(tmp_path):
    assert len(load_catalog(tmp_path / "missing.json")) == 0


def test_invalid_json_gives_empty_catalog(tmp_path):
    assert len(load_catalog(_write(tmp_path, "[{not json"))) == 0


def test_non_array_document_gives_empty_catalog(tmp_path):
    assert len(load_catalog(_write(tmp_path, {"title": "A"}))) == 0


def test_non_object_entries_are_skipped(tmp_path):
    path = _write(tmp_path, [{"title": "A"}, "oops", 42, None, {"title": "B", "eligibility": None}])
    catalog = load_catalog(path)
    assert [scheme.title for scheme in catalog] == ["A", "B"]


def test_packaged_catalog_loads():
    catalog = load_catalog(DEFAULT_CATALOG_PATH)
    assert len(catalog) > 0
    assert all(scheme.title for scheme in catalog)


def test_store_publish_swaps_whole_snapshot():
    first = SchemeCatalog.from_documents([{"title": "A"}])
    second = SchemeCatalog.from_documents([{"title": "B"}, {"title": "C"}])
    store = CatalogStore(first)

    reader_view = store.current()
    previous = store.publish(second)

    assert previous is first
    assert store.current() is second
    # a reader holding the old snapshot keeps a consistent view
    assert [scheme.title for scheme in reader_view] == ["A"]


def test_store_reload_from_file(tmp_path):
    store = CatalogStore()
    assert len(store.current()) == 0

    catalog = store.reload(_write(tmp_path, [{"title": "A"}]))

    assert store.current() is catalog
    assert len(catalog) == 1


def test_catalog_is_immutable():
    catalog = SchemeCatalog.from_documents([{"title": "A", "eligibility": {"minAge": 18}}])
    assert isinstance(catalog.records, tuple)
    scheme = catalog.records[0]
    with pytest.raises(ValidationError):
        scheme.title = "changed"
    assert scheme.title == "A"
