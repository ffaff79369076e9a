"""Tests for the cross-language consistency check."""

import pytest

from src.checker import (
    ExtraKey,
    FindingKind,
    MissingKey,
    UnusedKeyStillTranslated,
    VariableMismatch,
    check_translations,
    diff_language,
)
from src.errors import MissingBaseLanguageError


class TestDiffLanguage:
    """Test comparison of one language with the base."""

    def test_identical_languages_have_no_findings(self):
        catalog = {"fr": {"a": "x {n}", "b": "y"}, "en": {"a": "X {n}", "b": "Y"}}
        report = diff_language("fr", "en", catalog, {})

        assert report.findings == []
        assert not report.has_errors

    def test_missing_key(self):
        catalog = {"fr": {"greeting": "Hi {name}"}, "en": {}}
        file_index = {"fr": {"greeting": "i18n/fr/common.json"}}

        report = diff_language("fr", "en", catalog, file_index)

        assert report.findings == [MissingKey(key="greeting", file="i18n/fr/common.json")]
        assert report.has_errors

    def test_extra_key(self):
        catalog = {"fr": {}, "en": {"orphan": "x"}}
        file_index = {"en": {"orphan": "i18n/en/common.json"}}

        report = diff_language("fr", "en", catalog, file_index)

        assert report.findings == [ExtraKey(key="orphan", file="i18n/en/common.json")]

    def test_variable_mismatch(self):
        catalog = {"fr": {"welcome.msg": "Hi {name}"}, "en": {"welcome.msg": "Bonjour {nom}"}}
        file_index = {"fr": {"welcome.msg": "fr/a.json"}, "en": {"welcome.msg": "en/a.json"}}

        report = diff_language("fr", "en", catalog, file_index)

        assert len(report.findings) == 1
        mismatch = report.findings[0]
        assert isinstance(mismatch, VariableMismatch)
        assert mismatch.expected == {"name"}
        assert mismatch.found == {"nom"}
        assert mismatch.base_file == "fr/a.json"
        assert mismatch.file == "en/a.json"
        assert mismatch.missing_variables == {"name"}
        assert mismatch.unexpected_variables == {"nom"}

    def test_placeholder_order_is_irrelevant(self):
        catalog = {"fr": {"k": "{a} {b}"}, "en": {"k": "{b} then {a} and {a}"}}
        assert diff_language("fr", "en", catalog, {}).findings == []

    def test_added_placeholder_is_a_mismatch(self):
        catalog = {"fr": {"k": "{a}"}, "en": {"k": "{a} {b}"}}
        findings = diff_language("fr", "en", catalog, {}).findings
        assert [f.kind for f in findings] == [FindingKind.VARIABLE_MISMATCH]

    def test_unknown_provenance_is_none(self):
        catalog = {"fr": {"k": "{a}"}, "en": {"k": "{b}"}}
        mismatch = diff_language("fr", "en", catalog, {}).findings[0]
        assert mismatch.base_file is None
        assert mismatch.file is None

    def test_findings_order(self):
        catalog = {
            "fr": {"z.missing": "m", "a.missing": "m", "shared": "{x}", "dead": "d"},
            "en": {"extra": "e", "shared": "{y}", "dead": "d"},
        }
        report = diff_language("fr", "en", catalog, {}, unused_keys={"dead"})

        assert [f.kind for f in report.findings] == [
            FindingKind.MISSING_KEY,
            FindingKind.MISSING_KEY,
            FindingKind.EXTRA_KEY,
            FindingKind.VARIABLE_MISMATCH,
            FindingKind.UNUSED_KEY_STILL_TRANSLATED,
        ]
        assert [f.key for f in report.missing] == ["a.missing", "z.missing"]

    def test_unused_key_still_translated(self):
        catalog = {"fr": {"footer.copyright": "©"}, "en": {"footer.copyright": "©"}}
        file_index = {"en": {"footer.copyright": "en/common.json"}}

        report = diff_language("fr", "en", catalog, file_index, unused_keys={"footer.copyright"})

        assert report.findings == [
            UnusedKeyStillTranslated(key="footer.copyright", language="en", file="en/common.json")
        ]

    def test_unused_key_absent_from_language_is_not_reported_twice(self):
        catalog = {"fr": {"gone": "x"}, "en": {}}
        report = diff_language("fr", "en", catalog, {}, unused_keys={"gone"})
        assert [f.kind for f in report.findings] == [FindingKind.MISSING_KEY]


class TestCheckTranslations:
    """Test the whole-catalog check."""

    def test_clean_catalog(self):
        catalog = {"fr": {"a": "{x}"}, "en": {"a": "{x}"}, "de": {"a": "{x}"}}
        report = check_translations("fr", catalog, {})

        assert not report.has_errors
        assert sorted(report.languages) == ["de", "en"]
        assert report.impacted_languages == []

    def test_base_language_is_not_checked(self):
        report = check_translations("fr", {"fr": {"a": "x"}}, {})
        assert report.languages == {}
        assert not report.has_errors

    def test_has_errors_is_or_of_languages(self):
        catalog = {"fr": {"a": "x"}, "en": {"a": "x"}, "de": {}}
        report = check_translations("fr", catalog, {})

        assert report.has_errors
        assert report.impacted_languages == ["de"]
        assert not report.languages["en"].has_errors

    def test_missing_base_language_is_fatal(self):
        with pytest.raises(MissingBaseLanguageError) as exc_info:
            check_translations("fr", {"en": {}, "de": {}}, {})

        assert exc_info.value.base_lang == "fr"
        assert exc_info.value.context["available_languages"] == ["de", "en"]

    def test_impacted_files_come_from_mismatches(self):
        catalog = {"fr": {"k": "{a}", "m": "x"}, "en": {"k": "{b}"}}
        file_index = {"fr": {"k": "fr/a.json", "m": "fr/b.json"}, "en": {"k": "en/a.json"}}

        report = check_translations("fr", catalog, file_index)

        assert report.impacted_files == {"fr/a.json", "en/a.json"}

    def test_deterministic(self):
        catalog = {
            "fr": {f"k{i}": f"{{v{i}}}" for i in range(50)},
            "en": {f"k{i}": f"{{w{i}}}" for i in range(0, 50, 2)},
            "de": {f"x{i}": "x" for i in range(10)},
        }
        first = check_translations("fr", catalog, {}, max_workers=4)
        second = check_translations("fr", catalog, {}, max_workers=1)

        assert first.to_dict() == second.to_dict()

    def test_unused_keys_are_kept_on_report(self):
        catalog = {"fr": {"a": "x"}, "en": {"a": "x"}}
        report = check_translations("fr", catalog, {}, unused_keys={"a"})

        assert report.unused_keys == {"a"}
        assert report.has_errors
        assert report.languages["en"].unused_translated[0].key == "a"
