"""Tests for the localization call scanner."""

from __future__ import annotations

import pytest

from locextract.rules.builtin import fresh_builtin_rules
from locextract.rules.models import build_call_pattern
from locextract.scanner.engine import ScanContext, extract_comment, iter_calls, scan, sweep

CALL = build_call_pattern(["NS", "HT"], "LocalizedString")


def _context(**overrides) -> ScanContext:
    fields = dict(
        project_id="webapp",
        source_locale="en-US",
        datatype="x-objective-c",
        call_pattern=CALL,
        path_name="Classes/Foo.m",
        rules=fresh_builtin_rules(),
    )
    fields.update(overrides)
    return ScanContext(**fields)


def _scan(text: str, **overrides):
    return scan(text, _context(**overrides))


class TestSingleCall:
    def test_source_and_comment(self):
        outcome = _scan('NSLocalizedString(@"Hello", @"greeting comment")')
        resources = outcome.resources.get_all()
        assert len(resources) == 1
        r = resources[0]
        assert r.key == "Hello"
        assert r.source == "Hello"
        assert r.comment == "greeting comment"
        assert r.index == 0
        assert r.state == "new"
        assert outcome.warnings == []

    def test_record_fields(self):
        r = _scan('x = NSLocalizedString(@"Hello", nil);').resources.get_all()[0]
        assert r.res_type == "string"
        assert r.project == "webapp"
        assert r.source_locale == "en-US"
        assert r.path_name == "Classes/Foo.m"
        assert r.datatype == "x-objective-c"
        assert r.auto_key is True
        assert r.comment is None

    def test_escaped_literal_is_unescaped(self):
        r = _scan(r'NSLocalizedString(@"Say \"hi\"", @"the \"hi\" text")').resources.get_all()[0]
        assert r.key == 'Say "hi"'
        assert r.source == 'Say "hi"'
        assert r.comment == 'the "hi" text'

    def test_ht_prefix(self):
        outcome = _scan('[b setTitle:HTLocalizedString(@"Save", nil)];')
        assert [r.key for r in outcome.resources] == ["Save"]

    def test_whitespace_inside_call(self):
        outcome = _scan('NSLocalizedString (  @"Spaced"  ,  @"c"  )')
        r = outcome.resources.get_all()[0]
        assert r.key == "Spaced"
        assert r.comment == "c"


class TestMacroNameGuard:
    def test_suffix_of_longer_identifier_ignored(self):
        outcome = _scan('MyNSLocalizedString(@"Nope", nil); XHTLocalizedString(@"No", nil);')
        assert outcome.resources.is_empty()

    def test_unknown_prefix_ignored(self):
        assert _scan('QQLocalizedString(@"Nope", nil)').resources.is_empty()

    def test_custom_prefixes(self):
        outcome = _scan(
            'ABLocalizedString(@"Custom", nil); NSLocalizedString(@"Skipped", nil);',
            call_pattern=build_call_pattern(["AB"], "LocalizedString"),
        )
        assert [r.key for r in outcome.resources] == ["Custom"]


class TestIndices:
    def test_sequential_indices(self, sample_source):
        resources = _scan(sample_source).resources.get_all()
        assert [r.key for r in resources] == ["Settings", "Save", "Don't panic"]
        assert [r.index for r in resources] == [0, 1, 2]

    def test_empty_literal_does_not_consume_index(self):
        text = (
            'NSLocalizedString(@"One", nil);\n'
            'HTLocalizedString(@"   ", nil);\n'
            'NSLocalizedString(@"Two", nil);\n'
        )
        resources = _scan(text).resources.get_all()
        assert [r.key for r in resources] == ["One", "Two"]
        assert resources[1].index == resources[0].index + 1

    def test_duplicate_key_keeps_last_record(self):
        text = 'NSLocalizedString(@"Same", @"first");\nNSLocalizedString(@"Same", @"second");\n'
        resources = _scan(text).resources.get_all()
        assert len(resources) == 1
        assert resources[0].comment == "second"
        assert resources[0].index == 1


class TestSkippedCalls:
    def test_empty_literal_no_resource_no_warning(self):
        outcome = _scan('HTLocalizedString(@"" , nil)')
        assert outcome.resources.is_empty()
        assert outcome.warnings == []

    @pytest.mark.parametrize("text", ["", None])
    def test_empty_text(self, text):
        outcome = _scan(text)
        assert outcome.resources.is_empty()
        assert outcome.warnings == []


class TestComment:
    def test_comment_on_same_line_only(self):
        text = 'NSLocalizedString(@"Key",\n    @"comment on next line")'
        r = _scan(text).resources.get_all()[0]
        assert r.comment is None

    def test_nil_comment(self):
        assert extract_comment('NSLocalizedString(@"A", nil);', 22) is None

    def test_comment_at_end_of_file(self):
        text = 'NSLocalizedString(@"A", @"last")'
        m = next(iter_calls(text, CALL))
        assert extract_comment(text, m.end()) == "last"

    def test_later_call_on_same_line_is_not_the_comment(self):
        text = 'NSLocalizedString(@"A", nil), NSLocalizedString(@"B", @"bc")'
        resources = _scan(text).resources.get_all()
        assert [(r.key, r.comment) for r in resources] == [("A", None), ("B", "bc")]

    def test_unrelated_literal_on_same_line_is_not_the_comment(self):
        r = _scan('NSLocalizedString(@"A", nil); foo(@"zzz");').resources.get_all()[0]
        assert r.comment is None


class TestWarnings:
    def test_concatenation_before_comma(self):
        outcome = _scan('NSLocalizedString(@"Save" + title, @"comment")')
        assert outcome.resources.is_empty()
        assert len(outcome.warnings) == 1
        w = outcome.warnings[0]
        assert w.rule_id == "CONCATENATION_BEFORE_COMMA"
        assert w.matched_text == 'NSLocalizedString(@"Save" +'
        assert w.path_name == "Classes/Foo.m"

    def test_concatenation_in_arguments(self):
        outcome = _scan('NSLocalizedString(@"Key", prefix + @"suffix")')
        assert [w.rule_id for w in outcome.warnings] == ["CONCATENATION_IN_ARGUMENTS"]

    def test_concatenation_in_first_argument(self):
        outcome = _scan('NSLocalizedString(prefix + @"x", nil)')
        assert outcome.resources.is_empty()
        assert len(outcome.warnings) == 1
        assert outcome.warnings[0].rule_id == "CONCATENATION_IN_ARGUMENTS"
        assert outcome.warnings[0].matched_text == 'NSLocalizedString(prefix + @"x"'

    def test_non_literal_argument(self):
        outcome = _scan('NSLocalizedString(someKeyVariable, @"comment")')
        assert outcome.resources.is_empty()
        assert len(outcome.warnings) == 1
        assert outcome.warnings[0].rule_id == "NON_LITERAL_ARGUMENT"

    def test_non_literal_without_quotes(self):
        outcome = _scan("NSLocalizedString(key, nil)")
        assert [w.rule_id for w in outcome.warnings] == ["NON_LITERAL_ARGUMENT"]

    def test_every_match_reported(self):
        text = "NSLocalizedString(a, nil);\nNSLocalizedString(b, nil);\nHTLocalizedString(c, nil);\n"
        outcome = _scan(text)
        assert len(outcome.warnings) == 3
        assert [w.line_no for w in outcome.warnings] == [1, 2, 3]

    def test_mixed_file(self, sample_source_malformed):
        outcome = _scan(sample_source_malformed)
        assert [r.key for r in outcome.resources] == ["Fine"]
        assert outcome.resources.get_all()[0].index == 0
        assert [(w.rule_id, w.line_no) for w in outcome.warnings] == [
            ("CONCATENATION_BEFORE_COMMA", 2),
            ("NON_LITERAL_ARGUMENT", 3),
        ]

    def test_no_rules_no_warnings(self):
        outcome = _scan("NSLocalizedString(key, nil)", rules=())
        assert outcome.warnings == []

    def test_sweeps_are_independent(self):
        rule = fresh_builtin_rules()[2]
        text = "NSLocalizedString(a, nil); NSLocalizedString(b, nil);"
        first = sweep(text, rule, CALL)
        second = sweep(text, rule, CALL)
        assert len(first) == len(second) == 2


class TestResourceFactory:
    def test_custom_factory_is_used(self):
        created = []

        def factory(**fields):
            created.append(fields)
            from locextract.resources.models import ResourceRecord

            return ResourceRecord(**fields)

        _scan('NSLocalizedString(@"Hi", nil)', new_resource=factory)
        assert len(created) == 1
        assert created[0]["key"] == "Hi"
        assert created[0]["index"] == 0
