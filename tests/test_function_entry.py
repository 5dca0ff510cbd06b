"""Function doc entry tests: tag dispatch, defaults and failure reporting."""

import pytest
from docentry import Diagnostics, FunctionDocEntry, FunctionType, Realm
from docentry.tags import FunctionTag, IndexTag, PropertyTag
from pydantic import ValidationError
from tests import helpers as t


def parse(args, function_type=FunctionType.STATIC, options=None):
    return FunctionDocEntry.parse(args, function_type, options)


class TestScenarios:
    def test_params_returns_realm_and_private(self, make_args):
        a = t.param("a")
        x = t.ret("x")
        entry = parse(make_args([a, x, t.server(), t.private()]))

        assert entry.params == (a,)
        assert entry.returns == (x,)
        assert entry.realm == (Realm.SERVER,)
        assert entry.private is True
        assert entry.deprecated is None

    def test_unknown_tag_fails_with_one_diagnostic(self, make_args):
        unknown = t.within("Players")
        with pytest.raises(Diagnostics) as exc_info:
            parse(make_args([t.param("a"), unknown]))

        diagnostics = exc_info.value
        assert len(diagnostics) == 1
        assert diagnostics.tags[0] is unknown

    def test_empty_tags_give_defaults(self, make_args):
        entry = parse(make_args([]))

        assert entry.params == ()
        assert entry.returns == ()
        assert entry.custom_tags == ()
        assert entry.errors == ()
        assert entry.realm == ()
        assert not entry.private
        assert not entry.unreleased
        assert not entry.yields
        assert not entry.ignore
        assert entry.since is None
        assert entry.deprecated is None


class TestAcceptedTags:
    def test_every_accepted_tag_lands_in_a_field(self, make_args):
        tags = t.all_function_tags()
        entry = parse(make_args(tags))

        assert entry.params == (tags[0],)
        assert entry.returns == (tags[1],)
        assert entry.deprecated == tags[2]
        assert entry.since == "1.0"
        assert entry.custom_tags == (tags[4],)
        assert entry.errors == (tags[5],)
        assert entry.private and entry.unreleased and entry.yields and entry.ignore
        assert entry.realm == (Realm.SERVER, Realm.CLIENT)

    def test_ordered_fields_keep_source_order(self, make_args):
        p1, p2, p3 = t.param("a"), t.param("b"), t.param("c")
        r1, r2 = t.ret("number"), t.ret("string")
        c1, c2 = t.custom("one"), t.custom("two")
        e1, e2 = t.error("A"), t.error("B")
        tags = [p1, r1, c1, e1, p2, r2, c2, e2, p3]

        entry = parse(make_args(tags))

        assert entry.params == (p1, p2, p3)
        assert entry.returns == (r1, r2)
        assert entry.custom_tags == (c1, c2)
        assert entry.errors == (e1, e2)

    def test_duplicate_params_are_kept(self, make_args):
        first, second = t.param("a"), t.param("a")
        entry = parse(make_args([first, second]))
        assert entry.params == (first, second)

    def test_realm_has_no_duplicates(self, make_args):
        entry = parse(make_args([t.server(), t.server(), t.client()]))
        assert len(entry.realm) == 2
        assert entry.realm == (Realm.SERVER, Realm.CLIENT)

    def test_realm_order_ignores_tag_order(self, make_args):
        entry = parse(make_args([t.client(), t.server()]))
        assert [realm.value for realm in entry.realm] == ["Server", "Client"]

    def test_realm_order_on_direct_construction(self, comment):
        entry = FunctionDocEntry(
            name="spawn",
            description="",
            within="Players",
            source=comment,
            entry_kind=FunctionType.STATIC,
            realm=[Realm.CLIENT, Realm.SERVER, Realm.CLIENT],
        )
        assert entry.realm == (Realm.SERVER, Realm.CLIENT)

    def test_flags_are_idempotent(self, make_args):
        entry = parse(make_args([t.private(), t.private()]))
        assert entry.private is True

    def test_last_since_wins(self, make_args):
        entry = parse(make_args([t.since("1.0"), t.since("2.0")]))
        assert entry.since == "2.0"

    def test_last_deprecated_wins(self, make_args):
        old, new = t.deprecated("1.0"), t.deprecated("2.0", "Gone")
        entry = parse(make_args([old, new]))
        assert entry.deprecated == new

    def test_function_type_is_kept(self, make_args):
        entry = parse(make_args([]), FunctionType.METHOD)
        assert entry.entry_kind is FunctionType.METHOD

    def test_base_fields_and_source(self, make_args, comment):
        entry = parse(make_args([], name="despawn", desc="", within="World"))
        assert entry.name == "despawn"
        assert entry.description == ""
        assert entry.within == "World"
        assert entry.source is comment


class TestRejectedTags:
    def test_one_diagnostic_per_unused_tag(self, make_args):
        bad = [
            t.within("Players"),
            t.field("x"),
            t.readonly(),
            FunctionTag(name="spawn"),
            PropertyTag(name="Count"),
        ]
        tags = [t.param("a"), bad[0], t.server(), bad[1], bad[2], t.ret("x")]
        tags += bad[3:]

        with pytest.raises(Diagnostics) as exc_info:
            parse(make_args(tags))

        diagnostics = exc_info.value
        assert len(diagnostics) == len(bad)
        assert diagnostics.tags == bad

    def test_unused_message(self, make_args):
        with pytest.raises(Diagnostics) as exc_info:
            parse(make_args([IndexTag(name="__index")]))

        (diagnostic,) = exc_info.value
        assert diagnostic.message == "This tag is unused by function doc entries."

    def test_same_kind_rejected_twice_reports_both(self, make_args):
        first, second = t.readonly(), t.readonly()
        with pytest.raises(Diagnostics) as exc_info:
            parse(make_args([first, second]))
        assert exc_info.value.tags == [first, second]

    def test_failure_does_not_depend_on_position(self, make_args):
        for tags in (
            [t.class_("Players"), t.param("a"), t.param("b")],
            [t.param("a"), t.class_("Players"), t.param("b")],
            [t.param("a"), t.param("b"), t.class_("Players")],
        ):
            with pytest.raises(Diagnostics):
                parse(make_args(tags))


class TestPreconditions:
    def test_missing_within_fails_validation(self, make_args):
        with pytest.raises(ValidationError):
            parse(make_args([], within=None))

    def test_entry_is_frozen(self, make_args):
        entry = parse(make_args([]))
        with pytest.raises(ValidationError):
            entry.private = True
