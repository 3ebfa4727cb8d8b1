from datetime import datetime, timedelta, timezone

import pytest

from app.core.errors import NotFoundError, ValidationError
from app.models import Event, GroupMember, Member, Page, relation_key, split_relation_key
from app.models.base import as_utc


def test_relation_key_round_trip():
    key = relation_key("group1", "member1")

    assert key == "group1:member1"
    assert split_relation_key(key) == ("group1", "member1")


def test_split_relation_key_requires_separator():
    with pytest.raises(ValueError):
        split_relation_key("group1member1")


def test_for_pair_builds_composite_id():
    relation = GroupMember.for_pair("g1", "m1", role="Lider")

    assert relation.id == "g1:m1"
    assert relation.entity_id == "g1"
    assert relation.member_id == "m1"
    assert relation.role == "Lider"


def test_page_from_items():
    full = Page.from_items(["a", "b"], page_size=2)
    short = Page.from_items(["a"], page_size=2)
    empty = Page.from_items([], page_size=2)

    assert full.has_more and full.last_doc == "b"
    assert not short.has_more and short.last_doc == "a"
    assert not empty.has_more and empty.last_doc is None


def test_save_assigns_id_and_delete_is_idempotent(session):
    member = Member(Nombre="Ana")
    saved = member.save(session)

    assert saved.id
    assert saved.id.isalnum()
    assert member.id == saved.id
    assert Member.find_by_id(session, saved.id).Nombre == "Ana"

    Member(id=saved.id).delete(session)
    Member(id=saved.id).delete(session)

    with pytest.raises(NotFoundError):
        Member.find_by_id(session, saved.id)


def test_delete_without_id_is_rejected(session):
    with pytest.raises(ValidationError):
        Member().delete(session)


def test_apply_changes_ignores_id_and_unknown_fields():
    member = Member(id="keep", Nombre="Ana")

    member.apply_changes({"id": "other", "Oficio": "Maestra", "Unknown": 1})

    assert member.id == "keep"
    assert member.Oficio == "Maestra"
    assert member.Nombre == "Ana"
    assert not hasattr(member, "Unknown")


def test_unknown_order_field_is_rejected(session):
    with pytest.raises(ValidationError):
        Member.find_all(session, order_by="Missing")


def test_search_requires_searchable_field(session):
    with pytest.raises(ValidationError):
        Member.search(session, "Ma", field="Oficio")


def test_as_utc():
    plus_two = timezone(timedelta(hours=2))

    assert as_utc(datetime(2026, 3, 1, 10, tzinfo=plus_two)) == datetime(
        2026, 3, 1, 8, tzinfo=timezone.utc
    )
    assert as_utc(datetime(2026, 3, 1, 10)).tzinfo is timezone.utc


def test_timestamps_are_stored_and_read_as_utc(session):
    fecha = datetime(2026, 3, 1, 10, tzinfo=timezone(timedelta(hours=2)))
    event = Event(Nombre="Retiro", Fecha=fecha).save(session)
    member = Member(Nombre="Ana").save(session)
    session.expire_all()

    stored = Event.find_by_id(session, event.id)
    assert stored.Fecha == fecha
    assert stored.Fecha.utcoffset() == timedelta(0)
    assert stored.Fecha.hour == 8

    registered = Member.find_by_id(session, member.id).FechaRegistro
    assert registered.utcoffset() == timedelta(0)
