"""
Tests for the Member model.

These tests verify that the Member model correctly:
1. Records loans only when the item accepts them
2. Refuses returns of items the member does not hold
3. Lists borrowed items in borrow order
"""

import pytest
from pydantic import ValidationError

from lending_registry.models.member import NO_ITEMS_BORROWED, Member
from lending_registry.models.outcome import MissingEntity, OutcomeKind


class TestMemberModel:
    def test_create_member(self, member):
        assert member.id == "MEM001"
        assert member.name == "SomChai"
        assert member.borrowed_item_ids == []
        assert member.borrowed_count == 0

    def test_name_required(self):
        with pytest.raises(ValidationError):
            Member(id="MEM003", name="")

    @pytest.mark.parametrize("member_id", ["", "MEM.001", "Member 7", "M" * 65])
    def test_id_format(self, member_id):
        with pytest.raises(ValidationError):
            Member(id=member_id, name="Somebody")

    def test_members_do_not_share_loans(self):
        first = Member(id="MEM003", name="First")
        second = Member(id="MEM004", name="Second")
        first.borrowed_item_ids.append("L001")
        assert second.borrowed_item_ids == []


class TestMemberBorrow:
    def test_borrow_records_item(self, member, light_novel):
        outcome = member.borrow_item(light_novel)

        assert outcome.ok
        assert str(outcome) == 'Item "Secrets of the Silent Witch" borrowed by SomChai'
        assert member.borrowed_item_ids == ["L001"]
        assert member.has_borrowed("L001")
        assert light_novel.is_available() is False

    def test_borrow_unavailable_item_leaves_list_alone(self, member, other_member, fiction):
        other_member.borrow_item(fiction)

        outcome = member.borrow_item(fiction)

        assert outcome.kind == OutcomeKind.ALREADY_BORROWED
        assert member.borrowed_count == 0
        assert other_member.borrowed_item_ids == ["F001"]

    def test_borrow_same_item_twice(self, member, fiction):
        member.borrow_item(fiction)
        outcome = member.borrow_item(fiction)

        assert outcome.kind == OutcomeKind.ALREADY_BORROWED
        assert member.borrowed_item_ids == ["F001"]

    def test_borrow_order_preserved(self, member, light_novel, periodical, fiction):
        for item in (fiction, light_novel, periodical):
            member.borrow_item(item)
        assert member.borrowed_item_ids == ["F001", "L001", "M001"]


class TestMemberReturn:
    def test_return_held_item(self, member, light_novel, catalog):
        member.borrow_item(light_novel)

        outcome = member.return_item("L001", catalog)

        assert outcome.ok
        assert str(outcome) == 'Item "Secrets of the Silent Witch" returned'
        assert member.borrowed_count == 0
        assert light_novel.is_available() is True

    def test_return_item_not_held(self, member, catalog):
        outcome = member.return_item("F001", catalog)

        assert outcome.kind == OutcomeKind.NOT_BORROWED
        assert outcome.member_id == "MEM001"
        assert str(outcome) == "Item with ID F001 is not in SomChai's borrowed list."

    def test_return_item_held_by_someone_else(self, member, other_member, fiction, catalog):
        other_member.borrow_item(fiction)

        outcome = member.return_item("F001", catalog)

        assert outcome.kind == OutcomeKind.NOT_BORROWED
        assert fiction.is_available() is False
        assert other_member.borrowed_item_ids == ["F001"]

    def test_return_item_missing_from_catalog(self, member, light_novel):
        member.borrow_item(light_novel)

        outcome = member.return_item("L001", {})

        assert outcome.kind == OutcomeKind.NOT_FOUND
        assert outcome.missing == MissingEntity.ITEM
        assert member.borrowed_count == 0

    def test_return_removes_only_that_item(self, member, light_novel, fiction, catalog):
        member.borrow_item(light_novel)
        member.borrow_item(fiction)

        member.return_item("L001", catalog)

        assert member.borrowed_item_ids == ["F001"]


class TestListBorrowedItems:
    def test_empty_listing(self, member, catalog):
        assert member.list_borrowed_items(catalog) == NO_ITEMS_BORROWED

    def test_listing_in_borrow_order(self, member, light_novel, fiction, catalog):
        member.borrow_item(fiction)
        member.borrow_item(light_novel)

        assert member.list_borrowed_items(catalog) == (
            "Fiction: The Last Wish Duration: 7 days (ID: F001)\n"
            "LightNovel: Secrets of the Silent Witch by Matsuri Isora (ID: L001)"
        )
