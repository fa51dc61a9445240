"""Unit tests for the document model and edit application."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from causalkit.document import Document, Node
from causalkit.edits import (
    CreateNode,
    EditBase,
    MoveNode,
    RemoveNode,
    UpdateNode,
    apply_edit,
    parse_edit,
)


def build(*authors: str) -> Document:
    document = Document()
    for author in authors:
        apply_edit(CreateNode(author=author), document)
    return document


class TestDocument:
    def test_ids_follow_creation_order(self):
        document = build("a", "b", "c")
        assert document.node_ids == [0, 1, 2]

    def test_ids_not_reused_after_remove(self):
        document = build("a", "b")
        document.remove_node(1)
        node = document.append_node("c")
        assert node.id == 2

    def test_copy_is_independent(self):
        document = build("a")
        snapshot = document.copy()
        document.update_text(0, "changed")
        document.append_node("b")
        assert snapshot.nodes == [Node(0, "a")]
        assert snapshot.next_id == 1

    def test_equality(self):
        assert build("a", "b") == build("a", "b")
        assert build("a", "b") != build("b", "a")

    def test_str(self):
        document = build("alice", "bob")
        document.update_text(0, "hello")
        assert str(document) == "[0] alice: hello\n[1] bob: "

    def test_to_dict(self):
        assert build("a").to_dict() == {
            "nodes": [{"id": 0, "author": "a", "text": ""}],
            "next_id": 1,
        }


class TestApplyEdit:
    def test_create(self):
        document = Document()
        assert apply_edit(CreateNode(author="a"), document)
        assert document.nodes == [Node(0, "a")]

    def test_update(self):
        document = build("a")
        assert apply_edit(UpdateNode(node_id=0, text="hi"), document)
        assert document.get(0).text == "hi"

    def test_move(self):
        document = build("a", "b", "c")
        assert apply_edit(MoveNode(node_id=0, new_index=2), document)
        assert document.node_ids == [1, 2, 0]

    def test_move_past_end_places_last(self):
        document = build("a", "b", "c")
        apply_edit(MoveNode(node_id=1, new_index=10), document)
        assert document.node_ids == [0, 2, 1]

    def test_remove(self):
        document = build("a", "b")
        assert apply_edit(RemoveNode(node_id=0), document)
        assert document.node_ids == [1]

    @pytest.mark.parametrize(
        "edit",
        [
            UpdateNode(node_id=7, text="x"),
            MoveNode(node_id=7, new_index=0),
            RemoveNode(node_id=7),
        ],
    )
    def test_unknown_node_is_noop(self, edit):
        document = build("a", "b")
        before = document.copy()
        assert apply_edit(edit, document) is False
        assert document == before

    def test_unknown_variant_rejected(self):
        class Rename(EditBase):
            type: str = "rename"

        with pytest.raises(TypeError):
            apply_edit(Rename(), Document())


class TestEditModels:
    def test_edits_are_frozen(self):
        edit = UpdateNode(node_id=0, text="a")
        with pytest.raises(ValidationError):
            edit.text = "b"

    def test_negative_move_index_rejected(self):
        with pytest.raises(ValidationError):
            MoveNode(node_id=0, new_index=-1)

    def test_parse_edit(self):
        edit = parse_edit({"type": "move_node", "node_id": 2, "new_index": 0})
        assert edit == MoveNode(node_id=2, new_index=0)

    def test_parse_edit_from_to_dict(self):
        edit = UpdateNode(node_id=1, text="hello")
        assert parse_edit(edit.to_dict()) == edit

    def test_parse_unknown_type(self):
        with pytest.raises(ValueError, match="Unknown edit type"):
            parse_edit({"type": "split_node"})

    def test_parse_rejects_extra_fields(self):
        with pytest.raises(ValidationError):
            parse_edit({"type": "remove_node", "node_id": 1, "cascade": True})
