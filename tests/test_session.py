"""Tests for the in-process participant session."""

from __future__ import annotations

import asyncio
import itertools

import pytest

from causalkit import CreateNode, MoveNode, RemoveNode, Session, UpdateNode


def run(coro):
    return asyncio.run(coro)


class TestSession:
    def test_participants_have_own_slots(self):
        session = Session(3, names=["a", "b", "c"])
        assert [p.index for p in session.participants] == [0, 1, 2]
        assert [p.name for p in session.participants] == ["a", "b", "c"]

    def test_name_count_must_match(self):
        with pytest.raises(ValueError):
            Session(2, names=["only-one"])

    def test_unknown_participant(self):
        with pytest.raises(KeyError):
            Session(2).participant(5)

    def test_submit_queues_for_others_only(self):
        async def scenario():
            session = Session(3)
            message = await session.submit(1, CreateNode(author="b"))
            return session, message

        session, message = run(scenario())

        assert message.clock().counters == (0, 1, 0)
        assert session.pending(0) == [message]
        assert session.pending(1) == []
        assert session.pending(2) == [message]

    def test_exchange_converges(self):
        async def scenario():
            session = Session(2)
            await session.submit(0, CreateNode(author="first"))
            await session.submit(1, CreateNode(author="second"))
            assert not session.converged()
            delivered = await session.deliver_all()
            return session, delivered

        session, delivered = run(scenario())

        assert delivered == 2
        assert session.converged()
        assert [n.author for n in session.document(0).nodes] == ["second", "first"]

    def test_deliver_in_any_order_converges(self):
        edits = [
            (0, CreateNode(author="a")),
            (1, CreateNode(author="b")),
            (0, UpdateNode(node_id=0, text="x")),
            (1, MoveNode(node_id=0, new_index=1)),
        ]

        async def scenario(order):
            session = Session(3)
            for index, edit in edits:
                await session.submit(index, edit)
            await session.deliver(0)
            await session.deliver(1)
            await session.deliver(2, order=order)
            return session

        documents = [
            run(scenario(list(order))).document(2)
            for order in itertools.permutations(range(len(edits)))
        ]
        assert all(document == documents[0] for document in documents)

        session = run(scenario(None))
        assert session.converged()

    def test_deliver_rejects_bad_order(self):
        async def scenario():
            session = Session(2)
            await session.submit(0, CreateNode(author="a"))
            await session.deliver(1, order=[0, 0])

        with pytest.raises(ValueError):
            run(scenario())

    def test_failed_delivery_keeps_undelivered_messages(self):
        async def scenario():
            session = Session(2)
            await session.submit(0, CreateNode(author="a"))
            await session.submit(0, CreateNode(author="b"))
            # A message with the wrong number of slots in the middle
            bad = {
                "type": "edit",
                "sender": 0,
                "timestamp": [5, 0, 0],
                "edit": {"type": "create_node", "author": "bad"},
            }
            session._pending[1].insert(1, bad)

            with pytest.raises(ValueError):
                await session.deliver(1)
            return session

        session = run(scenario())

        assert [n.author for n in session.document(1).nodes] == ["a"]
        assert [m.timestamp for m in session.pending(1)] == [[5, 0, 0], [2, 0]]

    def test_deliver_empties_queue(self):
        async def scenario():
            session = Session(2)
            await session.submit(0, RemoveNode(node_id=4))
            first = await session.deliver(1)
            second = await session.deliver(1)
            return session, first, second

        session, first, second = run(scenario())

        assert (first, second) == (1, 0)
        assert len(session.participant(1).manager.entries) == 1

    def test_concurrent_submissions_are_serialized(self):
        async def scenario():
            session = Session(1)
            participant = session.participant(0)
            await asyncio.gather(
                *(participant.submit(CreateNode(author=str(i))) for i in range(20))
            )
            return participant

        participant = run(scenario())

        assert participant.manager.timestamp.counters == (20,)
        assert participant.document.node_ids == list(range(20))
