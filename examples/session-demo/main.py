"""
Session Demo

Three participants edit concurrently, then receive each other's edits in
different orders and still end up with the same document.
Run with: python main.py
"""

import asyncio
import logging
import sys
import os

# Add the parent package to path for development
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "..", "python"))

from causalkit import CreateNode, MoveNode, RemoveNode, Session, UpdateNode


async def main():
    session = Session(3, names=["alice", "bob", "carol"])

    await session.submit(0, CreateNode(author="alice"))
    await session.submit(1, CreateNode(author="bob"))
    await session.submit(2, CreateNode(author="carol"))
    await session.deliver_all()

    # Concurrent edits, nobody has seen the others yet
    await session.submit(0, UpdateNode(node_id=1, text="edited by alice"))
    await session.submit(1, MoveNode(node_id=0, new_index=2))
    await session.submit(2, RemoveNode(node_id=2))

    await session.deliver(0, order=[1, 0])
    await session.deliver(1, order=[0, 1])
    await session.deliver(2, order=[1, 0])

    for participant in session.participants:
        print(f"{participant.name} {participant.manager.timestamp}")
        print(participant.document)
        print()

    print(f"Converged: {session.converged()}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    asyncio.run(main())
