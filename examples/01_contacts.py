"""
Example 01: Contact Repository

This example demonstrates saving and loading contacts through the
ContactRepository interface, backed by a SQLite file.
"""

import asyncio
import logging
import sqlite3
import tempfile
from pathlib import Path

from contact_store import (
    Contact,
    ContactRepository,
    DriverError,
    NotFoundError,
    SqlContactRepository,
)


async def show(repo: ContactRepository, contact_id: int) -> None:
    try:
        contact = await repo.get(contact_id)
        print(f"   Found: {contact.firstname} {contact.lastname} <{contact.email}>\n")
    except NotFoundError as e:
        print(f"   Not found: {e}\n")


async def main():
    logging.basicConfig(level=logging.DEBUG)

    # Set up database
    db_path = Path(tempfile.mkdtemp()) / "contacts.db"
    conn = sqlite3.connect(db_path)
    conn.execute("""
        CREATE TABLE contact (
            id INTEGER PRIMARY KEY,
            firstname TEXT,
            lastname TEXT,
            phone TEXT,
            email TEXT
        )
    """)
    conn.commit()
    conn.close()

    async with await SqlContactRepository.connect(f"sqlite:///{db_path}") as repo:
        print("=== Contact Repository ===\n")

        print("1. Get a contact that does not exist:")
        await show(repo, 12)

        print("2. Save a contact:")
        contact = Contact(
            id=13,
            firstname="first",
            lastname="second",
            phone="0123456789",
            email="e@mail.com",
        )
        affected = await repo.save(contact)
        print(f"   Rows affected: {affected}\n")

        print("3. Get it back:")
        await show(repo, 13)

        print("4. Save the same id again:")
        try:
            await repo.save(contact)
        except DriverError as e:
            print(f"   Rejected by the store: {e}\n")

    # Clean up
    db_path.unlink()
    db_path.parent.rmdir()


if __name__ == "__main__":
    asyncio.run(main())
