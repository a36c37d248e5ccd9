"""
Database Seeder.

Run this script to populate the database with the sample content defined in
data/sample_workflows.py, one history row per item, and default settings.

Usage:
    python -m workflow_extensions.scripts.db_seed
"""

from sqlmodel import Session, select

from workflow_extensions.data.sample_workflows import SAMPLE_CONTENT
from workflow_extensions.domain.models import UIStyle
from workflow_extensions.infrastructure.database.connection import engine, init_db
from workflow_extensions.infrastructure.database.tables import NodeDBModel, WorkflowNodeHistoryDBModel
from workflow_extensions.repositories.settings import SqlSettingsStore
from workflow_extensions.services.configuration import VAR_UI_STYLE


def seed_content(bind=None):
    bind = bind or engine
    print("Initializing Database Connection...")

    init_db(bind)

    with Session(bind) as session:
        print(f"Found {len(SAMPLE_CONTENT)} content items to seed.")

        for item in SAMPLE_CONTENT:
            print(f"Processing content item: {item.nid}")

            # Upsert logic: update existing records or insert new ones.
            existing = session.get(NodeDBModel, item.nid)
            if existing:
                print("--> Updating existing record.")
                existing.type = item.type
                existing.title = item.title
                existing.uid = item.uid
                existing.sid = item.sid
                existing.changed = item.changed
                session.add(existing)
            else:
                print("--> Creating new record.")
                session.add(
                    NodeDBModel(
                        nid=item.nid,
                        type=item.type,
                        title=item.title,
                        uid=item.uid,
                        sid=item.sid,
                        changed=item.changed,
                    )
                )

            # The item entered its current state when it was last changed
            statement = select(WorkflowNodeHistoryDBModel).where(
                WorkflowNodeHistoryDBModel.nid == item.nid
            )
            if not session.exec(statement).first():
                session.add(
                    WorkflowNodeHistoryDBModel(
                        nid=item.nid,
                        old_sid=0,
                        sid=item.sid,
                        uid=item.uid,
                        stamp=item.changed,
                    )
                )

        session.commit()

    store = SqlSettingsStore(bind)
    if store.get(VAR_UI_STYLE) is None:
        store.set(VAR_UI_STYLE, int(UIStyle.BUTTONS))
    print("Content seeding complete.")


if __name__ == "__main__":
    seed_content()
