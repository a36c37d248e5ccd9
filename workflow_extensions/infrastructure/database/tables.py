"""
Database Table Definitions.

This module defines the SQL schema using SQLModel.
We use the 'DBModel' suffix to distinguish these persistence models
from the domain dataclasses (ContentItem, Workflow).
"""

from typing import Any, Optional

from sqlalchemy import Column, JSON
from sqlmodel import Field, SQLModel


class VariableDBModel(SQLModel, table=True):
    """
    Persistence model for admin-configured settings.
    One row per variable name; the value is stored as JSON.
    """

    __tablename__ = "variables"

    name: str = Field(primary_key=True)
    value: Any = Field(default=None, sa_column=Column(JSON, nullable=True))


class NodeDBModel(SQLModel, table=True):
    """
    Persistence model for content items.
    Maps 1-to-1 with the 'node' table.
    """

    __tablename__ = "node"

    nid: Optional[int] = Field(default=None, primary_key=True)
    type: str = Field(index=True)
    title: str = ""
    uid: int = 0
    sid: Optional[int] = None

    # Unix seconds
    changed: Optional[int] = None


class WorkflowNodeHistoryDBModel(SQLModel, table=True):
    """
    Persistence model for workflow state changes.
    One row per transition a content item went through.
    """

    __tablename__ = "workflow_node_history"

    hid: Optional[int] = Field(default=None, primary_key=True)
    nid: int = Field(index=True)
    old_sid: int
    sid: int
    uid: int = 0

    # Unix seconds
    stamp: int
    comment: str = ""
