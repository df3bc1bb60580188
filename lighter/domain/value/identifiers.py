"""Strongly typed identifiers for Lighter domain entities.

Ids are opaque to callers; they are generated with uuid4() when the entity
is created and never change afterwards.
"""

from typing import NewType
from uuid import UUID

QuestionId = NewType("QuestionId", UUID)
AnswerId = NewType("AnswerId", UUID)
VoteId = NewType("VoteId", UUID)
