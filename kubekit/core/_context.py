from __future__ import annotations

import uuid
from typing import Any

from .data_model import DataModel


class Context(DataModel):
    """Context passed along with every operation and validation call."""

    id: str | None = None
    data: dict[str, Any] | None = None

    @staticmethod
    def create(context: dict | Context | None = None) -> Context:
        if isinstance(context, dict):
            context = Context.from_dict(context)
        return Context(
            id=context.id if context and context.id else str(uuid.uuid4()),
            data=context.data if context else None,
        )
