"""
Event Config Query Repository Interface

Event and layout documents are owned by the event management service and
stored verbatim. Inventory only reads them, except for capacity changes.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class IEventConfigQueryRepo(ABC):
    @abstractmethod
    async def get_event_document(self, *, event_id: str) -> Optional[Dict[str, Any]]:
        """Raw event document, or None when the event does not exist."""
        pass

    @abstractmethod
    async def get_layout_document(self, *, layout_id: str) -> Optional[Dict[str, Any]]:
        pass
