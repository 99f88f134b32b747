"""
Supabase Realtime broadcaster

Sends broadcast messages through the Realtime REST endpoint
"""

import logging
from typing import Any, Dict, Optional

import httpx

from app.exceptions import NotificationError

logger = logging.getLogger(__name__)


class RealtimeBroadcaster:
    """Publishes named events to a Supabase Realtime broadcast channel"""

    def __init__(
        self,
        supabase_url: str,
        api_key: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.broadcast_url = f"{supabase_url.rstrip('/')}/realtime/v1/api/broadcast"
        self.api_key = api_key
        self.timeout = timeout
        self.transport = transport

    async def publish(self, channel: str, event: str, payload: Dict[str, Any]) -> None:
        """
        Send one broadcast message (fire-and-forget, no acknowledgement).

        Args:
            channel: Realtime topic, e.g. "tasks-channel"
            event: Event name, e.g. "task.created"
            payload: JSON-serializable event payload

        Raises:
            NotificationError: If the request fails or Realtime rejects it
        """
        message = {
            "messages": [
                {"topic": channel, "event": event, "payload": payload},
            ]
        }

        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.post(
                    self.broadcast_url,
                    json=message,
                    headers={
                        "apikey": self.api_key,
                        "Authorization": f"Bearer {self.api_key}",
                        "Content-Type": "application/json",
                    },
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            raise NotificationError(f"Broadcast request failed: {str(e)}") from e

        if response.status_code >= 300:
            raise NotificationError(
                f"Broadcast rejected with status {response.status_code}: {response.text}"
            )

        logger.debug(f"Broadcast {event} sent on {channel}")
