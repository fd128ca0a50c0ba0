"""Adoption Notifier — posts a Telegram message when a pet is adopted.

Invariants:
    - notify_adoption() never raises: failures are logged and reported as False
    - Without both bot token and chat id the call is skipped (logged at INFO)
    - Runs as a background task, after the adoption response is sent
"""

import logging

import httpx

logger = logging.getLogger(__name__)


def format_adoption_message(pet_id: int, adoptee_name: str, ip: str) -> str:
    return f"Pet: {pet_id} has been adopted by {adoptee_name} (IP: {ip})"


class TelegramNotifier:
    """Sends adoption notices through the Telegram Bot API sendMessage method."""

    def __init__(
        self,
        bot_token: str,
        chat_id: str,
        api_base: str = "https://api.telegram.org",
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.bot_token = bot_token
        self.chat_id = chat_id
        self.api_base = api_base.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    @property
    def enabled(self) -> bool:
        return bool(self.bot_token and self.chat_id)

    @property
    def send_message_url(self) -> str:
        return f"{self.api_base}/bot{self.bot_token}/sendMessage"

    async def notify_adoption(
        self, pet_id: int, adoptee_name: str, ip: str,
    ) -> bool:
        if not self.enabled:
            logger.info(
                "Telegram not configured, skipping adoption notice",
                extra={"pet_id": pet_id, "service": "telegram"},
            )
            return False

        payload = {
            "chat_id": self.chat_id,
            "text": format_adoption_message(pet_id, adoptee_name, ip),
        }
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_seconds, transport=self._transport,
            ) as client:
                response = await client.post(self.send_message_url, json=payload)
                response.raise_for_status()
        except httpx.HTTPError as e:
            # Token is part of the URL; log only the exception type
            logger.warning(
                f"Adoption notice failed: {type(e).__name__}",
                extra={"pet_id": pet_id, "service": "telegram"},
            )
            return False

        logger.info(
            "Adoption notice sent",
            extra={"pet_id": pet_id, "service": "telegram"},
        )
        return True
