"""Public Listing View — pet grid, site text, and the adopt-one-pet flow.

Invariants:
    - load() runs its four fetches concurrently; one failing leaves the others intact
    - adoption_map is derived from the pet list (pet id → adopted_by) and is
      rebuilt from a fresh GET /pets after every successful adoption
    - begin_adoption() only reads; the form is revealed only when the visitor's
      IP has no adoption yet
    - cancel_adoption() has no side effects beyond hiding the form
    - All state is per-instance and discarded with the view
"""

import asyncio
import logging

from petadoption.views.api_client import ApiError, PetsApiClient

logger = logging.getLogger(__name__)

ALREADY_ADOPTED_ALERT = "You have already adopted a pet"
CHECK_FAILED_ALERT = "Error checking adoption status. Please try again."
NAME_REQUIRED_ALERT = "Please enter your name to adopt."


class PublicListingView:
    """Visitor-facing page state."""

    def __init__(self, client: PetsApiClient):
        self.client = client
        self.user_ip: str | None = None
        self.pets: list[dict] = []
        self.adoption_map: dict[int, str] = {}
        self.page_title = ""
        self.page_description = ""
        self.website_title = ""
        self.adopting_pet_id: int | None = None
        self.adoptee_name = ""
        self.alerts: list[str] = []
        self.notice: str | None = None

    def alert(self, message: str) -> None:
        self.alerts.append(message)

    def is_adopted(self, pet_id: int) -> bool:
        return pet_id in self.adoption_map

    async def load(self) -> None:
        await asyncio.gather(
            self._load_ip(),
            self._load_pets(),
            self._load_page_details(),
            self._load_website_title(),
        )

    async def _load_ip(self) -> None:
        # Rendering on a visitor's behalf: their address is already known
        if self.client.forwarded_for:
            self.user_ip = self.client.forwarded_for
            return
        try:
            self.user_ip = await self.client.get_ip()
        except ApiError as e:
            logger.error(f"Error fetching IP: {e.message}")

    async def _load_pets(self) -> None:
        try:
            pets = await self.client.list_pets()
        except ApiError as e:
            logger.error(f"Error fetching adoption status: {e.message}")
            return
        self.pets = pets
        self.adoption_map = {
            pet["id"]: pet["adopted_by"] for pet in pets if pet.get("adopted_by")
        }

    async def _load_page_details(self) -> None:
        try:
            details = await self.client.page_details()
        except ApiError as e:
            logger.error(f"Error fetching page details: {e.message}")
            return
        self.page_title = details["title"]
        self.page_description = details["description"]

    async def _load_website_title(self) -> None:
        try:
            self.website_title = (await self.client.website_title())["title"]
        except ApiError as e:
            logger.error(f"Error fetching website title: {e.message}")

    async def begin_adoption(self, pet_id: int) -> bool:
        """Re-check the visitor's adoption status, then reveal the pet's form."""
        if not self.user_ip:
            self.alert(CHECK_FAILED_ALERT)
            return False
        try:
            already = await self.client.check_adoption(self.user_ip)
        except ApiError as e:
            logger.error(f"Error checking adoption status: {e.message}")
            self.alert(CHECK_FAILED_ALERT)
            return False
        if already:
            self.alert(ALREADY_ADOPTED_ALERT)
            return False
        self.adopting_pet_id = pet_id
        return True

    async def submit_adoption(self, pet_id: int, adoptee_name: str) -> bool:
        """Post the adoption and resync the grid on success."""
        self.adoptee_name = adoptee_name
        if not adoptee_name.strip():
            self.adopting_pet_id = pet_id
            self.alert(NAME_REQUIRED_ALERT)
            return False
        try:
            self.notice = await self.client.adopt(pet_id, adoptee_name.strip())
        except ApiError as e:
            self.adopting_pet_id = pet_id
            if e.status_code is None:
                self.alert(f"Error adopting pet: {e.message}")
            else:
                self.alert(e.message)
            return False

        await self._load_pets()
        self.adopting_pet_id = None
        self.adoptee_name = ""
        return True

    def cancel_adoption(self) -> None:
        self.adopting_pet_id = None
