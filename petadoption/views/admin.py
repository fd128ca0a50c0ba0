"""Admin View — password-gated management of pets and page text.

Invariants:
    - authenticated is True only while the API accepts the client's session token
    - Pets are fetched only once authenticated; page details are always fetched
    - start_edit() pre-fills the form from the chosen pet and switches
      submit_pet() from create to update; cancel_edit() switches it back
    - Every mutation re-fetches the pet list on success and alerts on failure
"""

import logging

from petadoption.views.api_client import ApiError, PetsApiClient

logger = logging.getLogger(__name__)


class AdminView:
    """Admin page state."""

    def __init__(self, client: PetsApiClient):
        self.client = client
        self.authenticated = False
        self.pets: list[dict] = []
        self.page_title = ""
        self.page_description = ""
        self.website_title = ""
        self.editing: dict | None = None
        self.name = ""
        self.description = ""
        self.alerts: list[str] = []

    def alert(self, message: str) -> None:
        self.alerts.append(message)

    @property
    def submit_label(self) -> str:
        return "Update Animal" if self.editing else "Add Animal"

    async def load(self) -> None:
        await self.fetch_page_details()
        self.authenticated = await self._check_session()
        if self.authenticated:
            await self.fetch_pets()

    async def _check_session(self) -> bool:
        try:
            return await self.client.session_active()
        except ApiError as e:
            logger.error(f"Admin session check failed: {e.message}")
            return False

    async def login(self, password: str) -> bool:
        try:
            await self.client.login(password)
        except ApiError as e:
            if e.status_code == 401:
                self.alert("Incorrect password")
            else:
                self.alert(f"Login failed: {e.message}")
            return False
        self.authenticated = True
        await self.fetch_pets()
        return True

    async def logout(self) -> None:
        try:
            await self.client.logout()
        except ApiError as e:
            logger.warning(f"Logout failed: {e.message}")
        self.authenticated = False
        self.pets = []

    async def fetch_pets(self) -> None:
        try:
            self.pets = await self.client.list_pets()
        except ApiError as e:
            self.alert(f"Error fetching animals: {e.message}")

    async def fetch_page_details(self) -> None:
        try:
            details = await self.client.page_details()
            self.website_title = (await self.client.website_title())["title"]
        except ApiError as e:
            logger.error(f"Error fetching page details: {e.message}")
            return
        self.page_title = details["title"]
        self.page_description = details["description"]

    def find_pet(self, pet_id: int) -> dict | None:
        return next((pet for pet in self.pets if pet["id"] == pet_id), None)

    def start_edit(self, pet: dict) -> None:
        self.editing = pet
        self.name = pet["name"]
        self.description = pet["description"]

    def cancel_edit(self) -> None:
        self.editing = None
        self.name = ""
        self.description = ""

    async def submit_pet(
        self,
        name: str,
        description: str,
        image: tuple[str, bytes, str] | None = None,
        edit_id: int | None = None,
    ) -> bool:
        """Create a pet, or update the one being edited."""
        self.name, self.description = name, description
        if edit_id is not None:
            self.editing = self.find_pet(edit_id) or {"id": edit_id}
        if self.editing:
            return await self._update_pet(image)
        return await self._add_pet(image)

    async def _add_pet(self, image: tuple[str, bytes, str] | None) -> bool:
        if image is None:
            self.alert("Error adding animal")
            return False
        try:
            await self.client.add_pet(self.name, self.description, image)
        except ApiError as e:
            logger.error(f"Error adding animal: {e.message}")
            self.alert("Error adding animal")
            return False
        self.cancel_edit()
        await self.fetch_pets()
        return True

    async def _update_pet(self, image: tuple[str, bytes, str] | None) -> bool:
        try:
            await self.client.update_pet(
                self.editing["id"], self.name, self.description, image,
            )
        except ApiError as e:
            logger.error(f"Error updating animal: {e.message}")
            self.alert("Error updating animal")
            return False
        self.cancel_edit()
        await self.fetch_pets()
        return True

    async def remove_pet(self, pet_id: int) -> bool:
        try:
            await self.client.remove_pet(pet_id)
        except ApiError as e:
            logger.error(f"Error removing animal: {e.message}")
            self.alert("Error removing animal")
            return False
        await self.fetch_pets()
        return True

    async def unadopt_pet(self, pet_id: int) -> bool:
        try:
            await self.client.unadopt_pet(pet_id)
        except ApiError as e:
            logger.error(f"Error marking animal as not adopted: {e.message}")
            self.alert("Error marking animal as not adopted")
            return False
        await self.fetch_pets()
        return True

    async def update_page_details(self, title: str, description: str) -> bool:
        self.page_title, self.page_description = title, description
        try:
            await self.client.update_page_details(title, description)
        except ApiError as e:
            logger.error(f"Error updating page details: {e.message}")
            self.alert("Error updating page details")
            return False
        self.alert("Page details updated successfully")
        return True

    async def update_website_title(self, title: str) -> bool:
        self.website_title = title
        try:
            await self.client.update_website_title(title)
        except ApiError as e:
            logger.error(f"Error updating website title: {e.message}")
            self.alert("Error updating website title")
            return False
        self.alert("Website title updated successfully")
        return True
