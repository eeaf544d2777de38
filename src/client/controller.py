"""Application controller for the profile directory client."""

from dataclasses import asdict

import structlog

from client.facade import IProfileFacade
from client.state import CLOSED_FORM, ActiveForm, DirectoryState, FormMode
from domain.entities.notification import Notification, NotificationKind
from domain.entities.profile import Profile, ProfileDraft

logger = structlog.get_logger()


class ProfileDirectoryController:
    """Owns directory state and sequences commands against a facade.

    Consistency policy: after any successful create, update or delete the
    full list is reloaded from the facade; local copies are never patched.
    Commands are not serialized against each other. Every failure, expected
    or not, produces exactly one error notification and no fault escapes a
    command.
    """

    def __init__(self, facade: IProfileFacade) -> None:
        self._facade = facade
        self.state = DirectoryState()
        self._search_seq = 0

    # --- Loading ---

    async def load_profiles(self) -> None:
        """Replace the full list from the facade, then refresh the filtered view."""
        self.state.is_list_loading = True
        try:
            response = await self._facade.get_all_profiles()
            if response.success:
                self.state.all_profiles = list(response.data)
            else:
                self.enqueue(NotificationKind.ERROR, "Failed to load users")
        except Exception:
            logger.exception("load_profiles_failed")
            self.enqueue(NotificationKind.ERROR, "Error loading users")
        finally:
            self.state.is_list_loading = False

        await self._reconcile_search()

    # --- Search ---

    async def set_search_query(self, query: str) -> None:
        """Update the query and recompute the filtered view."""
        self.state.search_query = query
        await self._reconcile_search()

    async def _reconcile_search(self) -> None:
        """Recompute ``filtered_profiles`` for the current query and list.

        A blank query mirrors ``all_profiles`` without a facade call. A
        response from a search that has since been superseded is dropped.
        """
        self._search_seq += 1
        seq = self._search_seq
        query = self.state.search_query

        if not query.strip():
            self.state.filtered_profiles = self.state.all_profiles
            self.state.is_search_loading = False
            return

        self.state.is_search_loading = True
        try:
            response = await self._facade.search_profiles(query)
            if seq != self._search_seq:
                logger.debug("stale_search_discarded", query=query)
                return
            if response.success:
                self.state.filtered_profiles = list(response.data)
        except Exception:
            logger.exception("search_profiles_failed", query=query)
            if seq == self._search_seq:
                self.enqueue(NotificationKind.ERROR, "Error searching users")
        finally:
            if seq == self._search_seq:
                self.state.is_search_loading = False

    # --- Create / edit form ---

    def open_create_form(self) -> None:
        self.state.active_form = ActiveForm(mode=FormMode.CREATE)

    def open_edit_form(self, profile: Profile) -> None:
        self.state.active_form = ActiveForm(mode=FormMode.EDIT, profile=profile)

    def cancel_form(self) -> None:
        self.state.active_form = CLOSED_FORM

    async def submit_form(self, draft: ProfileDraft) -> bool:
        """Create or update depending on the open form.

        On success the list is reloaded and the form closed; otherwise the
        form stays open. Returns whether the submit succeeded.
        """
        form = self.state.active_form
        editing = form.profile if form.mode is FormMode.EDIT else None
        self.state.is_form_submitting = True
        try:
            if editing is not None:
                response = await self._facade.update_profile(editing.id, asdict(draft))
            else:
                response = await self._facade.create_profile(draft)

            if not response.success:
                self.enqueue(NotificationKind.ERROR, response.message)
                return False

            await self.load_profiles()
            self.state.active_form = CLOSED_FORM
            self.enqueue(NotificationKind.SUCCESS, response.message)
            return True
        except Exception:
            logger.exception("submit_form_failed", editing=editing is not None)
            action = "updating" if editing is not None else "creating"
            self.enqueue(NotificationKind.ERROR, f"Error {action} user")
            return False
        finally:
            self.state.is_form_submitting = False

    # --- Delete prompt ---

    def request_delete(self, profile: Profile) -> None:
        self.state.pending_delete = profile

    def cancel_delete(self) -> None:
        self.state.pending_delete = None

    async def confirm_delete(self) -> bool:
        """Delete the pending candidate. The prompt closes whatever the outcome."""
        candidate = self.state.pending_delete
        if candidate is None:
            return False

        try:
            response = await self._facade.delete_profile(candidate.id)
            if not response.success:
                self.enqueue(NotificationKind.ERROR, response.message)
                return False
            await self.load_profiles()
            self.enqueue(NotificationKind.SUCCESS, response.message)
            return True
        except Exception:
            logger.exception("delete_profile_failed", profile_id=candidate.id)
            self.enqueue(NotificationKind.ERROR, "Error deleting user")
            return False
        finally:
            self.state.pending_delete = None

    # --- Notifications ---

    def enqueue(
        self,
        kind: NotificationKind,
        message: str,
        duration: float | None = None,
    ) -> Notification:
        """Append a notification. Identical messages are not deduplicated."""
        notification = Notification(kind=kind, message=message, duration=duration)
        self.state.notifications.append(notification)
        return notification

    def dismiss(self, notification_id: str) -> None:
        self.state.notifications = [
            n for n in self.state.notifications if n.id != notification_id
        ]
