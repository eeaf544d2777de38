"""Integration tests for the directory controller over the REST API."""

import pytest
from httpx import AsyncClient

from client.factory import build_http_controller
from domain.entities.notification import NotificationKind
from domain.entities.profile import ProfileDraft


class TestHttpController:
    """Controller driven through HttpProfileGateway against the real app."""

    @pytest.mark.asyncio
    async def test_load_and_search(self, client: AsyncClient):
        controller = build_http_controller(client)

        await controller.load_profiles()
        await controller.set_search_query("new york")

        assert len(controller.state.all_profiles) == 4
        assert [p.full_name for p in controller.state.filtered_profiles] == ["Michael Chen"]

    @pytest.mark.asyncio
    async def test_create_edit_delete_lifecycle(self, client: AsyncClient):
        controller = build_http_controller(client)
        await controller.load_profiles()

        controller.open_create_form()
        assert await controller.submit_form(
            ProfileDraft(full_name="Ada Lovelace", email="ada@example.com")
        )
        created = controller.state.all_profiles[-1]
        assert created.full_name == "Ada Lovelace"

        controller.open_edit_form(created)
        assert await controller.submit_form(
            ProfileDraft(full_name="Ada Lovelace", email="ada@example.com", location="London")
        )
        await controller.set_search_query("LONDON")
        assert [p.id for p in controller.state.filtered_profiles] == [created.id]

        controller.request_delete(created)
        assert await controller.confirm_delete()
        assert created.id not in [p.id for p in controller.state.all_profiles]
        assert controller.state.filtered_profiles == []

        assert [n.message for n in controller.state.notifications] == [
            "User created successfully",
            "User updated successfully",
            "User deleted successfully",
        ]

    @pytest.mark.asyncio
    async def test_server_rejection_keeps_form_open(self, client: AsyncClient):
        controller = build_http_controller(client)
        await controller.load_profiles()
        target = controller.state.all_profiles[0]
        controller.open_edit_form(target)

        ok = await controller.submit_form(ProfileDraft(full_name="   ", email=target.email))

        assert ok is False
        assert controller.state.active_form.is_open
        assert controller.state.notifications[-1].message == "Full name is required"

    @pytest.mark.asyncio
    async def test_deleting_vanished_profile_reports_not_found(self, client: AsyncClient):
        controller = build_http_controller(client)
        await controller.load_profiles()
        target = controller.state.all_profiles[0]
        await client.delete(f"/api/users/{target.id}")

        controller.request_delete(target)
        await controller.confirm_delete()

        assert controller.state.notifications[-1].kind is NotificationKind.ERROR
        assert controller.state.notifications[-1].message == "User not found"
        assert controller.state.pending_delete is None
