"""Wiring helpers for the directory controller."""

import httpx

from client.controller import ProfileDirectoryController
from client.http_gateway import HttpProfileGateway
from core.config import Settings, settings
from domain.repositories.profile_repository import IProfileRepository
from domain.services.profile_service import LatencyProfile, ProfileService


def build_local_controller(
    repository: IProfileRepository,
    config: Settings = settings,
) -> ProfileDirectoryController:
    """Controller backed by the in-process service over an initialized store."""
    latency = LatencyProfile() if config.simulated_latency_enabled else LatencyProfile.none()
    return ProfileDirectoryController(ProfileService(repository, latency))


def build_http_controller(client: httpx.AsyncClient) -> ProfileDirectoryController:
    """Controller backed by the REST API reachable through ``client``."""
    return ProfileDirectoryController(HttpProfileGateway(client))
