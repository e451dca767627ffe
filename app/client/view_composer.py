# /app/client/view_composer.py

from typing import Optional

import requests
from loguru import logger

from ..db.models.user_models import UserRole
from ..models.user_model import ViewResponse
from ..services.view_service import ViewState, compose_view
from .ojt_api_client import ApiError, OjtApiClient


class ViewComposer:
    """
    Holds the dashboard shell's view state for one page load.

    Starts in `resolving` and leaves it once, when the role has been fetched.
    A settled professor/student view never goes back to `resolving`; that
    takes a new composer, i.e. a full reload.
    """

    def __init__(self, api: OjtApiClient, path: Optional[str] = None):
        self.api = api
        self.path = path
        self.role: Optional[UserRole] = None
        self.view: ViewResponse = compose_view(path=path, role_loaded=False, role=None)

    @property
    def state(self) -> ViewState:
        return ViewState(self.view.view)

    def resolve(self) -> ViewResponse:
        if self.state != ViewState.RESOLVING:
            return self.view

        try:
            profile = self.api.get_profile()
        except (ApiError, requests.RequestException) as e:
            logger.warning(f"Could not resolve role for {self.path}: {e}")
            return self.view

        raw_role = profile.get("role")
        self.role = UserRole(raw_role) if raw_role else None
        self.view = compose_view(path=self.path, role_loaded=True, role=self.role)
        return self.view
