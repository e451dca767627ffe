# /app/client/ojt_api_client.py

"""
Thin HTTP client for the OJT API, used by the dashboard-side composition
code. It carries the caller's identity-provider token on every request and
turns non-2xx answers into `ApiError`.
"""

from typing import Any, Dict, List, Optional

import requests

from ..core.config import OJT_API_BASE_URL, OJT_API_TIMEOUT


class ApiError(Exception):
    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


class OjtApiClient:
    def __init__(
        self,
        token: str,
        base_url: str = OJT_API_BASE_URL,
        timeout: float = OJT_API_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Authorization": f"Bearer {token}", "Cache-Control": "no-cache"})

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        response = self.session.get(f"{self.base_url}{path}", params=params, timeout=self.timeout)
        if not response.ok:
            try:
                message = response.json().get("message", response.reason)
            except ValueError:
                message = response.text or response.reason
            raise ApiError(response.status_code, message)
        return response.json()

    def get_profile(self) -> Dict:
        return self._get("/api/users/me")

    def list_classrooms(self) -> List[Dict]:
        return self._get("/api/prof/companies/classrooms").get("classrooms", [])

    def get_classroom(self, classroom_id: int) -> Dict:
        return self._get(f"/api/admin/companies/classrooms/{classroom_id}")

    def get_progress(self, student_id: int, classroom_id: int) -> Dict:
        return self._get("/api/student/progress", params={"studentId": student_id, "classroomId": classroom_id})
