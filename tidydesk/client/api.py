import os
from typing import Any, Dict, List, Optional

import requests

DEFAULT_TIMEOUT_SEC = float(os.getenv("TIDYDESK_TIMEOUT_SEC", "30"))


class ApiRequestError(Exception):
    def __init__(self, status_code: int, code: str = "http_error", message: str = "Request failed."):
        super().__init__(f"{status_code} {code}: {message}")
        self.status_code = status_code
        self.code = code
        self.message = message


class ApiClient:
    """Client HTTP de l'API TidyDesk (un appel réseau par méthode, sans retry)."""

    def __init__(self, base_url: str, token: str, session=None, timeout: float = DEFAULT_TIMEOUT_SEC):
        self.base_url = base_url.rstrip("/") + "/api/v1"
        self.token = token
        self.session = session or requests.Session()
        self.timeout = timeout

    def _headers(self) -> Dict[str, str]:
        return {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.token}",
        }

    def _request(self, method: str, path: str, payload: Optional[Dict[str, Any]] = None):
        resp = self.session.request(
            method,
            f"{self.base_url}{path}",
            json=payload,
            headers=self._headers(),
            timeout=self.timeout,
        )
        if resp.status_code >= 400:
            try:
                body = resp.json()
            except ValueError:
                body = None
            # un proxy peut renvoyer autre chose qu'un objet JSON
            err = body.get("error") if isinstance(body, dict) else None
            if not isinstance(err, dict):
                err = {}
            raise ApiRequestError(
                resp.status_code,
                err.get("code", "http_error"),
                err.get("message", "Request failed."),
            )
        if not resp.text:
            return None
        return resp.json()

    # --- Notes
    def list_notes(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/notes/")["data"]

    def create_note(self, title: str, content: str) -> Dict[str, Any]:
        return self._request("POST", "/notes/", {"title": title, "content": content})

    def update_note(self, note_id: str, title: str, content: str) -> Dict[str, Any]:
        return self._request("PUT", f"/notes/{note_id}", {"title": title, "content": content})

    def delete_note(self, note_id: str) -> None:
        self._request("DELETE", f"/notes/{note_id}")

    def summarize_note(self, note_id: str) -> str:
        return self._request("POST", f"/notes/{note_id}/summarize")["summary"]

    # --- Tasks
    def list_tasks(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/tasks/")["data"]

    def create_task(self, title: str, description: str = "", priority: str = "medium") -> Dict[str, Any]:
        return self._request("POST", "/tasks/", {
            "title": title,
            "description": description,
            "priority": priority,
        })

    def update_task(self, task_id: str, title: str, description: str,
                    priority: str, completed: bool) -> Dict[str, Any]:
        return self._request("PUT", f"/tasks/{task_id}", {
            "title": title,
            "description": description,
            "priority": priority,
            "completed": completed,
        })

    def delete_task(self, task_id: str) -> None:
        self._request("DELETE", f"/tasks/{task_id}")
