import logging
from collections import namedtuple
from typing import Optional, Tuple

import requests

from tidydesk.client.api import ApiClient, ApiRequestError
from tidydesk.client.state import AppState

logger = logging.getLogger(__name__)

Toast = namedtuple("Toast", ["title", "description", "variant"])

# erreurs transformées en toast, jamais relancées ni rejouées
_CLIENT_ERRORS = (ApiRequestError, requests.RequestException)


def _success(description: str) -> Toast:
    return Toast("Success", description, "default")


def _error(description: str) -> Toast:
    return Toast("Error", description, "destructive")


class Workspace:
    """Tableau de bord notes/tâches: envoie les commandes à l'API puis
    répercute le résultat dans l'état local."""

    def __init__(self, api: ApiClient, state: AppState):
        self.api = api
        self.state = state
        self.summary: Optional[Tuple[str, str]] = None
        self.summarizing: Optional[str] = None

    def load(self) -> None:
        self.state.set_loading(True)
        try:
            try:
                self.state.set_notes(self.api.list_notes())
            except _CLIENT_ERRORS as e:
                logger.error("notes_fetch_failed", extra={"error": str(e)})
            try:
                self.state.set_tasks(self.api.list_tasks())
            except _CLIENT_ERRORS as e:
                logger.error("tasks_fetch_failed", extra={"error": str(e)})
        finally:
            self.state.set_loading(False)

    # --- Notes
    def create_note(self, title: str, content: str) -> Toast:
        if not title or not content:
            return _error("Please fill in all fields")
        try:
            note = self.api.create_note(title, content)
        except _CLIENT_ERRORS:
            return _error("Failed to create note")
        self.state.add_note(note)
        return _success("Note created successfully")

    def update_note(self, note_id: str, title: str, content: str) -> Toast:
        try:
            note = self.api.update_note(note_id, title, content)
        except _CLIENT_ERRORS:
            return _error("Failed to update note")
        self.state.update_note(note_id, note)
        return _success("Note updated successfully")

    def delete_note(self, note_id: str) -> Toast:
        try:
            self.api.delete_note(note_id)
        except _CLIENT_ERRORS:
            return _error("Failed to delete note")
        self.state.delete_note(note_id)
        if self.summary and self.summary[0] == note_id:
            self.summary = None
        return _success("Note deleted successfully")

    def summarize_note(self, note_id: str) -> Toast:
        self.summarizing = note_id
        try:
            text = self.api.summarize_note(note_id)
        except _CLIENT_ERRORS:
            return _error("Failed to generate AI summary")
        finally:
            self.summarizing = None
        self.summary = (note_id, text)
        return _success("Summary generated")

    # --- Tasks
    def create_task(self, title: str, description: str = "", priority: str = "medium") -> Toast:
        if not title:
            return _error("Please enter a task title")
        try:
            task = self.api.create_task(title, description, priority)
        except _CLIENT_ERRORS:
            return _error("Failed to create task")
        self.state.add_task(task)
        return _success("Task created successfully")

    def _find_task(self, task_id: str):
        for t in self.state.tasks:
            if t["id"] == task_id:
                return t
        return None

    def update_task(self, task_id: str, title: str, description: str, priority: str) -> Toast:
        current = self._find_task(task_id)
        if current is None:
            # sans copie locale, "completed" serait écrasé côté serveur
            return _error("Failed to update task")
        try:
            task = self.api.update_task(task_id, title, description, priority, current["completed"])
        except _CLIENT_ERRORS:
            return _error("Failed to update task")
        self.state.update_task(task_id, task)
        return _success("Task updated successfully")

    def toggle_task(self, task_id: str) -> Toast:
        current = self._find_task(task_id)
        if current is None:
            return _error("Failed to update task")
        try:
            task = self.api.update_task(
                task_id,
                current["title"],
                current.get("description", ""),
                current["priority"],
                not current["completed"],
            )
        except _CLIENT_ERRORS:
            return _error("Failed to update task")
        self.state.update_task(task_id, task)
        return _success(f"Task marked as {'completed' if task['completed'] else 'incomplete'}")

    def delete_task(self, task_id: str) -> Toast:
        try:
            self.api.delete_task(task_id)
        except _CLIENT_ERRORS:
            return _error("Failed to delete task")
        self.state.delete_task(task_id)
        return _success("Task deleted successfully")

    # --- Rendu texte
    def render_notes(self) -> str:
        if self.state.is_loading:
            return "Loading..."
        if not self.state.notes:
            return "No notes yet\nCreate your first note to get started"
        lines = ["Notes"]
        for note in self.state.notes:
            lines.append(f"- {note['title']} (updated {note['updated_at']})")
            lines.append(f"  {note['content']}")
            if self.summary and self.summary[0] == note["id"]:
                lines.append(f"  AI Summary: {self.summary[1]}")
        return "\n".join(lines)

    def render_tasks(self) -> str:
        if self.state.is_loading:
            return "Loading..."
        pending = self.state.pending_tasks()
        completed = self.state.completed_tasks()
        if not pending and not completed:
            return "No tasks yet\nCreate your first task to get started"
        lines = [f"Tasks: {len(pending)} pending, {len(completed)} completed"]
        if pending:
            lines.append("Pending Tasks")
            lines.extend(f"[ ] {t['title']} ({t['priority']})" for t in pending)
        if completed:
            lines.append("Completed Tasks")
            lines.extend(f"[x] {t['title']} ({t['priority']})" for t in completed)
        return "\n".join(lines)


def build_workspace(base_url: str, token: str, session=None) -> Workspace:
    """Racine de composition: un état explicite par workspace."""
    return Workspace(ApiClient(base_url, token, session=session), AppState())
