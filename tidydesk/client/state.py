from typing import Any, Dict, List


class AppState:
    """Miroir local des notes et tâches de l'utilisateur.

    Mis à jour juste après chaque appel serveur réussi; aucune
    réconciliation avec d'autres sessions (le dernier qui écrit gagne).
    Une instance par session, créée par la racine de composition.
    """

    def __init__(self):
        self.notes: List[Dict[str, Any]] = []
        self.tasks: List[Dict[str, Any]] = []
        self.is_loading = False

    def set_loading(self, loading: bool) -> None:
        self.is_loading = loading

    # --- Notes
    def set_notes(self, notes: List[Dict[str, Any]]) -> None:
        self.notes = list(notes)

    def add_note(self, note: Dict[str, Any]) -> None:
        self.notes = [note] + self.notes

    def update_note(self, note_id: str, fields: Dict[str, Any]) -> None:
        self.notes = [{**n, **fields} if n["id"] == note_id else n for n in self.notes]

    def delete_note(self, note_id: str) -> None:
        self.notes = [n for n in self.notes if n["id"] != note_id]

    # --- Tasks
    def set_tasks(self, tasks: List[Dict[str, Any]]) -> None:
        self.tasks = list(tasks)

    def add_task(self, task: Dict[str, Any]) -> None:
        self.tasks = [task] + self.tasks

    def update_task(self, task_id: str, fields: Dict[str, Any]) -> None:
        self.tasks = [{**t, **fields} if t["id"] == task_id else t for t in self.tasks]

    def delete_task(self, task_id: str) -> None:
        self.tasks = [t for t in self.tasks if t["id"] != task_id]

    def pending_tasks(self) -> List[Dict[str, Any]]:
        return [t for t in self.tasks if not t["completed"]]

    def completed_tasks(self) -> List[Dict[str, Any]]:
        return [t for t in self.tasks if t["completed"]]
