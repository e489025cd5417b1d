"""Empty State Component & Registry.

Central templates for the "nothing to show" states of the resource tables,
rendered by ``EmptyStateWidget``. A table that was given a custom empty
message shows that message instead of the template description.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Optional

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget

from admin_console.config import settings

__all__ = [
    "EmptyStateTemplate",
    "EmptyStateRegistry",
    "empty_state_registry",
    "EmptyStateWidget",
]


@dataclass(frozen=True)
class EmptyStateTemplate:
    key: str
    title: str
    description: str
    action_text: Optional[str] = None


class EmptyStateRegistry:
    def __init__(self):
        self._templates: Dict[str, EmptyStateTemplate] = {}
        self._bootstrap_defaults()

    def _bootstrap_defaults(self):
        for tpl in (
            EmptyStateTemplate("no_rows", "Nothing Here", settings.DEFAULT_EMPTY_MESSAGE),
            EmptyStateTemplate(
                "no_matches", "No Matches", "No records match the current search."
            ),
            EmptyStateTemplate(
                "no_users", "No Users", "No users found. Add your first user to get started.",
                action_text="Add User",
            ),
            EmptyStateTemplate(
                "no_roles", "No Roles", "No roles found. Create your first role to get started.",
                action_text="Add Role",
            ),
            EmptyStateTemplate(
                "no_permissions",
                "No Permissions",
                "No permissions found. Create your first permission to get started.",
                action_text="Add Permission",
            ),
            EmptyStateTemplate(
                "no_hierarchy", "No Hierarchy Items",
                "No hierarchy items found. Add one to get started.",
                action_text="Add Item",
            ),
        ):
            self.register(tpl)

    def register(self, template: EmptyStateTemplate) -> None:
        self._templates[template.key] = template

    def get(self, key: str) -> Optional[EmptyStateTemplate]:
        return self._templates.get(key)


empty_state_registry = EmptyStateRegistry()


class EmptyStateWidget(QWidget):
    """Widget rendering a single EmptyStateTemplate.

    Signals:
        actionRequested: emitted with the template key when the action button is clicked.
    """

    actionRequested = pyqtSignal(str)

    def __init__(
        self,
        template_key: str = "no_rows",
        parent: Optional[QWidget] = None,
        *,
        message: Optional[str] = None,
    ):
        super().__init__(parent)
        self._template = self._resolve(template_key, message)
        self._build_ui()

    @staticmethod
    def _resolve(key: str, message: Optional[str]) -> EmptyStateTemplate:
        tpl = empty_state_registry.get(key)
        if tpl is None:
            tpl = EmptyStateTemplate(key, "Unavailable", settings.DEFAULT_EMPTY_MESSAGE)
        if message:
            tpl = replace(tpl, description=message)
        return tpl

    def _build_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 16, 0, 16)
        self.title_label = QLabel(self._template.title)
        self.title_label.setObjectName("emptyStateTitle")
        self.title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.title_label)
        self.desc_label = QLabel(self._template.description)
        self.desc_label.setObjectName("emptyStateDesc")
        self.desc_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.desc_label.setWordWrap(True)
        layout.addWidget(self.desc_label)
        self.action_button = QPushButton(self._template.action_text or "")
        self.action_button.setObjectName("emptyStateAction")
        self.action_button.clicked.connect(  # type: ignore
            lambda: self.actionRequested.emit(self._template.key)
        )
        self.action_button.setVisible(bool(self._template.action_text))
        layout.addWidget(self.action_button, alignment=Qt.AlignmentFlag.AlignCenter)

    def template_key(self) -> str:
        return self._template.key

    def message(self) -> str:
        return self.desc_label.text()

    def set_message(self, message: str) -> None:
        self._template = replace(self._template, description=message)
        self.desc_label.setText(message)

    def set_template(self, key: str, *, message: Optional[str] = None) -> None:
        tpl = self._resolve(key, message)
        if tpl == self._template:
            return
        self._template = tpl
        self.title_label.setText(tpl.title)
        self.desc_label.setText(tpl.description)
        self.action_button.setText(tpl.action_text or "")
        self.action_button.setVisible(bool(tpl.action_text))
