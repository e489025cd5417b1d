"""Create dialogs for the four resource screens.

Each dialog collects a draft (see ``admin_console.domain.models``) and keeps
its confirm button disabled until the required fields are filled. Dialogs do
not touch the record store; the owning screen reads ``draft()`` after the
dialog is accepted.
"""

from __future__ import annotations

from typing import List, Optional

from PyQt6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QHBoxLayout,
    QLineEdit,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from admin_console.domain.models import (
    HIERARCHY_TYPES,
    PERMISSION_CATEGORIES,
    USER_ROLES,
    USER_STATUSES,
    HierarchyNodeDraft,
    PermissionDraft,
    RoleDraft,
    UserDraft,
)

__all__ = [
    "CreateRecordDialog",
    "CreateUserDialog",
    "CreateRoleDialog",
    "CreatePermissionDialog",
    "CreateHierarchyNodeDialog",
    "dialog_for",
]


class CreateRecordDialog(QDialog):
    """Base dialog: form layout plus Cancel / Create buttons."""

    confirm_text = "Create"

    def __init__(self, title: str, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setWindowTitle(title)
        self.setModal(True)
        self.setMinimumWidth(420)
        root = QVBoxLayout(self)
        self.form = QFormLayout()
        root.addLayout(self.form)
        self.buttons = QDialogButtonBox()
        self.cancel_button = self.buttons.addButton(QDialogButtonBox.StandardButton.Cancel)
        self.confirm_button: QPushButton = self.buttons.addButton(
            self.confirm_text, QDialogButtonBox.ButtonRole.AcceptRole
        )
        self.buttons.accepted.connect(self.accept)  # type: ignore
        self.buttons.rejected.connect(self.reject)  # type: ignore
        root.addWidget(self.buttons)

    def _required(self) -> List[QLineEdit]:
        return []

    def _update_confirm(self, *_):
        self.confirm_button.setEnabled(all(f.text().strip() for f in self._required()))

    def _watch_required(self):
        for field in self._required():
            field.textChanged.connect(self._update_confirm)  # type: ignore
        self._update_confirm()


class CreateUserDialog(CreateRecordDialog):
    confirm_text = "Create User"

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__("Create New User", parent)
        self.name_edit = QLineEdit()
        self.name_edit.setPlaceholderText("e.g., John Doe")
        self.email_edit = QLineEdit()
        self.email_edit.setPlaceholderText("e.g., john@example.com")
        self.role_combo = QComboBox()
        self.role_combo.addItems(USER_ROLES)
        self.role_combo.setCurrentText("Viewer")
        self.status_combo = QComboBox()
        self.status_combo.addItems(USER_STATUSES)
        self.form.addRow("Full Name", self.name_edit)
        self.form.addRow("Email Address", self.email_edit)
        self.form.addRow("User Role", self.role_combo)
        self.form.addRow("Account Status", self.status_combo)
        self._watch_required()

    def _required(self):
        return [self.name_edit, self.email_edit]

    def draft(self) -> UserDraft:
        return UserDraft(
            name=self.name_edit.text(),
            email=self.email_edit.text(),
            role=self.role_combo.currentText(),
            status=self.status_combo.currentText(),
        )


class CreateRoleDialog(CreateRecordDialog):
    confirm_text = "Create Role"

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__("Create New Role", parent)
        self.name_edit = QLineEdit()
        self.name_edit.setPlaceholderText("e.g., Moderator")
        self.description_edit = QLineEdit()
        self.form.addRow("Role Name", self.name_edit)
        self.form.addRow("Description", self.description_edit)
        self._watch_required()

    def _required(self):
        return [self.name_edit]

    def draft(self) -> RoleDraft:
        return RoleDraft(name=self.name_edit.text(), description=self.description_edit.text())


class CreatePermissionDialog(CreateRecordDialog):
    confirm_text = "Create Permission"

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__("Create New Permission", parent)
        self.name_edit = QLineEdit()
        self.name_edit.setPlaceholderText("e.g., reports:view")
        self.description_edit = QLineEdit()
        self.category_combo = QComboBox()
        self.category_combo.addItems(PERMISSION_CATEGORIES)
        roles_row = QWidget()
        roles_layout = QHBoxLayout(roles_row)
        roles_layout.setContentsMargins(0, 0, 0, 0)
        self.role_checks = {}
        for role in USER_ROLES:
            box = QCheckBox(role)
            self.role_checks[role] = box
            roles_layout.addWidget(box)
        self.form.addRow("Permission Name", self.name_edit)
        self.form.addRow("Description", self.description_edit)
        self.form.addRow("Category", self.category_combo)
        self.form.addRow("Assigned Roles", roles_row)
        self._watch_required()

    def _required(self):
        return [self.name_edit]

    def draft(self) -> PermissionDraft:
        return PermissionDraft(
            name=self.name_edit.text(),
            description=self.description_edit.text(),
            category=self.category_combo.currentText(),
            assigned_to=[r for r, box in self.role_checks.items() if box.isChecked()],
        )


class CreateHierarchyNodeDialog(CreateRecordDialog):
    confirm_text = "Create Item"

    def __init__(self, parent: Optional[QWidget] = None, parent_names: List[str] | None = None):
        super().__init__("Create Hierarchy Item", parent)
        self.name_edit = QLineEdit()
        self.type_combo = QComboBox()
        self.type_combo.addItems(HIERARCHY_TYPES)
        self.type_combo.setCurrentText("Department")
        self.parent_combo = QComboBox()
        self.parent_combo.addItem("(none)", None)
        for name in parent_names or []:
            self.parent_combo.addItem(name, name)
        self.members_spin = QSpinBox()
        self.members_spin.setRange(0, 1_000_000)
        self.form.addRow("Name", self.name_edit)
        self.form.addRow("Type", self.type_combo)
        self.form.addRow("Parent", self.parent_combo)
        self.form.addRow("Members", self.members_spin)
        self._watch_required()

    def _required(self):
        return [self.name_edit]

    def draft(self) -> HierarchyNodeDraft:
        return HierarchyNodeDraft(
            name=self.name_edit.text(),
            type=self.type_combo.currentText(),
            parent=self.parent_combo.currentData(),
            members=self.members_spin.value(),
        )


def dialog_for(collection: str, parent: Optional[QWidget] = None, **kwargs) -> CreateRecordDialog:
    factories = {
        "users": CreateUserDialog,
        "roles": CreateRoleDialog,
        "permissions": CreatePermissionDialog,
        "hierarchy": CreateHierarchyNodeDialog,
    }
    return factories[collection](parent, **kwargs)
