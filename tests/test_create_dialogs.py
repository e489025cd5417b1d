from admin_console.views.create_dialogs import (
    CreateHierarchyNodeDialog,
    CreatePermissionDialog,
    CreateRoleDialog,
    CreateUserDialog,
    dialog_for,
)


def test_user_dialog_requires_name_and_email(qtbot):
    dlg = CreateUserDialog()
    qtbot.addWidget(dlg)
    assert not dlg.confirm_button.isEnabled()
    dlg.name_edit.setText("Jane Roe")
    assert not dlg.confirm_button.isEnabled()
    dlg.email_edit.setText("   ")
    assert not dlg.confirm_button.isEnabled()
    dlg.email_edit.setText("jane@example.com")
    assert dlg.confirm_button.isEnabled()
    draft = dlg.draft()
    assert draft.role == "Viewer"
    assert draft.status == "Active"
    assert draft.to_record()["email"] == "jane@example.com"


def test_confirm_accepts_dialog(qtbot):
    dlg = CreateRoleDialog()
    qtbot.addWidget(dlg)
    dlg.name_edit.setText("Moderator")
    with qtbot.waitSignal(dlg.accepted, timeout=1000):
        dlg.confirm_button.click()


def test_role_dialog_draft(qtbot):
    dlg = CreateRoleDialog()
    qtbot.addWidget(dlg)
    dlg.name_edit.setText("Moderator")
    dlg.description_edit.setText("Moderates content")
    assert dlg.confirm_button.isEnabled()
    record = dlg.draft().to_record()
    assert record["usersCount"] == 0
    assert record["permissions"] == []


def test_permission_dialog_collects_checked_roles(qtbot):
    dlg = CreatePermissionDialog()
    qtbot.addWidget(dlg)
    dlg.name_edit.setText("reports:view")
    dlg.role_checks["Admin"].setChecked(True)
    dlg.role_checks["Viewer"].setChecked(True)
    assert dlg.draft().to_record()["assignedTo"] == ["Admin", "Viewer"]


def test_hierarchy_dialog_parent_choice(qtbot):
    dlg = CreateHierarchyNodeDialog(parent_names=["Acme Corporation"])
    qtbot.addWidget(dlg)
    dlg.name_edit.setText("Research")
    assert dlg.draft().parent is None
    dlg.parent_combo.setCurrentIndex(1)
    dlg.members_spin.setValue(4)
    record = dlg.draft().to_record()
    assert record["parent"] == "Acme Corporation"
    assert record["members"] == 4


def test_dialog_for_maps_collections(qtbot):
    expected = {
        "users": CreateUserDialog,
        "roles": CreateRoleDialog,
        "permissions": CreatePermissionDialog,
        "hierarchy": CreateHierarchyNodeDialog,
    }
    for collection, cls in expected.items():
        dlg = dialog_for(collection)
        qtbot.addWidget(dlg)
        assert isinstance(dlg, cls)
