from admin_console.components.pagination_bar import PaginationBar


def _bar(qtbot, options):
    bar = PaginationBar(options)
    qtbot.addWidget(bar)
    return bar


def test_update_state_sets_label_and_buttons(qtbot):
    bar = _bar(qtbot, (5, 10, 25))
    bar.update_state(1, 5, 12)
    assert bar.range_label.text() == "6–10 of 12"
    assert bar.prev_button.isEnabled()
    assert bar.next_button.isEnabled()
    assert bar.size_combo.currentText() == "5"
    bar.update_state(2, 5, 12)
    assert bar.range_label.text() == "11–12 of 12"
    assert not bar.next_button.isEnabled()


def test_negative_page_renders_empty_range(qtbot):
    bar = _bar(qtbot, (5, 10))
    bar.update_state(-1, 5, 12)
    assert bar.range_label.text() == "0–0 of 12"
    assert not bar.prev_button.isEnabled()


def test_buttons_request_neighbouring_pages(qtbot):
    bar = _bar(qtbot, (5, 10))
    bar.update_state(1, 5, 20)
    with qtbot.waitSignal(bar.pageRequested, timeout=1000) as blocker:
        bar.next_button.click()
    assert blocker.args == [2]
    with qtbot.waitSignal(bar.pageRequested, timeout=1000) as blocker:
        bar.prev_button.click()
    assert blocker.args == [0]


def test_size_choice_emits_text_but_update_does_not(qtbot):
    bar = _bar(qtbot, (5, 10, 25))
    with qtbot.assertNotEmitted(bar.pageSizeTextChosen):
        bar.update_state(0, 10, 30)
    with qtbot.waitSignal(bar.pageSizeTextChosen, timeout=1000) as blocker:
        bar.size_combo.setCurrentText("25")
    assert blocker.args == ["25"]


def test_unlisted_size_is_added(qtbot):
    bar = _bar(qtbot, (5, 10))
    bar.update_state(0, 7, 3)
    assert bar.size_combo.currentText() == "7"
    assert bar.range_label.text() == "1–3 of 3"
