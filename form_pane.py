import curses

from form_state import FIELD_AMOUNT, FIELD_LABELS
from navigation import Tab
from palette import PAIR_BAD, PAIR_CURSOR, PAIR_GOOD, PAIR_LABEL, attr, draw_box, put
from transaction import EXPENSES

FIELD_H = 3


def field_title(form, index, tab):
    """Label while untouched, validation annotation once edited."""
    field = form.fields[index]
    if field.modified:
        return field.verdict.message
    if index == FIELD_AMOUNT:
        if tab == Tab.ADD_EXPENSE:
            return "Enter Expense Amount"
        if tab == Tab.ADD_INCOME:
            return "Enter Income Amount"
    return FIELD_LABELS[index]


def visible_window(buffer, cursor, width):
    """Return (start, text) for a ``width``-wide view that keeps the cursor in sight."""
    start = max(0, cursor - width + 1)
    return start, buffer[start : start + width]


def draw_form(win, state):
    win.erase()
    h, w = win.getmaxyx()
    form = state.form
    tab = state.current_tab

    for index, field in enumerate(form.fields):
        top = index * FIELD_H
        if top + FIELD_H > h:
            break
        box = win.derwin(FIELD_H, w, top, 0)
        if field.modified:
            tone = attr(PAIR_GOOD if field.verdict.ok else PAIR_BAD)
        else:
            tone = attr(PAIR_LABEL)
        border = tone | (curses.A_BOLD if index == form.active else 0)
        draw_box(box, field_title(form, index, tab), title_attr=tone | curses.A_BOLD, border_attr=border)

        text_w = max(1, w - 4)
        start, visible = visible_window(field.buffer, field.cursor, text_w)
        put(box, 1, 2, visible, tone if field.modified else 0)

        if index == form.active:
            cx = field.cursor - start
            under = field.buffer[field.cursor] if field.cursor < len(field.buffer) else " "
            if state.blink.visible:
                put(box, 1, 2 + cx, under, attr(PAIR_CURSOR, curses.A_REVERSE))
            else:
                put(box, 1, 2 + cx, under, tone if field.modified else 0)

    hint_y = FIELD_H * len(form.fields)
    bucket = state.bucket
    kind = "Expense" if bucket == EXPENSES else "Income"
    put(
        win,
        hint_y,
        0,
        f"Adding {kind}. Press Up & Down to switch fields. Press Enter to submit, Esc to Exit",
        attr(PAIR_LABEL),
    )
    if bucket is not None:
        names = ", ".join(state.data.categories(bucket))
        put(win, hint_y + 1, 0, f"Categories: {names}", attr(PAIR_LABEL))
