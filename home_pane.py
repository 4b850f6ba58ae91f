import textwrap

from palette import draw_box, put

INSTRUCTIONS = [
    "FinTrackR is a simple terminal application to help you track your finances.",
    "Use the 'Transactions' tab to view your recorded income and expenses.",
    "Add new income and expenses using the 'Add Expense' and 'Add Income' tabs.",
    "Use the 'Report' tab to see a chart of your income and expenses.",
    "Switch tabs with Tab and Shift+Tab.",
    "Inside a form, move between fields with the up (↑) and down (↓) arrow keys.",
    "Press Enter to submit the current form, or quit the app with Esc.",
]


def draw_home(win):
    win.erase()
    draw_box(win, "FinTrackR")
    h, w = win.getmaxyx()
    y = 2
    for item in INSTRUCTIONS:
        for line in textwrap.wrap(item, max(10, w - 4)):
            if y >= h - 1:
                return
            put(win, y, 2, line)
            y += 1
