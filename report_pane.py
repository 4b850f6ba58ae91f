import curses

from palette import PAIR_BAD, PAIR_GOOD, attr, draw_box, put
from summary import format_amount, totals

BAR_WIDTH = 20
BAR_GAP = 2


def bar_heights(values, max_h):
    """Scale rounded bar values into at most ``max_h`` rows."""
    top = max(values) if values else 0
    if top <= 0 or max_h <= 0:
        return [0 for _ in values]
    return [int(round(v / top * max_h)) for v in values]


def draw_report(win, state):
    win.erase()
    draw_box(win, "Income vs Expenses", title_attr=curses.A_BOLD)
    h, w = win.getmaxyx()

    sums = totals(state.data)
    bars = [
        ("Expenses", round(sums["expenses"]), PAIR_BAD),
        ("Income", round(sums["income"]), PAIR_GOOD),
    ]

    # rows: value label, bars, bar label, blank, net line
    label_y = h - 4
    chart_top = 2
    max_bar_h = max(0, label_y - chart_top - 1)
    heights = bar_heights([v for _, v, _ in bars], max_bar_h)

    bar_w = max(1, min(BAR_WIDTH, (w - 4 - BAR_GAP) // 2))
    x = 2
    for (label, value, pair), bar_h in zip(bars, heights):
        style = attr(pair)
        for i in range(bar_h):
            put(win, label_y - 1 - i, x, "█" * bar_w, style)
        put(win, label_y - 1 - bar_h, x, str(value).center(bar_w), style | curses.A_BOLD)
        put(win, label_y, x, label.center(bar_w), style)
        x += bar_w + BAR_GAP

    net = sums["net"]
    put(
        win,
        h - 2,
        2,
        f"Net balance: {format_amount(net)}",
        attr(PAIR_GOOD if net >= 0 else PAIR_BAD, curses.A_BOLD),
    )
