from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from matrix_rain.flag_handler import console, registry

# Diagnostics go to stderr so they can be redirected away from the animation
stderr_console = Console(stderr=True, highlight=False)

CONTROLS = [
    ("↑/↓", "Adjust speed (faster/slower)"),
    ("←/→", "Adjust density (less/more drops)"),
    ("+/-", "Adjust drop length"),
    ("1-6", "Color schemes (green/blue/red/purple/cyan/rainbow)"),
    ("q/Esc/Enter/Space/Ctrl+C", "Quit"),
]

PRESETS = [
    ("Gentle", "matrix-rain -s 40 -d 20 -n 3 -l 20"),
    ("Sparse", "matrix-rain -s 50 -d 10 -n 2 -l 15"),
    ("Chaos", "matrix-rain -s 5 -d 90 -n 15 -l 45 -c rainbow"),
]


def _pairs(rows, key_style):
    t = Table(show_header=False, box=None, padding=(0, 2, 0, 2))
    t.add_column(style=key_style, no_wrap=True)
    t.add_column(style="white")
    for left, right in rows:
        t.add_row(left, right)
    return t


def print_help(out=console):
    out.print(Panel(
        Group(
            Text("USAGE: matrix-rain [OPTIONS]", style="bold"),
            Text(""),
            Text("OPTIONS:", style="bold green"),
            registry.options_table(),
            Text(""),
            Text("RUNTIME CONTROLS:", style="bold green"),
            _pairs(CONTROLS, "yellow"),
            Text(""),
            Text("PRESETS:", style="bold green"),
            _pairs(PRESETS, "magenta"),
        ),
        title="🌧️ Matrix Rain Terminal Screensaver", border_style="green",
    ))


def print_banner(out=console):
    out.print(Panel.fit(
        "[bold green]Matrix Rain[/] - Press any exit key [dim](q/Esc/Enter/Space/Ctrl+C)[/]\n"
        "[dim]Controls: ↑↓ speed | ←→ density | +/- length | 1-6 colors[/]",
        title="📟 Matrix Rain", border_style="green"
    ))


def print_error(message, out=console):
    out.print(f"[red]❌ Terminal error: {message}[/]")
