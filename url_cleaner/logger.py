from rich.console import Console
from rich.theme import Theme

THEME = Theme({
    "success": "green",
    "error": "red",
    "warning": "yellow",
    "info": "blue"
})


class Logger:
    def __init__(self, console=None):
        if console is None:
            console = Console(theme=THEME)
        else:
            console.push_theme(THEME)
        self.console = console

    def success(self, message):
        self.console.print(f"[✓] {message}", style="success", markup=False, emoji=False)

    def error(self, message):
        self.console.print(f"[✗] {message}", style="error", markup=False, emoji=False)

    def warning(self, message):
        self.console.print(f"[!] {message}", style="warning", markup=False, emoji=False)

    def info(self, message):
        self.console.print(f"[*] {message}", style="info", markup=False, emoji=False)
