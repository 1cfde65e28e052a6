from rich.console import Console
from rich.table import Table

# Shared console for everything printed outside the animation
console = Console(highlight=False)


class FlagRegistry:
    """Command-line flag registration and dispatch."""
    def __init__(self):
        self.flags = {}
        self.takes_value = {}
        self.descriptions = {}

    def register(self, *names, metavar=None):
        """Decorator: register a flag handler under one or more names.

        Handlers with a `metavar` consume the next argument and are called as
        handler(settings, value); the others are called as handler(settings).
        """
        def decorator(func):
            for name in names:
                self.flags[name] = func
                self.takes_value[name] = metavar is not None
            label = ", ".join(names) + (f" <{metavar}>" if metavar else "")
            desc = (func.__doc__ or "No description").strip().split('\n')[0]
            self.descriptions[label] = desc
            return func
        return decorator

    def parse(self, argv, settings):
        """Apply argv to settings. Unknown arguments and flags missing a value are ignored."""
        i = 0
        while i < len(argv):
            name = argv[i]
            handler = self.flags.get(name)
            if handler is not None:
                if not self.takes_value[name]:
                    handler(settings)
                elif i + 1 < len(argv):
                    handler(settings, argv[i + 1])
                    i += 1
            i += 1
        return settings.clamp()

    def options_table(self):
        t = Table(show_header=False, box=None, padding=(0, 2, 0, 2))
        t.add_column("Flag", style="cyan", no_wrap=True)
        t.add_column("Description", style="white")
        for label, desc in self.descriptions.items():
            t.add_row(label, desc)
        return t


# Global registry
registry = FlagRegistry()
