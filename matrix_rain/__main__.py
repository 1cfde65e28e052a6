import sys
import time

from matrix_rain import config, ui
from matrix_rain import flags  # noqa: F401  (registers the command-line flags)
from matrix_rain.field import Field
from matrix_rain.flag_handler import registry
from matrix_rain.log import log
from matrix_rain.terminal import Terminal


def main(argv=None):
    settings = registry.parse(sys.argv[1:] if argv is None else argv, config.Settings())

    ui.print_banner()
    time.sleep(config.BANNER_PAUSE)

    try:
        Field(Terminal(), settings).run()
    except OSError as e:
        ui.print_error(e)
        log("[red]❌ Aborted: {!r}[/]", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
