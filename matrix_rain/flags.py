from matrix_rain import config, ui
from matrix_rain.colors import ColorScheme
from matrix_rain.flag_handler import console, registry
from matrix_rain.log import set_log_fn


def _parse(value, cast, fallback):
    try:
        return cast(value)
    except ValueError:
        return fallback


@registry.register("-s", "--speed", metavar="MS")
def flag_speed(settings, value):
    """Frame delay in ms (default: 50, lower = faster)"""
    settings.frame_delay_ms = _parse(value, int, config.FALLBACK_FRAME_DELAY_MS)


@registry.register("-d", "--density", metavar="0-100")
def flag_density(settings, value):
    """Spawn density percentage (default: 40)"""
    pct = _parse(value, float, config.FALLBACK_DENSITY_PCT)
    settings.density = config.clamp(pct / 100.0, *config.DENSITY_RANGE)


@registry.register("-n", "--spawns", metavar="N")
def flag_spawns(settings, value):
    """Max spawns per frame (default: 4)"""
    settings.spawns_per_frame = _parse(value, int, config.FALLBACK_SPAWNS)


@registry.register("-l", "--length", metavar="N")
def flag_length(settings, value):
    """Max drop length (default: 30)"""
    settings.max_length = max(1, _parse(value, int, config.FALLBACK_MAX_LENGTH))
    settings.min_length = min(settings.min_length, settings.max_length)


@registry.register("-c", "--color", metavar="SCHEME")
def flag_color(settings, value):
    """Color: green, blue, red, purple, cyan, rainbow"""
    scheme = ColorScheme.from_name(value)
    if scheme is not None:
        settings.color_scheme = scheme


@registry.register("-v", "--verbose")
def flag_verbose(settings):
    """Log diagnostics to stderr"""
    set_log_fn(ui.stderr_console.print)


@registry.register("-h", "--help")
def flag_help(settings):
    """Show this help"""
    ui.print_help(console)
    raise SystemExit(0)
