def _default_log_fn(data, *args, **kwargs):
    """Default log function: does nothing."""
    pass


_log_fn = _default_log_fn


def log(data, *args, **kwargs):
    """
    Log a message through the installed log function.

    Supports:
    - log("message")
    - log("frame {}", 12)            # str.format style arguments
    - log("[dim]message[/]")         # rich markup, if the log function renders it

    Logging never interrupts the animation: failures of the log function are ignored.
    """
    if args and isinstance(data, str):
        try:
            data = data.format(*args)
        except (IndexError, KeyError, ValueError):
            pass  # keep the raw message if formatting fails

    try:
        _log_fn(data, **kwargs)
    except Exception:
        pass


def set_log_fn(fn):
    """
    Install the log function.

    Args:
        fn: output function such as console.print or print
    """
    global _log_fn
    if not callable(fn):
        raise TypeError("log function must be callable")
    _log_fn = fn


def reset_log_fn():
    """Restore the silent default."""
    set_log_fn(_default_log_fn)
