"""Resolve a logical config name from the calling code.

This is a convenience for plugins that do not want to spell out their own name. The
name is the top-level package of the module that called into pluginconf. Code run as a
script or from an interactive session has no stable package and resolves to ``None``.
"""

import inspect

UNRESOLVABLE_MODULES = {"__main__", "builtins"}


def resolve_caller_name(stack_depth: int = 1) -> str | None:
    """Return the top-level package name of a calling module.

    Args:
        stack_depth: How many frames above the caller of this function to inspect.
            1 means "whoever called the function that called me".

    Returns:
        The package name, or None if it cannot be determined
    """
    frame = inspect.currentframe()
    try:
        # Skip this function's own frame
        for _ in range(stack_depth + 1):
            if frame is None:
                return None
            frame = frame.f_back
        if frame is None:
            return None

        module_name = frame.f_globals.get("__name__")
    finally:
        del frame

    if not module_name or module_name in UNRESOLVABLE_MODULES:
        return None

    package = module_name.split(".")[0]
    return package or None
