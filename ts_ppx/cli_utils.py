"""
CLI utilities for command line reconstruction and introspection.
"""

from pathlib import Path

import click

from . import __version__


def reconstruct_command_line(click_command: click.Command) -> str:
    """
    Reconstruct command line from current Click context using introspection.

    Args:
        click_command: Click command object for introspection

    Returns:
        Reconstructed command line string
    """
    # Try to get current Click context for parameter values
    try:
        ctx = click.get_current_context()
        cli_args = ctx.params
    except RuntimeError:
        # No active context, return basic command
        return "ts_ppx"

    if not cli_args:
        return "ts_ppx"

    cmd_parts = ["ts_ppx"]

    arguments = []  # For positional arguments
    options = []  # For optional arguments

    for param in click_command.params:
        param_name = param.name
        if param_name not in cli_args:
            continue

        value = cli_args[param_name]
        if not value:
            continue

        if isinstance(param, click.Argument):
            arguments.append(_format_value(value))

        elif isinstance(param, click.Option):
            # Skip if it's the default value
            if value == param.default:
                continue

            if param.is_flag:
                # Boolean switch: only the flag itself, e.g. --prettier
                options.append(param.opts[0])
            elif isinstance(value, (list, tuple)):
                # Repeatable option: one flag per value
                flag = param.opts[0] if param.opts else f"--{param_name}"
                for item in value:
                    options.extend([flag, _format_value(item)])
            else:
                flag = param.opts[0] if param.opts else f"--{param_name}"
                options.extend([flag, _format_value(value)])

    # Combine: command + arguments + options
    cmd_parts.extend(arguments)
    cmd_parts.extend(options)

    return " ".join(cmd_parts)


def _format_value(value) -> str:
    # File paths are shortened to their name for cleaner display
    if isinstance(value, (str, Path)):
        path_obj = Path(str(value))
        return path_obj.name if path_obj.exists() else str(value)
    return str(value)


def generation_comment(click_command: click.Command) -> str:
    """Comment placed at the top of generated files, naming the command that produced them."""
    return f"// Generated by ts_ppx v{__version__} : {reconstruct_command_line(click_command)}"
