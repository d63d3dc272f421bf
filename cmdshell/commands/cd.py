"""
CD command - change the working directory.
"""

import logging

from ..exceptions import (
    FileNotFoundError,
    HomeNotSetError,
    PermissionDeniedError,
    translate_os_error,
)
from ..path_manager import expand_home, has_home_prefix
from ..process import Process
from ..response import Response
from .base import first_arg

logger = logging.getLogger(__name__)


def cmd_cd(process: Process) -> Response:
    """
    Change the working directory

    Usage: cd [dir]

    With no argument, changes to $HOME. A leading ~ in the argument is
    replaced with $HOME; tildes elsewhere are taken literally.

    Examples:
        cd /tmp
        cd ~/projects
        cd
    """
    context = process.context
    home = context.home
    arg = first_arg(process)

    if arg is None:
        target = home or ''
    elif has_home_prefix(arg) and home is None:
        target = ''
    else:
        target = expand_home(arg, home)

    if not target:
        raise HomeNotSetError('cd')

    try:
        context.change_directory(target)
    except OSError as e:
        return _change_failed(target, e)
    except ValueError:
        return Response.error(f"cd: invalid path '{target}'")

    logger.debug("cd: now in %s", target)
    return Response.empty()


def _change_failed(target: str, error: OSError) -> Response:
    """Map a failed directory change onto the cd error messages"""
    translated = translate_os_error(error, target)

    if isinstance(translated, FileNotFoundError):
        return Response.error(f"cd: {target}: No such file or directory")
    if isinstance(translated, PermissionDeniedError):
        return Response.error(f"cd: permission denied: {target}")
    return Response.error(f"cd: error changing to {target}: {translated.strerror}")
