# (c) Andrew Chen (https://github.com/achen1296)

# String functions for paths, no file system access

import ntpath
import os

from .consts import *


def combine(one: str, two: str) -> str:
    """ Like `os.path.join`, so if `two` is absolute the result is just `two`. """
    return os.path.join(one, two)


def get_file_name_from_file_path(path: str) -> str:
    return os.path.basename(path)


def get_extension(path: str) -> str:
    """ Includes the leading dot, empty string if there is no extension. """
    return os.path.splitext(path)[1]


def get_directory_path_name_from_file_path(path: str) -> str:
    return os.path.dirname(path)


def get_directory_name_only_from_file_path(path: str) -> str:
    """ Last piece of a directory path, ignoring a trailing separator. """
    return os.path.basename(path.rstrip("\\/"))


def change_extension(path: str, extension: str | None) -> str:
    """ None or "" removes the extension. A missing leading dot is added. """
    root = os.path.splitext(path)[0]
    if not extension:
        return root
    if not extension.startswith("."):
        extension = "." + extension
    return root + extension


def is_long_path(path: str) -> bool:
    return path.startswith(LONG_PATH_PREFIX)


def to_long_path(path: str) -> str:
    """ Adds the Windows long path prefix to an absolute Windows path (drive or UNC). The path is also normalized, since Windows does not normalize anything after the prefix. Relative paths, device paths (`\\\\.\\`) and paths that already have the prefix are returned unchanged. """
    if is_long_path(path) or path.startswith(DEVICE_PATH_PREFIX) or not ntpath.isabs(path):
        return path
    path = ntpath.normpath(path)
    if path.startswith("\\\\"):
        return LONG_UNC_PREFIX + path[2:]
    return LONG_PATH_PREFIX + path


def strip_long_path_prefix(path: str) -> str:
    if path.startswith(LONG_UNC_PREFIX):
        return "\\\\" + path.removeprefix(LONG_UNC_PREFIX)
    return path.removeprefix(LONG_PATH_PREFIX)


def native_path(path: PathLike) -> str:
    """ The form of the path that is actually handed to the OS: long path prefixed on Windows, unchanged elsewhere. """
    path = os.fspath(path)
    if WINDOWS and not is_long_path(path):
        return to_long_path(os.path.abspath(path))
    return path


def optional_fspath(path: PathLike | None) -> str | None:
    """ Path string of a str, Path, FileInfo or DirectoryInfo, passing None through. """
    return None if path is None else os.fspath(path)
