# (c) Andrew Chen (https://github.com/achen1296)

# Direct file system calls. Every path goes through native_path first, so these work past the Windows path length limit. Nothing here is error tolerant, see safe_operations for that.

import errno
import fnmatch
import os
import shutil
import stat
from datetime import datetime
from pathlib import Path

from .consts import *
from .paths import get_file_name_from_file_path, native_path
from .walk import is_link, walk

if WINDOWS:
    import ctypes
    from ctypes import wintypes

    _kernel32 = ctypes.WinDLL("kernel32", use_last_error=True)
    _kernel32.SetFileAttributesW.argtypes = [wintypes.LPCWSTR, wintypes.DWORD]
    _kernel32.SetFileAttributesW.restype = wintypes.BOOL
    _kernel32.CreateFileW.argtypes = [wintypes.LPCWSTR, wintypes.DWORD, wintypes.DWORD, wintypes.LPVOID,
                                      wintypes.DWORD, wintypes.DWORD, wintypes.HANDLE]
    _kernel32.CreateFileW.restype = wintypes.HANDLE
    _kernel32.SetFileTime.argtypes = [wintypes.HANDLE, ctypes.POINTER(wintypes.FILETIME),
                                      ctypes.POINTER(wintypes.FILETIME), ctypes.POINTER(wintypes.FILETIME)]
    _kernel32.SetFileTime.restype = wintypes.BOOL
    _kernel32.CloseHandle.argtypes = [wintypes.HANDLE]
    _kernel32.CloseHandle.restype = wintypes.BOOL

    _INVALID_HANDLE_VALUE = wintypes.HANDLE(-1).value
    _FILE_WRITE_ATTRIBUTES = 0x100
    _FILE_SHARE_ALL = 0x1 | 0x2 | 0x4
    _OPEN_EXISTING = 3
    # needed to open directories
    _FILE_FLAG_BACKUP_SEMANTICS = 0x02000000
    # 100 ns intervals between 1601-01-01 and 1970-01-01
    _FILETIME_EPOCH_OFFSET = 116444736000000000


def _exists_error(path: PathLike):
    return FileExistsError(errno.EEXIST, os.strerror(errno.EEXIST), os.fspath(path))


def file_exists(path: PathLike) -> bool:
    return os.path.isfile(native_path(path))


def directory_exists(path: PathLike) -> bool:
    return os.path.isdir(native_path(path))


def delete_file(path: PathLike):
    os.remove(native_path(path))


def delete_directory(path: PathLike, recursive: bool = False):
    """ Non-recursive only works on an empty directory. Recursive deletes the contents bottom-up and then the directory itself. Symlinks are removed without following them. """
    if not recursive:
        os.rmdir(native_path(path))
        return

    def remove(p: str, _):
        os.remove(native_path(p))

    def remove_link(p: str, _):
        native = native_path(p)
        # directory symlinks and junctions on Windows are removed with rmdir
        if WINDOWS and os.path.isdir(native):
            os.rmdir(native)
        else:
            os.remove(native)

    def remove_dir(p: str, _):
        os.rmdir(native_path(p))

    def missing(p: str, depth: int):
        # children that vanished in the meantime are already gone, only a missing root is an error
        if depth == 0:
            os.rmdir(native_path(p))

    walk(path, file_action=remove, symlink_action=remove_link, dir_post_action=remove_dir,
         not_exist_action=missing, side_effects=True)


def move_file(src: PathLike, dst: PathLike):
    """ Fails if dst already exists. Works across volumes. """
    native_dst = native_path(dst)
    if os.path.lexists(native_dst):
        raise _exists_error(dst)
    shutil.move(native_path(src), native_dst)


def move_directory(src: PathLike, dst: PathLike):
    """ Fails if dst already exists. """
    move_file(src, dst)


def copy_file(src: PathLike, dst: PathLike, overwrite: bool):
    """ Copies contents and metadata (`shutil.copy2`). Fails if dst exists and overwrite is False. """
    native_dst = native_path(dst)
    if not overwrite and os.path.lexists(native_dst):
        raise _exists_error(dst)
    shutil.copy2(native_path(src), native_dst)


def create_directory(path: PathLike):
    """ Creates missing parents too, no error if the directory already exists. """
    os.makedirs(native_path(path), exist_ok=True)


def get_file_attributes(path: PathLike) -> FileAttributes:
    """ On Windows these are the real attributes. Elsewhere they are derived: READONLY from the owner write bit, HIDDEN from a leading dot, and NORMAL if nothing else applies. """
    st = os.stat(native_path(path))
    if WINDOWS:
        return FileAttributes(st.st_file_attributes)
    attributes = FileAttributes.NONE
    if stat.S_ISDIR(st.st_mode):
        attributes |= FileAttributes.DIRECTORY
    if not st.st_mode & stat.S_IWUSR:
        attributes |= FileAttributes.READONLY
    if get_file_name_from_file_path(os.fspath(path).rstrip("\\/")).startswith("."):
        attributes |= FileAttributes.HIDDEN
    if attributes == FileAttributes.NONE:
        attributes = FileAttributes.NORMAL
    return attributes


def set_file_attributes(path: PathLike, attributes: FileAttributes):
    """ Outside of Windows only READONLY has an effect, by changing the write permission bits. """
    native = native_path(path)
    if WINDOWS:
        if not _kernel32.SetFileAttributesW(native, int(attributes)):
            raise ctypes.WinError(ctypes.get_last_error())
        return
    mode = stat.S_IMODE(os.stat(native).st_mode)
    if attributes & FileAttributes.READONLY:
        mode &= ~(stat.S_IWUSR | stat.S_IWGRP | stat.S_IWOTH)
    else:
        mode |= stat.S_IWUSR
    os.chmod(native, mode)


def get_file_length(path: PathLike) -> int:
    return os.stat(native_path(path)).st_size


def get_file_owner(path: PathLike) -> str:
    return Path(native_path(path)).owner()


def get_file_last_write_time(path: PathLike) -> datetime:
    return datetime.fromtimestamp(os.stat(native_path(path)).st_mtime)


def get_file_last_access_time(path: PathLike) -> datetime:
    return datetime.fromtimestamp(os.stat(native_path(path)).st_atime)


def get_file_creation_time(path: PathLike) -> datetime:
    """ Outside of Windows and macOS there may be no birth time, in which case this is the last metadata change time. """
    st = os.stat(native_path(path))
    return datetime.fromtimestamp(getattr(st, "st_birthtime", st.st_ctime))


def _ns(time: datetime) -> int:
    return int(time.timestamp() * 1_000_000) * 1000


def set_file_last_write_time(path: PathLike, time: datetime):
    native = native_path(path)
    st = os.stat(native)
    os.utime(native, ns=(st.st_atime_ns, _ns(time)))


def set_file_last_access_time(path: PathLike, time: datetime):
    native = native_path(path)
    st = os.stat(native)
    os.utime(native, ns=(_ns(time), st.st_mtime_ns))


def set_file_creation_time(path: PathLike, time: datetime):
    if not WINDOWS:
        raise NotImplementedError("Setting the creation time is only supported on Windows")
    handle = _kernel32.CreateFileW(native_path(path), _FILE_WRITE_ATTRIBUTES, _FILE_SHARE_ALL, None,
                                   _OPEN_EXISTING, _FILE_FLAG_BACKUP_SEMANTICS, None)
    if handle == _INVALID_HANDLE_VALUE:
        raise ctypes.WinError(ctypes.get_last_error())
    try:
        ticks = _ns(time) // 100 + _FILETIME_EPOCH_OFFSET
        file_time = wintypes.FILETIME(ticks & 0xFFFFFFFF, ticks >> 32)
        if not _kernel32.SetFileTime(handle, ctypes.byref(file_time), None, None):
            raise ctypes.WinError(ctypes.get_last_error())
    finally:
        _kernel32.CloseHandle(handle)


def _list(path: PathLike, pattern: str, recursive: bool, want_dirs: bool) -> list[str]:
    def matches(p: str):
        return fnmatch.fnmatch(get_file_name_from_file_path(p), pattern)

    if not recursive:
        native = native_path(path)
        result = []
        for name in sorted(os.listdir(native)):
            if os.path.isdir(os.path.join(native, name)) == want_dirs and fnmatch.fnmatch(name, pattern):
                result.append(os.path.join(os.fspath(path), name))
        return result

    def file_action(p: str, _):
        if not want_dirs and matches(p):
            yield p

    def dir_action(p: str, depth: int):
        if want_dirs and depth > 0 and matches(p):
            yield p

    return list(walk(path, file_action=file_action, dir_action=dir_action))


def get_files(path: PathLike, pattern: str = "*", recursive: bool = False) -> list[str]:
    """ Paths of files in the directory whose names match the `fnmatch` pattern, joined onto the directory path as given. """
    return _list(path, pattern, recursive, want_dirs=False)


def get_directories(path: PathLike, pattern: str = "*", recursive: bool = False) -> list[str]:
    return _list(path, pattern, recursive, want_dirs=True)


def create_file_handle(path: PathLike, creation_disposition: CreationDisposition, file_access: FileAccess) -> int:
    """ Returns an OS file descriptor. Pass it to `open`, which takes over closing it. """
    flags = creation_disposition.value | file_access.value | getattr(os, "O_BINARY", 0)
    return os.open(native_path(path), flags)


def read_all_bytes(path: PathLike) -> bytes:
    with open(native_path(path), "rb") as f:
        return f.read()


def read_all_text(path: PathLike, encoding: str = "utf-8") -> str:
    with open(native_path(path), encoding=encoding) as f:
        return f.read()
