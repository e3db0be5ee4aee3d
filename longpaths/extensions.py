# (c) Andrew Chen (https://github.com/achen1296)

# Helpers for combining and checking FileInfo / DirectoryInfo. Anything that takes an info also takes a plain path.

from . import paths
from .consts import *
from .info import DirectoryInfo, FileInfo
from .paths import optional_fspath as _str


def _combine_directory_pair(one: PathLike | None, two: PathLike | None) -> DirectoryInfo | None:
    one, two = _str(one), _str(two)
    if one is None and two is None:
        return None
    if two is None:
        return DirectoryInfo(one)
    if one is None:
        return DirectoryInfo(two)
    return DirectoryInfo(paths.combine(one, two))


def combine_directory(one: PathLike | None, two: PathLike | None, *more: PathLike | None) -> DirectoryInfo | None:
    """ None pieces are skipped. Only None if every piece is None. """
    result = _combine_directory_pair(one, two)
    for m in more:
        result = _combine_directory_pair(result, m)
    return result


def _combine_file_pair(one: PathLike | None, two: PathLike | None) -> FileInfo | None:
    one, two = _str(one), _str(two)
    if two is None:
        return None
    if one is None:
        return FileInfo(two)
    return FileInfo(paths.combine(one, two))


def combine_file(one: PathLike | None, two: PathLike | None, *more: PathLike | None) -> FileInfo | None:
    """ Unlike combine_directory, a None anywhere after the first piece makes the result None, since there is no file name left to combine onto. """
    result = _combine_file_pair(one, two)
    for m in more:
        result = _combine_file_pair(result, m)
    return result


def equals_no_case(one: PathLike | None, two: PathLike | None) -> bool:
    """ Case insensitive, ignoring trailing slashes or backslashes. Two Nones are equal. """
    one, two = _str(one), _str(two)
    if one is None and two is None:
        return True
    if one is None or two is None:
        return False
    return one.rstrip("\\/").casefold() == two.rstrip("\\/").casefold()


def check_exists[T: (FileInfo, DirectoryInfo)](info: T) -> T:
    if info is None:
        raise ValueError("info must not be None")
    if not info.exists:
        kind = "File" if isinstance(info, FileInfo) else "Folder"
        raise FileNotFoundError(f"{kind} <{info}> not found")
    return info


def check_create(directory: DirectoryInfo) -> DirectoryInfo:
    if directory is None:
        raise ValueError("directory must not be None")
    if not directory.exists:
        directory.create()
    return directory
