# (c) Andrew Chen (https://github.com/achen1296)

# Error tolerant versions of the basic file operations. Each step is logged, so when a file unexpectedly disappears the log shows who deleted it. Expected failures (missing paths, access denied, locked files) never raise: a file or directory that cannot be deleted is renamed to <name>.<token>.deleted instead, and if that fails too it is left where it is.

import logging
import uuid
from typing import Callable

from . import io_helper, paths
from .consts import *
from .paths import optional_fspath


class SafeFileOperations:
    """ `io` is the module (or any object with the same functions) that does the actual file system calls, `logger` is anything with `info` and `warning` methods, and `new_token` makes the unique part of the rename-on-failure names. All of them can be replaced, mostly for testing. """

    def __init__(self, *, io=io_helper, logger=None, new_token: Callable[[], uuid.UUID] = uuid.uuid4):
        self.io = io
        self.logger = logger if logger is not None else logging.getLogger(__name__)
        self.new_token = new_token

    def safe_file_exists(self, path: PathLike | None) -> bool:
        path = optional_fspath(path)
        return bool(path) and self.io.file_exists(path)

    def safe_directory_exists(self, path: PathLike | None) -> bool:
        path = optional_fspath(path)
        return bool(path) and self.io.directory_exists(path)

    def _rename_after_failed_delete(self, kind: str, path: str, new_path: str, rename: Callable[[str, str], None], reason: str, x: OSError):
        self.logger.warning("Caught %s while deleting %s <%s>. Renaming now to <%s>. %s",
                            reason, kind, path, new_path, x)
        try:
            rename(path, new_path)
        except OSError as x2:
            self.logger.warning("Caught %s while renaming %s <%s> to <%s> after failing to delete it, leaving it in place. %s",
                                type(x2).__name__, kind, path, new_path, x2)

    def safe_delete_file(self, path: PathLike | None):
        path = optional_fspath(path)
        self.logger.info("About to safe-delete file <%s>", path)

        if not self.safe_file_exists(path):
            self.logger.info(
                "Not safe-deleting file <%s>, because the file does not exist", path)
            return

        try:
            attributes = self.io.get_file_attributes(path)
            if attributes & FileAttributes.READONLY:
                self.io.set_file_attributes(
                    path, attributes & ~FileAttributes.READONLY)
            self.io.delete_file(path)
        except PermissionError as x:
            self._rename_after_failed_delete(
                "file", path, f"{path}.{self.new_token().hex}.deleted", self.io.move_file, "access denied (PermissionError)", x)
        except OSError as x:
            self._rename_after_failed_delete(
                "file", path, f"{path}.{self.new_token().hex}.deleted", self.io.move_file, type(x).__name__, x)

    def safe_delete_directory(self, path: PathLike | None):
        """ Deletes the contents as well as the directory itself. """
        path = optional_fspath(path)
        self.logger.info("About to safe-delete directory <%s>", path)

        if not self.safe_directory_exists(path):
            self.logger.info(
                "Not safe-deleting directory <%s>, because the directory does not exist", path)
            return

        try:
            self.io.delete_directory(path, True)
        except OSError as x:
            self._rename_after_failed_delete(
                "directory", path, f"{path}.{{{self.new_token()}}}.deleted", self.io.move_directory, type(x).__name__, x)

    def safe_delete_directory_contents(self, path: PathLike | None):
        """ Deletes the contents but not the directory itself. Subdirectories left empty afterwards are removed; that removal is a plain delete without the rename fallback. """
        path = optional_fspath(path)
        self.logger.info("About to safe-delete the contents of directory <%s>", path)

        if not self.safe_directory_exists(path):
            self.logger.info(
                "Not safe-deleting the contents of directory <%s>, because the directory does not exist", path)
            return

        for f in self.io.get_files(path):
            self.safe_delete_file(f)

        for d in self.io.get_directories(path):
            if self.io.is_link(d):
                # the target is outside this tree, only the link goes
                self.logger.info("Removing directory link <%s> without following it", d)
                self.io.delete_directory(d, True)
                continue
            self.safe_delete_directory_contents(d)
            # only children get removed, never the root
            if len(self.io.get_files(d)) == 0 and len(self.io.get_directories(d)) == 0:
                self.io.delete_directory(d, True)

    def _create_parent_directory(self, path: str):
        d = paths.get_directory_path_name_from_file_path(path)
        if d and not self.io.directory_exists(d):
            self.logger.info("Creating non-existing folder <%s>", d)
            self.io.create_directory(d)

    def safe_move_file(self, source: PathLike | None, destination: PathLike | None):
        """ Anything already at the destination is safe-deleted first. """
        source, destination = optional_fspath(source), optional_fspath(destination)
        self.logger.info(
            "About to safe-move file from <%s> to <%s>", source, destination)

        if not source or not destination:
            self.logger.info(
                "Source file path or destination file path not given. Not moving.")
            return

        if not self.safe_file_exists(source):
            self.logger.info(
                "Source file path to move does not exist: <%s>", source)
            return

        self.safe_delete_file(destination)
        self._create_parent_directory(destination)
        self.io.move_file(source, destination)

    def safe_copy_file(self, source: PathLike | None, destination: PathLike | None, overwrite: bool = True):
        """ Without overwrite, an existing destination makes the copy itself raise FileExistsError. """
        source, destination = optional_fspath(source), optional_fspath(destination)
        self.logger.info("About to safe-copy file from <%s> to <%s> with overwrite = %s",
                         source, destination, overwrite)

        if not source or not destination:
            self.logger.info(
                "Source file path or destination file path not given. Not copying.")
            return

        if source.casefold() == destination.casefold():
            self.logger.info(
                "Source path and destination path are the same: <%s> is <%s>. Not copying.", source, destination)
            return

        if not self.safe_file_exists(source):
            self.logger.info(
                "Source file path to copy does not exist: <%s>", source)
            return

        if overwrite:
            self.safe_delete_file(destination)
        self._create_parent_directory(destination)
        self.io.copy_file(source, destination, overwrite)


default_operations = SafeFileOperations()

safe_file_exists = default_operations.safe_file_exists
safe_directory_exists = default_operations.safe_directory_exists
safe_delete_file = default_operations.safe_delete_file
safe_delete_directory = default_operations.safe_delete_directory
safe_delete_directory_contents = default_operations.safe_delete_directory_contents
safe_move_file = default_operations.safe_move_file
safe_copy_file = default_operations.safe_copy_file
