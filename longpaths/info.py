# (c) Andrew Chen (https://github.com/achen1296)

from datetime import datetime

from . import io_helper, paths
from .consts import *


class FileInfo:
    """ A file identified by its path string. Nothing is cached, every property goes to the file system. """

    def __init__(self, path: PathLike):
        self._path = os.fspath(path)

    def refresh(self):
        """ Nothing to refresh since nothing is cached, kept so callers do not need to know that. """

    def __fspath__(self):
        return self._path

    def __str__(self):
        return self._path

    def __repr__(self):
        return f"FileInfo({self._path!r})"

    @property
    def original_path(self) -> str:
        return self._path

    @property
    def full_name(self) -> str:
        return self._path

    @property
    def name(self) -> str:
        return paths.get_file_name_from_file_path(self._path)

    @property
    def extension(self) -> str:
        return paths.get_extension(self._path)

    @property
    def directory_name(self) -> str:
        return paths.get_directory_path_name_from_file_path(self._path)

    @property
    def directory(self) -> "DirectoryInfo":
        return DirectoryInfo(self.directory_name)

    @property
    def exists(self) -> bool:
        return io_helper.file_exists(self._path)

    @property
    def length(self) -> int:
        return io_helper.get_file_length(self._path)

    @property
    def owner(self) -> str:
        return io_helper.get_file_owner(self._path)

    @property
    def attributes(self) -> FileAttributes:
        return io_helper.get_file_attributes(self._path)

    @attributes.setter
    def attributes(self, value: FileAttributes):
        io_helper.set_file_attributes(self._path, value)

    @property
    def last_write_time(self) -> datetime:
        return io_helper.get_file_last_write_time(self._path)

    @last_write_time.setter
    def last_write_time(self, value: datetime):
        io_helper.set_file_last_write_time(self._path, value)

    @property
    def last_access_time(self) -> datetime:
        return io_helper.get_file_last_access_time(self._path)

    @last_access_time.setter
    def last_access_time(self, value: datetime):
        io_helper.set_file_last_access_time(self._path, value)

    @property
    def creation_time(self) -> datetime:
        return io_helper.get_file_creation_time(self._path)

    @creation_time.setter
    def creation_time(self, value: datetime):
        io_helper.set_file_creation_time(self._path, value)

    def move_to(self, destination: PathLike):
        io_helper.move_file(self._path, destination)

    def copy_to(self, destination: PathLike, overwrite: bool = False):
        io_helper.copy_file(self._path, destination, overwrite)

    def delete(self):
        io_helper.delete_file(self._path)

    def create_handle(self, creation_disposition: CreationDisposition = CreationDisposition.OPEN_EXISTING, file_access: FileAccess = FileAccess.READ) -> int:
        """ Returns an OS file descriptor for `open`, e.g. `open(info.create_handle(), "rb")`. The file object closes the descriptor. """
        return io_helper.create_file_handle(self._path, creation_disposition, file_access)

    def read_all_bytes(self) -> bytes:
        return io_helper.read_all_bytes(self._path)

    def read_all_text(self, encoding: str = "utf-8") -> str:
        return io_helper.read_all_text(self._path, encoding)

    def change_extension(self, extension: str | None) -> "FileInfo":
        return FileInfo(paths.change_extension(self._path, extension))


class DirectoryInfo:
    """ A directory identified by its path string. Like FileInfo, nothing is cached. """

    def __init__(self, path: PathLike):
        self._path = os.fspath(path)

    def refresh(self):
        pass

    def __fspath__(self):
        return self._path

    def __str__(self):
        return self._path

    def __repr__(self):
        return f"DirectoryInfo({self._path!r})"

    @property
    def original_path(self) -> str:
        return self._path

    @property
    def full_name(self) -> str:
        return self._path

    @property
    def name(self) -> str:
        return paths.get_directory_name_only_from_file_path(self._path)

    @property
    def parent(self) -> "DirectoryInfo":
        return DirectoryInfo(paths.get_directory_path_name_from_file_path(self._path))

    @property
    def exists(self) -> bool:
        return io_helper.directory_exists(self._path)

    def create(self):
        io_helper.create_directory(self._path)

    def delete(self, recursive: bool = False):
        io_helper.delete_directory(self._path, recursive)

    def create_subdirectory(self, name: str) -> "DirectoryInfo":
        path = paths.combine(self._path, name)
        io_helper.create_directory(path)
        return DirectoryInfo(path)

    def get_files(self, pattern: str = "*", recursive: bool = False) -> list[FileInfo]:
        return [FileInfo(f) for f in io_helper.get_files(self._path, pattern, recursive)]

    def get_directories(self, pattern: str = "*", recursive: bool = False) -> list["DirectoryInfo"]:
        return [DirectoryInfo(d) for d in io_helper.get_directories(self._path, pattern, recursive)]

    @property
    def attributes(self) -> FileAttributes:
        return io_helper.get_file_attributes(self._path)

    @attributes.setter
    def attributes(self, value: FileAttributes):
        io_helper.set_file_attributes(self._path, value)

    @property
    def last_write_time(self) -> datetime:
        return io_helper.get_file_last_write_time(self._path)

    @last_write_time.setter
    def last_write_time(self, value: datetime):
        io_helper.set_file_last_write_time(self._path, value)

    @property
    def last_access_time(self) -> datetime:
        return io_helper.get_file_last_access_time(self._path)

    @last_access_time.setter
    def last_access_time(self, value: datetime):
        io_helper.set_file_last_access_time(self._path, value)

    @property
    def creation_time(self) -> datetime:
        return io_helper.get_file_creation_time(self._path)

    @creation_time.setter
    def creation_time(self, value: datetime):
        io_helper.set_file_creation_time(self._path, value)
