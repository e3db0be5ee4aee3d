# (c) Andrew Chen (https://github.com/achen1296)

import os
import platform
from enum import Enum, IntFlag

PathLike = str | os.PathLike

WINDOWS = platform.system() == "Windows"

LONG_PATH_PREFIX = "\\\\?\\"
""" Prefix to allow reading paths >= 260 characters on Windows  """

LONG_UNC_PREFIX = LONG_PATH_PREFIX + "UNC\\"
""" Long path form of a \\\\server\\share path """

DEVICE_PATH_PREFIX = "\\\\.\\"
""" Win32 device namespace, paths with it are never rewritten """


class FileAttributes(IntFlag):
    """ Same values as the Win32 FILE_ATTRIBUTE_* constants, so they can be passed straight through on Windows. """
    NONE = 0
    READONLY = 0x1
    HIDDEN = 0x2
    SYSTEM = 0x4
    DIRECTORY = 0x10
    ARCHIVE = 0x20
    NORMAL = 0x80
    TEMPORARY = 0x100
    SPARSE_FILE = 0x200
    REPARSE_POINT = 0x400
    COMPRESSED = 0x800
    OFFLINE = 0x1000
    NOT_CONTENT_INDEXED = 0x2000
    ENCRYPTED = 0x4000


class CreationDisposition(Enum):
    CREATE_NEW = os.O_CREAT | os.O_EXCL
    CREATE_ALWAYS = os.O_CREAT | os.O_TRUNC
    OPEN_EXISTING = 0
    OPEN_ALWAYS = os.O_CREAT
    TRUNCATE_EXISTING = os.O_TRUNC


class FileAccess(Enum):
    READ = os.O_RDONLY
    WRITE = os.O_WRONLY
    READ_WRITE = os.O_RDWR
