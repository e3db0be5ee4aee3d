# (c) Andrew Chen (https://github.com/achen1296)

from .consts import (LONG_PATH_PREFIX, WINDOWS, CreationDisposition,
                     FileAccess, FileAttributes, PathLike)
from .extensions import (check_create, check_exists, combine_directory,
                         combine_file, equals_no_case)
from .info import DirectoryInfo, FileInfo
from .safe_operations import (SafeFileOperations, default_operations,
                              safe_copy_file, safe_delete_directory,
                              safe_delete_directory_contents, safe_delete_file,
                              safe_directory_exists, safe_file_exists,
                              safe_move_file)
