"""File and directory operations that report failures as ``FileError``."""

from __future__ import annotations

import enum
import errno
import os
import shutil
import stat
from pathlib import Path
from typing import Union

__all__ = [
    "FileErrorKind",
    "FileError",
    "file_error_from_os_error",
    "read_file",
    "write_file",
    "append_file",
    "create_file",
    "delete_file",
    "get_file_info",
    "file_exists",
    "create_directory",
    "create_directories",
    "delete_directory",
    "list_directory",
    "change_directory",
    "get_current_directory",
    "rename_path",
    "copy_file",
    "get_file_size",
]

PathType = Union[str, "os.PathLike[str]"]


class FileErrorKind(enum.Enum):
    """Reasons a file operation can fail."""

    FILE_NOT_FOUND = enum.auto()
    PERMISSION_DENIED = enum.auto()
    PATH_NOT_EXIST = enum.auto()
    FILE_ALREADY_EXISTS = enum.auto()
    DIRECTORY_NOT_EMPTY = enum.auto()
    IO_ERROR = enum.auto()
    INVALID_PATH = enum.auto()
    DIRECTORY_ALREADY_EXISTS = enum.auto()
    UNKNOWN_ERROR = enum.auto()


class FileError(Exception):
    """Raised when a file or directory operation fails."""

    def __init__(self, kind: FileErrorKind, message: str | None = None) -> None:
        super().__init__(message or kind.name.lower().replace("_", " "))
        self.kind = kind


_ERRNO_KINDS = {
    errno.ENOENT: FileErrorKind.FILE_NOT_FOUND,
    errno.EACCES: FileErrorKind.PERMISSION_DENIED,
    errno.EEXIST: FileErrorKind.FILE_ALREADY_EXISTS,
    errno.ENOTEMPTY: FileErrorKind.DIRECTORY_NOT_EMPTY,
    errno.EINVAL: FileErrorKind.INVALID_PATH,
    errno.ENAMETOOLONG: FileErrorKind.INVALID_PATH,
    errno.EIO: FileErrorKind.IO_ERROR,
}


def file_error_from_os_error(error: OSError) -> FileError:
    """Return the ``FileError`` that corresponds to an ``OSError``."""
    kind = _ERRNO_KINDS.get(error.errno, FileErrorKind.UNKNOWN_ERROR)
    return FileError(kind, str(error))


def _open_error(error: OSError) -> FileError:
    """Map a failure to open a file for writing."""
    if error.errno in (errno.EACCES, errno.EPERM):
        return FileError(FileErrorKind.PERMISSION_DENIED, str(error))
    return FileError(FileErrorKind.IO_ERROR, str(error))


def _require_owner_writable(path: PathType) -> None:
    try:
        mode = os.stat(path).st_mode
    except OSError as exc:
        raise file_error_from_os_error(exc) from exc
    if not mode & stat.S_IWUSR:
        raise FileError(FileErrorKind.PERMISSION_DENIED, f"{os.fspath(path)} is not writable")


def _not_found(path: PathType) -> FileError:
    return FileError(FileErrorKind.FILE_NOT_FOUND, f"{os.fspath(path)} does not exist")


def _invalid(path: PathType, what: str) -> FileError:
    return FileError(FileErrorKind.INVALID_PATH, f"{os.fspath(path)} is not {what}")


def read_file(filepath: PathType) -> bytes:
    """Return the whole content of ``filepath``."""
    if not os.path.exists(filepath):
        raise _not_found(filepath)
    try:
        with open(filepath, "rb") as handle:
            return handle.read()
    except OSError as exc:
        raise FileError(FileErrorKind.IO_ERROR, str(exc)) from exc


def write_file(filepath: PathType, data: bytes) -> None:
    """Write ``data`` to ``filepath``, creating or truncating it."""
    if os.path.exists(filepath):
        _require_owner_writable(filepath)
    else:
        parent = Path(filepath).parent
        if str(Path(filepath)) != Path(filepath).name and parent.exists():
            _require_owner_writable(parent)
    try:
        with open(filepath, "wb") as handle:
            handle.write(bytes(data))
    except OSError as exc:
        raise _open_error(exc) from exc


def append_file(filepath: PathType, data: bytes) -> None:
    """Append ``data`` to the existing file ``filepath``."""
    if not os.path.exists(filepath):
        raise _not_found(filepath)
    _require_owner_writable(filepath)
    try:
        with open(filepath, "ab") as handle:
            handle.write(bytes(data))
    except OSError as exc:
        raise _open_error(exc) from exc


def create_file(filepath: PathType) -> None:
    """Create a new empty file; fail if anything already exists at ``filepath``."""
    if os.path.exists(filepath):
        raise FileError(
            FileErrorKind.FILE_ALREADY_EXISTS, f"{os.fspath(filepath)} already exists"
        )
    path = Path(filepath)
    if str(path) != path.name:
        parent = path.parent
        if not parent.exists():
            raise _not_found(parent)
        _require_owner_writable(parent)
    try:
        with open(filepath, "w"):
            pass
    except OSError as exc:
        raise _open_error(exc) from exc
    if not os.path.exists(filepath):
        raise _not_found(filepath)


def delete_file(filepath: PathType) -> None:
    """Delete the regular file ``filepath``."""
    if not os.path.exists(filepath):
        raise _not_found(filepath)
    if not os.path.isfile(filepath):
        raise _invalid(filepath, "a regular file")
    try:
        os.remove(filepath)
    except OSError as exc:
        raise file_error_from_os_error(exc) from exc


def get_file_info(filepath: PathType) -> os.stat_result:
    """Return the status of ``filepath``, following symbolic links."""
    try:
        return os.stat(filepath)
    except OSError as exc:
        raise file_error_from_os_error(exc) from exc


def file_exists(filepath: PathType) -> bool:
    """Return whether anything exists at ``filepath``."""
    return os.path.exists(filepath)


def create_directory(dirpath: PathType) -> None:
    """Create a single directory whose parent must exist."""
    if os.path.exists(dirpath):
        if os.path.isdir(dirpath):
            raise FileError(
                FileErrorKind.DIRECTORY_ALREADY_EXISTS,
                f"{os.fspath(dirpath)} already exists",
            )
        raise _invalid(dirpath, "a directory")
    try:
        os.mkdir(dirpath)
    except OSError as exc:
        raise file_error_from_os_error(exc) from exc


def create_directories(dirpath: PathType) -> None:
    """Create a directory and any missing parents; an existing directory is fine."""
    try:
        os.makedirs(dirpath, exist_ok=True)
    except OSError as exc:
        raise file_error_from_os_error(exc) from exc


def delete_directory(dirpath: PathType, recursive: bool = False) -> None:
    """Delete a directory; without ``recursive`` it must be empty."""
    if not os.path.exists(dirpath):
        raise _not_found(dirpath)
    if not os.path.isdir(dirpath):
        raise _invalid(dirpath, "a directory")
    try:
        if recursive:
            if os.path.islink(dirpath):
                os.unlink(dirpath)
            else:
                shutil.rmtree(dirpath)
        else:
            os.rmdir(dirpath)
    except OSError as exc:
        if exc.errno == errno.ENOTEMPTY:
            raise FileError(FileErrorKind.DIRECTORY_NOT_EMPTY, str(exc)) from exc
        raise file_error_from_os_error(exc) from exc


def list_directory(dirpath: PathType) -> list[str]:
    """Return the names of the entries in ``dirpath``."""
    if not os.path.exists(dirpath):
        raise _not_found(dirpath)
    if not os.path.isdir(dirpath):
        raise _invalid(dirpath, "a directory")
    try:
        return os.listdir(dirpath)
    except OSError as exc:
        raise file_error_from_os_error(exc) from exc


def change_directory(dirpath: PathType) -> None:
    """Make ``dirpath`` the current working directory."""
    if not os.path.exists(dirpath):
        raise _not_found(dirpath)
    if not os.path.isdir(dirpath):
        raise _invalid(dirpath, "a directory")
    try:
        os.chdir(dirpath)
    except OSError as exc:
        raise file_error_from_os_error(exc) from exc


def get_current_directory() -> str:
    """Return the current working directory."""
    try:
        return os.getcwd()
    except OSError as exc:
        raise file_error_from_os_error(exc) from exc


def rename_path(oldpath: PathType, newpath: PathType) -> None:
    """Rename ``oldpath`` to ``newpath``, which must not exist yet."""
    if not os.path.exists(oldpath):
        raise _not_found(oldpath)
    if os.path.exists(newpath):
        raise FileError(
            FileErrorKind.FILE_ALREADY_EXISTS, f"{os.fspath(newpath)} already exists"
        )
    try:
        os.rename(oldpath, newpath)
    except OSError as exc:
        raise file_error_from_os_error(exc) from exc


def copy_file(source: PathType, destination: PathType) -> None:
    """Copy the regular file ``source`` to ``destination``, overwriting it."""
    if not os.path.exists(source) or not os.path.isfile(source):
        raise _not_found(source)
    try:
        shutil.copyfile(source, destination)
    except shutil.SameFileError as exc:
        raise FileError(FileErrorKind.FILE_ALREADY_EXISTS, str(exc)) from exc
    except OSError as exc:
        raise file_error_from_os_error(exc) from exc


def get_file_size(filepath: PathType) -> int:
    """Return the size in bytes of the regular file ``filepath``."""
    if not os.path.exists(filepath):
        raise _not_found(filepath)
    if not os.path.isfile(filepath):
        raise _invalid(filepath, "a regular file")
    try:
        return os.path.getsize(filepath)
    except OSError as exc:
        raise file_error_from_os_error(exc) from exc