"""Choosing the display color category of a directory entry."""

from __future__ import annotations

import stat
from collections.abc import Collection
from dataclasses import dataclass
from enum import IntEnum

__all__ = ["ColorType", "FileType", "FileInfo", "classify", "no_color"]


class ColorType(IntEnum):
    """Color categories, in the order of the color table."""

    DEFT = 0
    DIRE = 1
    LINK = 2
    EXEC = 3
    ARCH = 4
    FIFO = 5
    BKLN = 6
    SOCK = 7
    IMAG = 8
    AUDI = 9
    BLCK = 10
    CHAR = 11
    SUID = 12
    SGID = 13
    CAPA = 14
    SKDR = 15
    OWDR = 16
    SOWD = 17


class FileType(IntEnum):
    """Kinds of directory entry."""

    REGULAR = 0
    DIRECTORY = 1
    CHAR_DEVICE = 2
    BLOCK_DEVICE = 3
    FIFO = 4
    SYMLINK = 5
    SOCKET = 6
    UNKNOWN = 7


_BASIC_COLORS = {
    FileType.REGULAR: ColorType.DEFT,
    FileType.DIRECTORY: ColorType.DIRE,
    FileType.CHAR_DEVICE: ColorType.CHAR,
    FileType.BLOCK_DEVICE: ColorType.BLCK,
    FileType.FIFO: ColorType.FIFO,
    FileType.SYMLINK: ColorType.LINK,
    FileType.SOCKET: ColorType.SOCK,
    FileType.UNKNOWN: ColorType.BKLN,
}

_ANY_EXEC = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


@dataclass(frozen=True)
class FileInfo:
    """What the color choice needs to know about an entry.

    ``mode`` is None when the permission bits could not be read.
    """

    name: str
    type: FileType = FileType.REGULAR
    mode: int | None = None
    broken: bool = False


def _extension_color(
    name: str,
    archive_ext: Collection[str],
    image_ext: Collection[str],
    audio_ext: Collection[str],
) -> ColorType:
    dot = name.rfind(".")
    if dot < 0:
        return ColorType.DEFT
    extension = name[dot + 1:]
    if extension in archive_ext:
        return ColorType.ARCH
    if extension in image_ext:
        return ColorType.IMAG
    if extension in audio_ext:
        return ColorType.AUDI
    return ColorType.DEFT


def classify(
    info: FileInfo,
    archive_ext: Collection[str] = (),
    image_ext: Collection[str] = (),
    audio_ext: Collection[str] = (),
) -> ColorType:
    """Return the color category of ``info``.

    The extension lists name file extensions without the leading dot.
    """
    try:
        basic = _BASIC_COLORS[FileType(info.type)]
    except ValueError:
        basic = ColorType.BKLN

    mode = info.mode
    if mode is None:
        if basic is ColorType.DEFT:
            return _extension_color(info.name, archive_ext, image_ext, audio_ext)
        return basic

    if basic is ColorType.DEFT:
        if mode & stat.S_ISUID:
            return ColorType.SUID
        if mode & stat.S_ISGID:
            return ColorType.SGID
        if mode & _ANY_EXEC:
            return ColorType.EXEC
        return _extension_color(info.name, archive_ext, image_ext, audio_ext)
    if basic is ColorType.DIRE:
        sticky = bool(mode & stat.S_ISVTX)
        other_writable = bool(mode & stat.S_IWOTH)
        if sticky and other_writable:
            return ColorType.SOWD
        if sticky:
            return ColorType.SKDR
        if other_writable:
            return ColorType.OWDR
        return ColorType.DIRE
    if basic is ColorType.LINK:
        return ColorType.BKLN if info.broken else ColorType.LINK
    return basic


def no_color(info: FileInfo) -> ColorType:
    """Color choice used when coloring is off: always the default."""
    return ColorType.DEFT