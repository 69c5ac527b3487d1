#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.


from __future__ import annotations


class EcojiError(ValueError):
    pass


class UnexpectedEofError(EcojiError):
    pass


class InvalidDataError(EcojiError):
    pass


class NotUtf8Error(InvalidDataError):
    def __init__(self, message: str = "byte stream did not contain valid utf8") -> None:
        super().__init__(message)


class NotInAlphabetError(InvalidDataError):
    def __init__(self, char: str) -> None:
        super().__init__(f"input character {char!r} is not a part of the Ecoji alphabet")
        self.char = char


__all__ = [
    "EcojiError",
    "InvalidDataError",
    "NotInAlphabetError",
    "NotUtf8Error",
    "UnexpectedEofError",
]
