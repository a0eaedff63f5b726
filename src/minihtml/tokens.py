from __future__ import annotations

from typing import Literal


class Tag:
    __slots__ = ("attr_text", "kind", "name", "self_closing")

    START: Literal[0] = 0
    END: Literal[1] = 1

    kind: int
    name: str
    attr_text: str
    self_closing: bool

    def __init__(
        self,
        kind: int,
        name: str,
        attr_text: str = "",
        self_closing: bool = False,
    ) -> None:
        self.kind = kind
        self.name = name
        self.attr_text = attr_text
        self.self_closing = bool(self_closing)

    def __repr__(self) -> str:
        slash = "/" if self.kind == Tag.END else ""
        closing = " self_closing" if self.self_closing else ""
        return f"Tag(<{slash}{self.name}>{closing})"


class CharacterTokens:
    __slots__ = ("data",)

    data: str

    def __init__(self, data: str) -> None:
        self.data = data

    def __repr__(self) -> str:
        return f"CharacterTokens({self.data!r})"
