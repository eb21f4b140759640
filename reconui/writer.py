# reconui/writer.py

import html
from typing import List


class Writer:
    """
    Append-only render sink.

    Components write markup fragments into it while rendering. Nothing in the
    toolkit reads a fragment back; the joined text is only collected once the
    render is complete via `getvalue()`.
    """

    def __init__(self):
        self._parts: List[str] = []

    def write(self, *parts) -> None:
        """Appends the given parts as-is. Non-string parts are converted with str()."""
        for part in parts:
            self._parts.append(part if isinstance(part, str) else str(part))

    def write_escaped(self, text: str) -> None:
        """Appends HTML-escaped text."""
        self._parts.append(html.escape(text, quote=True))

    def write_attr(self, name: str, value) -> None:
        """Appends ` name="value"` with the value escaped."""
        self._parts.append(f' {name}="{html.escape(str(value), quote=True)}"')

    def getvalue(self) -> str:
        return "".join(self._parts)

    def __len__(self):
        return len(self._parts)
