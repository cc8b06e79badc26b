from __future__ import annotations

from typing import List

from .models import DateStamp

SECTION_HEADERS = (
    "### 📌 오늘 배운 것",
    "### 🧠 느낀 점",
    "### 💻 코드 예시",
    "### 🔗 참고 링크",
)

_BULLET = "- "


class TilTemplate:
    """Fixed markdown skeleton for a single day's entry."""

    def render(self, stamp: DateStamp) -> str:
        learned, felt, code, links = SECTION_HEADERS
        lines: List[str] = [
            f"## 📅 {stamp.isoformat()}",
            "",
            learned,
            _BULLET,
            "",
            felt,
            _BULLET,
            "",
            code,
            "```js",
            "// 코드",
            "```",
            "",
            links,
            _BULLET,
        ]
        return "\n".join(lines) + "\n"
