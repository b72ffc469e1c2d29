from __future__ import annotations

import re

# ESC(0x1b) 또는 CSI(0x9b) + prefix + 숫자 파라미터 + 종결 문자
_ANSI_RE = re.compile(
    r"[\u001b\u009b][\[()#;?]*(?:[0-9]{1,4}(?:;[0-9]{0,4})*)?[0-9A-ORZcf-nqry=><]"
)


def strip_color_codes(text: str) -> str:
    """
    formatter 출력에서 ANSI escape sequence 를 제거한다.
    그 외 문자(공백, 개행 포함)는 그대로 둔다.

    제거 후 남은 ESC 가 뒤 문자와 새 sequence 를 만들 수 있으므로
    (예: "\\x1b\\x1b[1mm") 더 이상 바뀌지 않을 때까지 반복한다.
    """
    if not text:
        return text
    result = _ANSI_RE.sub("", text)
    while result != text:
        text = result
        result = _ANSI_RE.sub("", text)
    return result
