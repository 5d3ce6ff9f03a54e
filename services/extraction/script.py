# services/extraction/script.py
"""
Script detection for query words and result titles.

A string counts as Chinese when it contains *any* CJK Unified Ideograph
(basic block, extension A, and the supplementary-plane extensions B–E).
Partially Chinese input such as ``"iPhone 手机"`` is therefore Chinese.
"""

import re

CJK_IDEOGRAPH_RE = re.compile(
    "["
    "\u4e00-\u9fff"            # CJK Unified Ideographs
    "\u3400-\u4dbf"            # Extension A
    "\U00020000-\U0002a6df"    # Extension B
    "\U0002a700-\U0002b73f"    # Extension C
    "\U0002b740-\U0002b81f"    # Extension D
    "\U0002b820-\U0002ceaf"    # Extension E
    "]"
)


def is_chinese_script(s: str) -> bool:
    return CJK_IDEOGRAPH_RE.search(s or "") is not None
