import re

from ringkas.prompts.composer import BULLET

# A list line: optional indent, a bullet glyph or "1." / "1)", then text.
_LIST_MARKER_RE = re.compile(
    r"^\s*(?P<marker>[-*+–—·•‣⁃∙→"
    r"■▪▫○●◦➢]|\d{1,3}[.)])\s+\S"
)


def find_bullet_violations(output: str) -> list[str]:
    """Return the lines of a key-points list that use a marker other than ``•``."""
    violations = []
    for line in output.splitlines():
        match = _LIST_MARKER_RE.match(line)
        if match and match.group("marker") != BULLET:
            violations.append(line.strip())
    return violations
