# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Wildcard name matching.

Patterns understand two wildcards: ``*`` matches any run of characters
(including none) and ``?`` matches exactly one character. Every other
character, ``[`` and ``\\`` included, matches itself. Matching is
case-sensitive and applies to whole names.
"""

from __future__ import annotations

from typing import Final

__all__ = ["ANY_CHAR", "ANY_RUN", "matches"]

ANY_RUN: Final[str] = "*"
ANY_CHAR: Final[str] = "?"


def matches(name: str, pattern: str) -> bool:
    """Return True if ``pattern`` matches all of ``name``.

    Runs in ``O(len(name) * len(pattern))`` worst case: on a mismatch the
    scan returns to the most recent ``*`` and lets it absorb one more
    character.

    Examples:
        >>> matches("report.txt", "*.txt")
        True
        >>> matches("a.txt", "?.txt")
        True
        >>> matches("ab.txt", "?.txt")
        False
        >>> matches("", "")
        True
    """
    n = p = 0
    star = -1
    resume = 0
    while n < len(name):
        if (
            p < len(pattern)
            and pattern[p] != ANY_RUN
            and pattern[p] in (ANY_CHAR, name[n])
        ):
            n += 1
            p += 1
        elif p < len(pattern) and pattern[p] == ANY_RUN:
            star, resume = p, n
            p += 1
        elif star >= 0:
            p = star + 1
            resume += 1
            n = resume
        else:
            return False
    while p < len(pattern) and pattern[p] == ANY_RUN:
        p += 1
    return p == len(pattern)
