from dataclasses import dataclass
from typing import Optional

# Front-end settings. Defaults reproduce the plain tokenize/parse behavior:
# unterminated strings are accepted and nesting depth is unbounded.

@dataclass
class Options:
    strict_strings: bool = False
    max_depth: Optional[int] = None
