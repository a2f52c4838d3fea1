# informed_search/core/utils.py
# Rebuilds the winning path by walking the came-from map back from the final state.
from __future__ import annotations
from typing import Dict, List, Optional, TypeVar

S = TypeVar("S")


def reconstruct_path(came_from: Dict[S, Optional[S]], final: S) -> List[S]:
    path = [final]
    cur = came_from[final]
    while cur is not None:
        path.append(cur)
        cur = came_from[cur]
    path.reverse()
    return path
