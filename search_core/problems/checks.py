from __future__ import annotations
import math
from collections import deque
from typing import Optional

from ..core.problem import Problem


class ProblemCheckError(AssertionError):
    pass


def sanity_check_problem(problem: Problem, max_states: int = 10_000,
                         allow_negative: bool = False) -> str:
    """Walks states breadth-first and checks every step cost is a finite number.

    Negative costs are rejected too unless ``allow_negative`` (uniform-cost
    search refuses them). Stops quietly after ``max_states`` distinct states.
    """
    seen = set()
    q = deque([problem.initial_state()])
    while q and len(seen) < max_states:
        s = q.popleft()
        if s in seen:
            continue
        seen.add(s)
        for a in problem.actions(s):
            s2 = problem.result(s, a)
            cost: Optional[float] = problem.step_cost(s, a, s2)
            if cost is None:
                raise ProblemCheckError(f"step_cost is None for (s={s!r}, a={a!r}, s'={s2!r})")
            if not math.isfinite(float(cost)):
                raise ProblemCheckError(f"step_cost is not finite for (s={s!r}, a={a!r}, s'={s2!r}): {cost!r}")
            if cost < 0 and not allow_negative:
                raise ProblemCheckError(f"step_cost is negative for (s={s!r}, a={a!r}, s'={s2!r}): {cost!r}")
            q.append(s2)
    return f"OK: visited {len(seen)} states; all step costs valid."
