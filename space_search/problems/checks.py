from collections import deque

def sanity_check_states(start, max_states: int = 10_000):
    """Walks states breadth-first and checks no edge cost is None (for states used with A*)."""
    seen = set()
    q = deque([start])
    while q and len(seen) < max_states:
        s = q.popleft()
        if s in seen:
            continue
        seen.add(s)
        for s2, cost in s.next_states_with_costs():
            if cost is None:
                raise AssertionError(f"edge cost is None for (s={s!r}, s'={s2!r})")
            q.append(s2)
    return f"OK: visited {len(seen)} states; no None costs."
