"""Population size recurrences.

Python integers are used throughout, the counts exceed 64 bits well within
the 100 month range of typical inputs.
"""

import collections


def rabbit_pairs(months: int, litter_size: int) -> int:
    """number of rabbit pairs alive after months

    Parameters
    ----------
    months
        number of months, the first month starts with one newborn pair
    litter_size
        number of pairs each mature pair produces every month

    Notes
    -----
    Implements F(n) = F(n - 1) + litter_size * F(n - 2), F(1) = F(2) = 1.
    """
    if months < 1:
        raise ValueError(f"months must be >= 1, not {months}")
    if litter_size < 0:
        raise ValueError(f"litter_size must be >= 0, not {litter_size}")

    previous, current = 0, 1
    for _ in range(months - 1):
        previous, current = current, current + litter_size * previous
    return current


def mortal_rabbit_pairs(months: int, lifespan: int) -> int:
    """number of rabbit pairs alive after months when rabbits die after
    lifespan months

    Parameters
    ----------
    months
        number of months, the first month starts with one newborn pair
    lifespan
        number of months a rabbit lives

    Notes
    -----
    Each mature pair produces one pair per month. Pairs are tracked by age,
    the oldest cohort dies as the population ages by one month.
    """
    if lifespan < 1:
        raise ValueError(f"lifespan is too short: {lifespan}")
    if months < 1:
        raise ValueError(f"months must be >= 1, not {months}")

    # ages[i] is the number of pairs that are i months old
    ages = collections.deque([1] + [0] * (lifespan - 1), maxlen=lifespan)
    for _ in range(months - 1):
        newborn = sum(ages) - ages[0]
        ages.appendleft(newborn)
    return sum(ages)
