from dataclasses import dataclass

import numpy as np

from .logging_config import get_logger

logger = get_logger(__name__)

# Largest value the generator draws; keeps every value inside a signed 64-bit integer
MAX_VALUE = 2**63 - 2


@dataclass(frozen=True)
class Dataset:
    """
    A sorted collection of unique values together with its probe sets.
    Every valid probe is a member of ``items``; no invalid probe is.
    """
    items: tuple[int, ...]
    valid_probes: tuple[int, ...]
    invalid_probes: tuple[int, ...]

    def __len__(self):
        return len(self.items)


def _draw_unique(rng: np.random.Generator, count: int, max_value: int, exclude: np.ndarray) -> np.ndarray:
    """
    Draws ``count`` distinct integers in [0, max_value] that are not in ``exclude``.
    Keeps sampling until enough new values are collected.
    """
    collected = np.empty(0, dtype=np.int64)
    while len(collected) < count:
        needed = count - len(collected)
        # Oversample a little so collisions rarely need another round
        candidates = rng.integers(0, max_value, size=needed + needed // 10 + 8, dtype=np.int64, endpoint=True)
        candidates = np.unique(candidates)
        candidates = candidates[~np.isin(candidates, exclude)]
        candidates = candidates[~np.isin(candidates, collected)]
        # Keep the draw order random before truncating
        rng.shuffle(candidates)
        collected = np.concatenate([collected, candidates[:needed]])
    return collected


def generate_dataset(size: int, num_valid: int, num_invalid: int, seed: int,
                     max_value: int = MAX_VALUE) -> Dataset:
    """
    Generates ``size`` unique random integers in [0, max_value], sorted ascending,
    plus ``num_valid`` probes drawn from them and ``num_invalid`` distinct probes absent from them.

    Valid probes are sampled without replacement when there are enough items,
    otherwise with replacement. The same seed always yields the same dataset.

    Raises:
        ValueError: if a count is negative or the value range cannot supply enough unique values.
    """
    if size < 0 or num_valid < 0 or num_invalid < 0:
        raise ValueError("Dataset size and probe counts must be non-negative")
    if not 0 <= max_value <= MAX_VALUE:
        raise ValueError(f"max_value must be in [0, {MAX_VALUE}]")
    value_space = max_value + 1
    if size > value_space:
        raise ValueError(f"Cannot draw {size} unique values from a range of {value_space}")
    if num_invalid > value_space - size:
        raise ValueError(
            f"Cannot draw {num_invalid} absent values: only {value_space - size} values are left in the range"
        )
    if num_valid > 0 and size == 0:
        raise ValueError("Cannot draw valid probes from an empty dataset")

    rng = np.random.default_rng(seed)

    logger.info("Generating %d unique values (seed=%#x)", size, seed)
    values = np.sort(_draw_unique(rng, size, max_value, np.empty(0, dtype=np.int64)))

    if num_valid == 0:
        valid = np.empty(0, dtype=np.int64)
    else:
        valid = rng.choice(values, size=num_valid, replace=num_valid > size)

    invalid = _draw_unique(rng, num_invalid, max_value, values)
    logger.debug("Drew %d valid and %d invalid probes", len(valid), len(invalid))

    # Python ints compare much faster than numpy scalars inside the search loops
    return Dataset(
        items=tuple(values.tolist()),
        valid_probes=tuple(valid.tolist()),
        invalid_probes=tuple(invalid.tolist()),
    )
