from __future__ import annotations

import hashlib

import numpy as np
from numpy.random import Generator


class RngManager:
    """
    Per-call source of randomness.
    Named streams are derived by hashing the root seed with the stream name,
    so adding a new consumer never shifts the numbers another one sees:
      seed_for("model.based/tree")    -> stable int seed (sklearn random_state)
      generator("landmarking/folds")  -> np.random.Generator from that seed
    """

    def __init__(self, seed: int | None):
        self._root = 0 if seed is None else int(seed) & 0xFFFFFFFF

    @property
    def root(self) -> int:
        return self._root

    def seed_for(self, name: str) -> int:
        h = hashlib.sha256(f"{self._root}:{name}".encode("utf-8")).digest()
        # 32 bits: sklearn random_state must fit in uint32
        return int.from_bytes(h[:4], "little", signed=False)

    def generator(self, name: str) -> Generator:
        return np.random.default_rng(self.seed_for(name))
