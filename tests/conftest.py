"""Shared fixtures for generator tests."""

import pytest


class ScriptedSource:
    """Random source that replays scripted draws.

    random() pops from draws and integers(high) pops from picks; once a
    script runs out the default value is returned. With the defaults every
    choice lands on the first candidate.
    """

    def __init__(
        self,
        draws: list[float] | None = None,
        picks: list[int] | None = None,
        default_draw: float = 0.5,
        default_pick: int = 0,
    ) -> None:
        self.draws = list(draws or [])
        self.picks = list(picks or [])
        self.default_draw = default_draw
        self.default_pick = default_pick
        self.pick_bounds: list[int] = []

    def random(self) -> float:
        return self.draws.pop(0) if self.draws else self.default_draw

    def integers(self, high: int) -> int:
        pick = self.picks.pop(0) if self.picks else self.default_pick
        assert 0 <= pick < high, f"scripted pick {pick} outside [0, {high})"
        self.pick_bounds.append(high)
        return pick


@pytest.fixture
def scripted():
    """Factory for ScriptedSource instances."""
    return ScriptedSource
