from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union

from jumperjonesy.domain.game_state import (
    GameOver,
    GameState,
    LevelComplete,
    LevelSelect,
    Menu,
    PlayingInfinite,
    PlayingLevel,
)
from jumperjonesy.domain.obstacles import GenerationMode


class Button(enum.Enum):
    LEVELS = "levels"
    INFINITE = "infinite"
    BACK = "back"
    RETURN_TO_MENU = "return_to_menu"
    RETRY = "retry"
    SELECT_LEVEL = "select_level"


# ----- Events -----

@dataclass(frozen=True)
class ButtonClicked:
    button: Button


@dataclass(frozen=True)
class LevelChosen:
    level: int


@dataclass(frozen=True)
class Collided:
    pass


@dataclass(frozen=True)
class LevelCleared:
    pass


@dataclass(frozen=True)
class JumpPressed:
    pass


Event = Union[ButtonClicked, LevelChosen, Collided, LevelCleared, JumpPressed]


# ----- Commands (applied by the controller, in order) -----

@dataclass(frozen=True)
class ResetRun:
    """Player back on the ground, obstacles cleared."""


@dataclass(frozen=True)
class ResetScore:
    pass


@dataclass(frozen=True)
class Regenerate:
    mode: GenerationMode


@dataclass(frozen=True)
class SetLevel:
    level: int


@dataclass(frozen=True)
class AdvanceLevel:
    pass


@dataclass(frozen=True)
class HaltPlayer:
    """Freeze the player where the crash happened."""


@dataclass(frozen=True)
class Jump:
    pass


Command = Union[ResetRun, ResetScore, Regenerate, SetLevel, AdvanceLevel, HaltPlayer, Jump]


@dataclass(frozen=True)
class Transition:
    state: GameState
    commands: tuple[Command, ...] = ()


def transition(state: GameState, event: Event, *, level_count: int = 50) -> Transition:
    """
    Pure transition function. Events that mean nothing in `state` leave it
    unchanged with no commands.
    """
    if isinstance(state, Menu):
        if event == ButtonClicked(Button.LEVELS):
            return Transition(LevelSelect())
        if event == ButtonClicked(Button.INFINITE):
            return Transition(PlayingInfinite(), (ResetScore(), ResetRun(), Regenerate(GenerationMode.ENDLESS)))

    elif isinstance(state, LevelSelect):
        if event == ButtonClicked(Button.BACK):
            return Transition(Menu())
        if isinstance(event, LevelChosen) and 1 <= event.level <= level_count:
            return Transition(
                PlayingLevel(level=event.level),
                (SetLevel(event.level), ResetRun(), Regenerate(GenerationMode.LEVEL)),
            )

    elif isinstance(state, (PlayingLevel, PlayingInfinite)):
        if isinstance(event, JumpPressed):
            return Transition(state, (Jump(),))
        if isinstance(event, Collided):
            return Transition(GameOver(previous=state), (HaltPlayer(),))
        if isinstance(event, LevelCleared) and isinstance(state, PlayingLevel):
            return Transition(LevelComplete(), (ResetRun(), AdvanceLevel()))

    elif isinstance(state, GameOver):
        if event == ButtonClicked(Button.RETURN_TO_MENU):
            return Transition(Menu(), (ResetRun(), ResetScore()))
        if event == ButtonClicked(Button.RETRY):
            if isinstance(state.previous, PlayingInfinite):
                return Transition(state.previous, (ResetRun(), ResetScore(), Regenerate(GenerationMode.ENDLESS)))
            return Transition(
                state.previous,
                (SetLevel(state.previous.level), ResetRun(), Regenerate(GenerationMode.LEVEL)),
            )

    elif isinstance(state, LevelComplete):
        if event == ButtonClicked(Button.RETURN_TO_MENU):
            return Transition(Menu(), (ResetScore(),))
        if event == ButtonClicked(Button.SELECT_LEVEL):
            return Transition(LevelSelect())

    return Transition(state)
