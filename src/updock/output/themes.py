"""Update level color map."""

from updock.models import UpdateLevel

LEVEL_COLORS: dict[UpdateLevel, str] = {
    UpdateLevel.NO_UPDATES: "green",
    UpdateLevel.COMPATIBLE_UPDATE: "yellow",
    UpdateLevel.BREAKING_UPDATE: "red bold",
    UpdateLevel.FAILURE: "red",
}

LEVEL_LABELS: dict[UpdateLevel, str] = {
    UpdateLevel.NO_UPDATES: "up to date",
    UpdateLevel.COMPATIBLE_UPDATE: "compatible update",
    UpdateLevel.BREAKING_UPDATE: "breaking update",
    UpdateLevel.FAILURE: "failure",
}


def styled_level(level: UpdateLevel) -> str:
    color = LEVEL_COLORS.get(level, "white")
    return f"[{color}]{LEVEL_LABELS.get(level, level.value)}[/{color}]"
