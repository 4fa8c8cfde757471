from enum import StrEnum


class EscapeInteriorStrategy(StrEnum):
    NONE = "none"
    CARDIOID = "cardioid"


class LaplacianStrategy(StrEnum):
    CONVOLVE = "convolve"
    ROLL = "roll"
