from enum import Enum


class Color(str, Enum):
    """Closed set of product colours."""

    RED = "red"
    GREEN = "green"
    BLUE = "blue"

    def __str__(self) -> str:
        return self.value


class Size(str, Enum):
    """Closed set of product sizes."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"

    def __str__(self) -> str:
        return self.value
