from enum import Enum


class Theme(str, Enum):
    light = "light"
    dark = "dark"
