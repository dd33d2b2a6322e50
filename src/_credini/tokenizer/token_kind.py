from enum import Enum, auto, unique


@unique
class TokenKind(Enum):
    SECTION_OPEN = auto()
    WORD = auto()
    EQUALS = auto()

    @classmethod
    def markers(cls):
        return {
            cls.SECTION_OPEN: "[",
            cls.EQUALS: "=",
        }
