import enum

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


def wrap_int32(v: int) -> int:
    """Two's complement wrap-around to the signed 32-bit range"""
    return (v - INT32_MIN) % 2**32 + INT32_MIN
